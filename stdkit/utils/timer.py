import functools
import inspect
import time
from typing import Any, Callable, TypeVar, cast

from loguru import logger

from .py_helper import memory_usage, runtime
from ..schema import RuntimeInfo

F = TypeVar("F", bound=Callable[..., Any])


class Timer:
    """Measure a block of code.

    ```
    with Timer("load") as t:
        ...
    t.info.runtime  # '12.345ms'
    ```
    """

    def __init__(self, name: str = "", use_log: bool = True, real_usage: bool = False):
        self.name = name
        self.use_log = use_log
        self.real_usage = real_usage
        self.start_time: float = 0.0
        self.start_memory: int = 0
        self.info: RuntimeInfo | None = None

    def __enter__(self):
        self.start_time = time.time()
        self.start_memory = memory_usage(self.real_usage)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.info = runtime(self.start_time, self.start_memory, {"name": self.name}, self.real_usage)
        if self.use_log:
            logger.info(f"========== timer.{self.name}, time_cost={self.info.runtime} ==========")
        return False


def timer(func: F) -> F:
    """Log the wall time of each call; works for sync and async functions."""

    @functools.wraps(func)
    async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            logger.info(f"========== timer.{func.__name__}, time_cost={time.perf_counter() - start_time:.6f}s ==========")

    @functools.wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            logger.info(f"========== timer.{func.__name__}, time_cost={time.perf_counter() - start_time:.6f}s ==========")

    if inspect.iscoroutinefunction(func):
        return cast(F, async_wrapper)
    return cast(F, sync_wrapper)
