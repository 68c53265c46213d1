import importlib
import io
import os
import pprint
import re
import time
from typing import Any, Callable, Iterable

import psutil
from loguru import logger

from .case_convert import name_change, upper_first
from ..exceptions import InvalidCallableError
from ..schema import RuntimeInfo


def value(val: Any) -> Any:
    """Return ``val()`` for callables, ``val`` otherwise."""
    if callable(val):
        return val()
    return val


def _resolve_dotted(path: str) -> Callable:
    # "pkg.mod:Class.method" or "pkg.mod.func"
    if ":" in path:
        module_name, attr_path = path.split(":", 1)
    else:
        module_name, _, attr_path = path.rpartition(".")

    if not module_name:
        raise InvalidCallableError(path)

    try:
        obj = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            obj = getattr(obj, attr)
    except (ImportError, AttributeError) as e:
        raise InvalidCallableError(path) from e

    return obj


def call(cb: Any, *args, **kwargs) -> Any:
    """Invoke a callback given in any of the supported forms.

    ``cb`` may be a callable, a dotted path string (``"os.path.join"`` or
    ``"pkg.mod:Class.method"``), or an ``(obj_or_class, "method_name")`` pair.
    """
    if isinstance(cb, str):
        cb = _resolve_dotted(cb)

    elif isinstance(cb, (tuple, list)) and len(cb) == 2 and isinstance(cb[1], str):
        owner, method = cb
        try:
            cb = getattr(owner, method)
        except AttributeError as e:
            raise InvalidCallableError(cb) from e

    if not callable(cb):
        raise InvalidCallableError(cb)

    return cb(*args, **kwargs)


def call_by_array(cb: Any, args: Iterable) -> Any:
    return call(cb, *args)


def init_object(obj: Any, options: dict) -> Any:
    """Set attributes on ``obj`` from ``options``.

    A ``set_<key>`` (or ``set<Key>`` for camel keys) method is preferred over
    plain attribute assignment.
    """
    for key, val in options.items():
        setter = getattr(obj, f"set_{name_change(key, False)}", None) or getattr(obj, f"set{upper_first(key)}", None)
        if callable(setter):
            setter(val)
        else:
            setattr(obj, key, val)

    return obj


def memory_usage(real_usage: bool = False) -> int:
    """Memory of the current process in bytes: ``vms`` with ``real_usage``, ``rss`` otherwise."""
    info = psutil.Process().memory_info()
    return info.vms if real_usage else info.rss


def peak_memory_usage() -> int:
    info = psutil.Process().memory_info()
    # only windows reports a peak working set
    return max(getattr(info, "peak_wset", 0), info.rss)


def runtime(start_time: float, start_mem: int = 0, info: dict | None = None, real_usage: bool = False) -> RuntimeInfo:
    """Resource usage since ``start_time`` (a ``time.time()`` value) and ``start_mem`` bytes."""
    end_time = time.time()
    end_memory = memory_usage(real_usage)

    result = RuntimeInfo.model_validate({
        **(info or {}),
        "start_time": start_time,
        "end_time": end_time,
        "end_memory": end_memory,
        "runtime": f"{(end_time - start_time) * 1000:,.3f}ms",
        "peak_memory": f"{peak_memory_usage() / 1024 / 1024:,.3f}Mb",
    })

    if start_mem:
        result.memory = f"{(end_memory - start_mem) / 1024:,.3f}kb"

    logger.debug(f"runtime={result.runtime} memory={result.memory} peak_memory={result.peak_memory}")
    return result


def dump_vars(*args) -> str:
    """Type-annotated dump of each argument, one per line."""
    lines = []
    for arg in args:
        type_name = type(arg).__name__
        if hasattr(arg, "__len__"):
            lines.append(f"{type_name}({len(arg)}) {pprint.pformat(arg, sort_dicts=False)}")
        else:
            lines.append(f"{type_name}({arg!r})")
    return "\n".join(lines) + "\n"


def print_vars(*args) -> str:
    return "".join(pprint.pformat(arg, sort_dicts=False) + os.linesep for arg in args)


def export_var(var: Any) -> str:
    """Compact ``repr`` of ``var`` that evaluates back to an equal value for literals."""
    return re.sub(r"\s*\n\s*", " ", pprint.pformat(var, sort_dicts=False))


def new_memory_stream(mode: str = "rwb") -> io.IOBase:
    return io.BytesIO() if "b" in mode else io.StringIO()


def env_param(name: str, default: str = "") -> str:
    return os.environ.get(name.upper(), default)


class PyHelper:
    """Namespace grouping the runtime helpers."""

    value = staticmethod(value)
    call = staticmethod(call)
    call_by_array = staticmethod(call_by_array)
    init_object = staticmethod(init_object)
    memory_usage = staticmethod(memory_usage)
    runtime = staticmethod(runtime)
    dump_vars = staticmethod(dump_vars)
    print_vars = staticmethod(print_vars)
    export_var = staticmethod(export_var)
    new_memory_stream = staticmethod(new_memory_stream)
    env_param = staticmethod(env_param)
