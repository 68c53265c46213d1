"""stdkit: small stateless helpers for strings, JSON, numbers and runtime introspection."""

from .config import init_config
from .context import BaseContext, C
from .enumeration import RoundMode, TypeName
from .exceptions import (
    InvalidCallableError,
    InvalidInputError,
    JsonFileNotFoundError,
    JsonParseError,
    OutputDirNotFoundError,
    StdkitError,
)
from .utils import CaseConverter, JsonHelper, MathHelper, PyHelper, Timer, timer

__version__ = "0.1.0"

__all__ = [
    "init_config",
    "BaseContext",
    "C",
    "RoundMode",
    "TypeName",
    "InvalidCallableError",
    "InvalidInputError",
    "JsonFileNotFoundError",
    "JsonParseError",
    "OutputDirNotFoundError",
    "StdkitError",
    "CaseConverter",
    "JsonHelper",
    "MathHelper",
    "PyHelper",
    "Timer",
    "timer",
]
