from .case_convert import (
    CaseConverter,
    camel_case,
    name_change,
    nl2br,
    title_case,
    to_camel_case,
    to_lower,
    to_snake_case,
    to_upper,
    upper_first,
)
from .json_helper import JsonHelper, parse, parse_file, parse_string, pretty_json, strip_comments
from .logger_utils import init_logger
from .math_helper import MathHelper
from .py_helper import PyHelper, call, init_object, runtime, value
from .pydantic_config_parser import PydanticConfigParser
from .timer import Timer, timer

__all__ = [
    "CaseConverter",
    "camel_case",
    "name_change",
    "nl2br",
    "title_case",
    "to_camel_case",
    "to_lower",
    "to_snake_case",
    "to_upper",
    "upper_first",
    "JsonHelper",
    "parse",
    "parse_file",
    "parse_string",
    "pretty_json",
    "strip_comments",
    "init_logger",
    "MathHelper",
    "PyHelper",
    "call",
    "init_object",
    "runtime",
    "value",
    "PydanticConfigParser",
    "Timer",
    "timer",
]
