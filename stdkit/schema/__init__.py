from .json_format_options import JsonFormatOptions
from .runtime_info import RuntimeInfo
from .stdkit_config import JsonConfig, LogConfig, StdkitConfig

__all__ = [
    # Config
    "JsonConfig",
    "LogConfig",
    "StdkitConfig",
    # Helpers
    "JsonFormatOptions",
    "RuntimeInfo",
]
