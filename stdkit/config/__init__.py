from .config_parser import StdkitConfigParser, init_config

__all__ = [
    "StdkitConfigParser",
    "init_config",
]
