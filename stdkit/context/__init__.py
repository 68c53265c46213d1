from .base_context import BaseContext
from .registry import Registry
from .stdkit_context import C, StdkitContext

__all__ = [
    "BaseContext",
    "Registry",
    "StdkitContext",
    "C",
]
