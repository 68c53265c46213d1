"""Enumerations shared across stdkit."""

from .round_mode import RoundMode
from .type_name import TypeName

__all__ = [
    "RoundMode",
    "TypeName",
]
