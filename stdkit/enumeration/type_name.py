"""Names of the primitive value types."""

from enum import Enum
from typing import List


class TypeName(str, Enum):
    # basic types
    INT = "int"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    BOOLEAN = "boolean"
    STRING = "string"

    # complex types
    ARRAY = "array"
    OBJECT = "object"
    RESOURCE = "resource"

    @classmethod
    def all(cls) -> List[str]:
        return [
            cls.ARRAY.value,
            cls.BOOL.value,
            cls.BOOLEAN.value,
            cls.DOUBLE.value,
            cls.FLOAT.value,
            cls.INT.value,
            cls.INTEGER.value,
            cls.OBJECT.value,
            cls.STRING.value,
            cls.RESOURCE.value,
        ]

    @classmethod
    def scalars(cls) -> List[str]:
        return [
            cls.BOOL.value,
            cls.BOOLEAN.value,
            cls.DOUBLE.value,
            cls.FLOAT.value,
            cls.INT.value,
            cls.INTEGER.value,
            cls.STRING.value,
        ]

    @classmethod
    def complexes(cls) -> List[str]:
        return [
            cls.ARRAY.value,
            cls.OBJECT.value,
            cls.RESOURCE.value,
        ]

    @classmethod
    def of(cls, value) -> "TypeName":
        """Short type name of a Python value; ``bool`` is checked before ``int``."""
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple, dict)):
            return cls.ARRAY
        if hasattr(value, "fileno") or hasattr(value, "read"):
            return cls.RESOURCE
        return cls.OBJECT
