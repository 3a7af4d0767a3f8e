"""Enums shared by the walker and the built-in rules."""

from enum import Enum


class FieldKind(Enum):
    """Runtime kind of a field value.

    Size-aware rules (min, max, len, eq, ne) use the kind to decide between
    character count, numeric value and element count.
    """

    NIL = "nil"
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COLLECTION = "collection"  # list, tuple, set, dict, bytes
    RECORD = "record"  # nested pydantic model or dataclass (never walked)
    OTHER = "other"

    @property
    def is_numeric(self) -> bool:
        return self in (FieldKind.INT, FieldKind.FLOAT)
