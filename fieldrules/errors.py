"""Error definitions.

Rule failures are plain data (RuleFailure); only configuration mistakes
surface as exceptions.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RuleFailure:
    """A single rule that did not hold for a field.

    Attributes:
        field: Declared field name (not normalized)
        rule: Rule name from the tag
        param: Rule parameter ("" when the tag gave none)
        value: Raw field value, kept for message substitution
    """

    field: str
    rule: str
    param: str
    value: Any


class FieldRulesError(Exception):
    """Base class for fieldrules configuration errors."""


class TagSyntaxError(FieldRulesError, ValueError):
    """Raised when a rule tag cannot be decomposed into rule invocations."""

    def __init__(self, tag: str, reason: str):
        super().__init__(f"Invalid rule tag {tag!r}: {reason}")
        self.tag = tag
        self.reason = reason


class UnsupportedRecordError(FieldRulesError, TypeError):
    """Raised when a record's fields cannot be enumerated."""

    def __init__(self, record: Any):
        super().__init__(
            f"Cannot describe fields of {type(record).__name__}: expected a pydantic model, "
            "a dataclass instance or an object implementing describe_fields()"
        )
        self.record_type = type(record)
