"""Core data model for rule evaluation.

RuleInvocation and RuleSpec are immutable pydantic value objects.
FieldDescriptor and RuleContext are plain dataclasses: they wrap arbitrary
user values on the hot path and must not coerce or copy them.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fieldrules.models.enums import FieldKind


class RuleInvocation(BaseModel):
    """One (rule name, parameter) pair attached to a field.

    Attributes:
        name: Registered rule name (e.g. "min")
        param: Rule parameter string, "" when absent (e.g. "3" for "min=3")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Rule name")
    param: str = Field(default="", description="Rule parameter")


@dataclass(frozen=True)
class FieldDescriptor:
    """Everything the evaluator needs to know about one field of a record.

    Attributes:
        name: Declared field name
        tag: Rule tag string, or a sequence of RuleInvocation ("" if untagged)
        value: Current runtime value
        kind: Runtime kind of the value
        annotation: Declared type annotation, if the record exposes one
    """

    name: str
    tag: Any
    value: Any
    kind: FieldKind
    annotation: Any = None


@dataclass(frozen=True)
class RuleContext:
    """Arguments passed to every rule function.

    Attributes:
        top: The record passed to validate()
        current: The record that declares the field (same as top, nested
            records are not walked)
        value: Field value under test
        kind: Runtime kind of the value
        annotation: Declared type annotation of the field (may be None)
        param: Rule parameter string from the tag
        field: Declared field name
    """

    top: Any
    current: Any
    value: Any
    kind: FieldKind
    annotation: Any
    param: str
    field: str


RuleFunc = Callable[[RuleContext], bool]


class RuleSpec(BaseModel):
    """A rule function paired with its default message, for batch registration."""

    model_config = ConfigDict(frozen=True)

    func: RuleFunc
    message: str = Field(description="Default message template for the rule")
