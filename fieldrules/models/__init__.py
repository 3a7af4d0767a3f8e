"""Data model for rule evaluation."""

from fieldrules.models.domain import (
    FieldDescriptor,
    RuleContext,
    RuleFunc,
    RuleInvocation,
    RuleSpec,
)
from fieldrules.models.enums import FieldKind

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "RuleContext",
    "RuleFunc",
    "RuleInvocation",
    "RuleSpec",
]
