"""Declarative per-field validation for in-memory records.

Fields carry a rule tag ("required,min=3") under a configurable metadata
key. ValidationEngine evaluates every rule and returns per-field messages:

    errors, ok = ValidationEngine().validate(record)
    # ({"name": ["name is required"]}, False)
"""

from fieldrules.config import DEFAULT_MESSAGES, EngineSettings
from fieldrules.engine import ValidationEngine
from fieldrules.errors import FieldRulesError, RuleFailure, TagSyntaxError, UnsupportedRecordError
from fieldrules.models import FieldDescriptor, FieldKind, RuleContext, RuleInvocation, RuleSpec
from fieldrules.protocols import DescribesFields, HasFieldMessages, Validation

__all__ = [
    "DEFAULT_MESSAGES",
    "DescribesFields",
    "EngineSettings",
    "FieldDescriptor",
    "FieldKind",
    "FieldRulesError",
    "HasFieldMessages",
    "RuleContext",
    "RuleFailure",
    "RuleInvocation",
    "RuleSpec",
    "TagSyntaxError",
    "UnsupportedRecordError",
    "Validation",
    "ValidationEngine",
]
