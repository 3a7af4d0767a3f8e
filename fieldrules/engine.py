"""Validation engine: the public entry point.

Typical setup:

    engine = ValidationEngine(tag_name="valid")
    engine.add_validator("objectid", is_object_id, "%s must be a valid objectid")

    errors, ok = engine.validate(record)

Configure once, then share the engine between callers. validate() keeps no
state on the engine and reads one registry snapshot per call.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fieldrules.config import DEFAULT_MESSAGES, DEFAULT_TAG_NAME, EngineSettings
from fieldrules.evaluator import evaluate_field
from fieldrules.messages import resolve_message, to_snake
from fieldrules.models.domain import RuleFunc, RuleSpec
from fieldrules.protocols import HasFieldMessages
from fieldrules.rules import BUILTIN_RULES, RuleRegistry
from fieldrules.tags import compile_rules
from fieldrules.walker import describe_fields

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Validates records against per-field rule tags.

    Args:
        tag_name: Field metadata key holding the rule tag (e.g. "valid")
        messages: Default message templates; defaults to DEFAULT_MESSAGES
        log_unknown_rules: Log tags naming unregistered rules at debug level
    """

    def __init__(
        self,
        tag_name: str = DEFAULT_TAG_NAME,
        messages: Mapping[str, str] | None = None,
        log_unknown_rules: bool = True,
    ):
        if not tag_name or not tag_name.strip():
            msg = "Tag name cannot be empty"
            raise ValueError(msg)

        self.tag_name = tag_name
        self.log_unknown_rules = log_unknown_rules
        self._registry = RuleRegistry(
            rules=BUILTIN_RULES,
            messages=DEFAULT_MESSAGES if messages is None else messages,
        )
        logger.info(f"Validation engine created for tag '{tag_name}'")

    @classmethod
    def from_settings(cls, settings: EngineSettings | None = None) -> "ValidationEngine":
        settings = settings or EngineSettings()
        return cls(
            tag_name=settings.tag_name,
            messages=settings.messages,
            log_unknown_rules=settings.log_unknown_rules,
        )

    @property
    def rule_names(self) -> list[str]:
        return sorted(self._registry.snapshot().rules)

    @property
    def default_messages(self) -> dict[str, str]:
        """Copy of the current default message templates."""
        return dict(self._registry.snapshot().messages)

    def register(self, name: str, func: RuleFunc) -> None:
        """Register a rule function, replacing any rule of the same name."""
        self._registry.register(name, func)

    def register_default_message(self, name: str, template: str) -> None:
        """Set the default message template for one rule."""
        self._registry.register_default_message(name, template)

    def add_validator(self, name: str, func: RuleFunc, message: str) -> None:
        """Register a rule and its default message in one step."""
        self._registry.register_specs({name: RuleSpec(func=func, message=message)})

    def add_validators(self, specs: Mapping[str, RuleSpec]) -> None:
        """Register several rules with their default messages in one step."""
        self._registry.register_specs(specs)

    def set_default_messages(self, messages: Mapping[str, str]) -> None:
        """Replace every default message template.

        Rules left without a template no longer produce messages.
        """
        self._registry.replace_messages(messages)

    def validate(self, record: Any) -> tuple[dict[str, list[str]], bool]:
        """Validate one record.

        Args:
            record: Pydantic model, dataclass instance or DescribesFields object

        Returns:
            Tuple of (messages by snake_case field name, True if no messages)

        Raises:
            UnsupportedRecordError: If the record's fields cannot be enumerated
            TagSyntaxError: If a field declares a malformed tag
        """
        snapshot = self._registry.snapshot()
        overrides = _record_messages(record)

        errors: dict[str, list[str]] = {}
        for field in describe_fields(record, self.tag_name):
            invocations = compile_rules(field.tag)
            if not invocations:
                continue

            failures = evaluate_field(
                field,
                invocations,
                snapshot.rules,
                top=record,
                log_unknown_rules=self.log_unknown_rules,
            )
            for failure in failures:
                message = resolve_message(failure, overrides, snapshot.messages)
                if message is not None:
                    errors.setdefault(to_snake(failure.field), []).append(message)

        return errors, not errors


def _record_messages(record: Any) -> Mapping[str, str]:
    if isinstance(record, HasFieldMessages):
        return record.field_messages() or {}
    return {}
