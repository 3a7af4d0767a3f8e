"""Capabilities a validated record may provide."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from fieldrules.models.domain import FieldDescriptor


@runtime_checkable
class HasFieldMessages(Protocol):
    """Record that supplies its own error messages.

    Keys are "<normalized-field>.<rule>" (e.g. "user_name.min"), values are
    message templates. Records without this capability use only the engine's
    default messages.
    """

    def field_messages(self) -> dict[str, str]:
        """Return override message templates keyed by "field.rule"."""
        ...


@runtime_checkable
class DescribesFields(Protocol):
    """Record that enumerates its own fields.

    For record types without pydantic or dataclass field metadata. Takes
    priority over reflective field enumeration.
    """

    def describe_fields(self) -> Iterable[FieldDescriptor]:
        """Return one descriptor per field, in declaration order."""
        ...


class Validation:
    """Mixin for records that opt into field messages without overriding any.

    Subclasses override field_messages() to add record-specific templates.
    """

    def field_messages(self) -> dict[str, str]:
        return {}
