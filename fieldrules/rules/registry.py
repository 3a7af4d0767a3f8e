"""Rule registry: rule functions and default messages keyed by rule name.

Writes are copy-on-write under a lock; readers take a snapshot and never
lock. Registration is meant to finish before the engine is shared with
concurrent validate() callers.
"""

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from fieldrules.models.domain import RuleFunc, RuleSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrySnapshot:
    """Consistent read-only view of the registry at one instant."""

    rules: Mapping[str, RuleFunc]
    messages: Mapping[str, str]


class RuleRegistry:
    """Named rule functions plus their global default message templates."""

    def __init__(
        self,
        rules: Mapping[str, RuleFunc] | None = None,
        messages: Mapping[str, str] | None = None,
    ):
        self._lock = threading.Lock()
        self._snapshot = RegistrySnapshot(
            rules=MappingProxyType(dict(rules or {})),
            messages=MappingProxyType(dict(messages or {})),
        )

    def snapshot(self) -> RegistrySnapshot:
        return self._snapshot

    def register(self, name: str, func: RuleFunc) -> None:
        """Store or overwrite a rule function."""
        self.update(rules={name: func})

    def register_default_message(self, name: str, template: str) -> None:
        """Store or overwrite the default message template for a rule."""
        self.update(messages={name: template})

    def register_specs(self, specs: Mapping[str, RuleSpec]) -> None:
        """Store rule functions and their messages in one atomic update."""
        self.update(
            rules={name: spec.func for name, spec in specs.items()},
            messages={name: spec.message for name, spec in specs.items()},
        )

    def replace_messages(self, messages: Mapping[str, str]) -> None:
        """Replace the whole default message mapping."""
        for name in messages:
            _check_name(name)
        with self._lock:
            self._snapshot = RegistrySnapshot(
                rules=self._snapshot.rules, messages=MappingProxyType(dict(messages))
            )
        logger.debug(f"Replaced default messages ({len(messages)} templates)")

    def update(
        self,
        rules: Mapping[str, RuleFunc] | None = None,
        messages: Mapping[str, str] | None = None,
    ) -> None:
        """Merge rules and messages into the registry, overwriting existing names."""
        rules = dict(rules or {})
        messages = dict(messages or {})
        for name in (*rules, *messages):
            _check_name(name)
        for name, func in rules.items():
            if not callable(func):
                msg = f"Rule {name!r} must be callable, got {type(func).__name__}"
                raise TypeError(msg)

        with self._lock:
            current = self._snapshot
            self._snapshot = RegistrySnapshot(
                rules=MappingProxyType({**current.rules, **rules}),
                messages=MappingProxyType({**current.messages, **messages}),
            )

        if rules:
            logger.debug(f"Registered rules: {', '.join(rules)}")


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        msg = f"Rule name must be a non-empty string, got {name!r}"
        raise ValueError(msg)
