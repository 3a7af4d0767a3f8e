"""Rule functions and the registry that names them.

The registry does not distinguish built-in from custom rules: both are
plain RuleFunc callables stored under a name.
"""

from fieldrules.rules.builtin import BUILTIN_RULES
from fieldrules.rules.registry import RegistrySnapshot, RuleRegistry

__all__ = [
    "BUILTIN_RULES",
    "RegistrySnapshot",
    "RuleRegistry",
]
