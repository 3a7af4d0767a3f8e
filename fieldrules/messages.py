"""Message resolution for failed rules.

A failure becomes a message by:
1. Normalizing the field name to snake_case (map key and override prefix)
2. Picking a template: record override "<field>.<rule>", else the engine
   default for <rule>, else nothing (the failure is dropped)
3. Substituting up to three %s markers with field, parameter and value
"""

import logging
import re
from collections.abc import Mapping

from fieldrules.config import SYNTAX
from fieldrules.errors import RuleFailure

logger = logging.getLogger(__name__)

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_snake(name: str) -> str:
    """Normalize a field name for reporting.

    Examples:
        UserName -> user_name
        HTMLBody -> html_body
        ID -> id
        user_name -> user_name
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


def render(template: str, field: str, param: str, value: object) -> str:
    """Substitute %s markers positionally: field, then param, then value.

    Templates with no markers or more than SYNTAX.MAX_PLACEHOLDERS markers
    are returned unchanged.
    """
    parts = template.split(SYNTAX.PLACEHOLDER)
    markers = len(parts) - 1
    if markers == 0 or markers > SYNTAX.MAX_PLACEHOLDERS:
        return template

    args = (field, param, str(value))[:markers]
    rendered = [parts[0]]
    for arg, part in zip(args, parts[1:], strict=True):
        rendered.append(arg)
        rendered.append(part)
    return "".join(rendered)


def resolve_message(
    failure: RuleFailure,
    overrides: Mapping[str, str],
    defaults: Mapping[str, str],
) -> str | None:
    """Build the user-facing message for one failure.

    Args:
        failure: Failed rule invocation
        overrides: Record-specific templates keyed by "<snake_field>.<rule>"
        defaults: Engine default templates keyed by rule name

    Returns:
        Rendered message, or None if no template exists for the failure
    """
    key = f"{to_snake(failure.field)}.{failure.rule}"
    template = overrides.get(key) or defaults.get(failure.rule)
    if not template:
        logger.debug(f"No message template for '{key}', dropping failure")
        return None

    return render(template, failure.field.lower(), failure.param, failure.value)
