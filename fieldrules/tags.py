"""Tag parser for the comma/equals rule-tag mini-language.

    "required,min=3,max=64" -> (required, ""), (min, "3"), (max, "64")

Only this module knows the textual syntax. Fields may instead declare a
sequence of RuleInvocation objects, which compile_rules() passes through.
"""

import logging
from collections.abc import Sequence
from functools import lru_cache

from fieldrules.config import SYNTAX
from fieldrules.errors import TagSyntaxError
from fieldrules.models.domain import RuleInvocation

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1024)
def parse_tag(tag: str) -> tuple[RuleInvocation, ...]:
    """Decompose a rule tag into ordered rule invocations.

    Args:
        tag: Tag string, e.g. "required,min=3"

    Returns:
        Rule invocations in tag order (empty for an empty tag)

    Raises:
        TagSyntaxError: If an entry has no rule name
    """
    if not tag or not tag.strip():
        return ()

    invocations = []
    for entry in tag.split(SYNTAX.RULE_SEPARATOR):
        name, _, param = entry.partition(SYNTAX.PARAM_SEPARATOR)
        name = name.strip()
        if not name:
            raise TagSyntaxError(tag, f"empty rule name in entry {entry!r}")

        param = param.strip().replace(SYNTAX.COMMA_ESCAPE, SYNTAX.RULE_SEPARATOR)
        invocations.append(RuleInvocation(name=name, param=param))

    logger.debug(f"Parsed tag {tag!r} into {len(invocations)} rule(s)")
    return tuple(invocations)


def compile_rules(tag: str | Sequence[RuleInvocation] | None) -> tuple[RuleInvocation, ...]:
    """Normalize a field's declared rules to a tuple of invocations.

    Args:
        tag: Tag string, a sequence of RuleInvocation, or None for no rules

    Returns:
        Rule invocations in declaration order

    Raises:
        TagSyntaxError: If the tag string is malformed or the sequence holds
            something other than RuleInvocation
    """
    if tag is None:
        return ()
    if isinstance(tag, str):
        return parse_tag(tag)

    invocations = tuple(tag)
    for item in invocations:
        if not isinstance(item, RuleInvocation):
            raise TagSyntaxError(repr(tag), f"expected RuleInvocation, got {type(item).__name__}")
    return invocations
