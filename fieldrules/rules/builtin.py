"""Built-in rule functions.

All rules share the RuleFunc contract: take a RuleContext, return True when
the value satisfies the rule. A rule that does not apply to the value's kind
returns True. A rule given an unusable parameter raises ValueError, which
the evaluator turns into a pass.
"""

import re

from pydantic import AnyUrl, EmailStr, TypeAdapter, ValidationError

from fieldrules.models.domain import RuleContext, RuleFunc
from fieldrules.models.enums import FieldKind

ALPHA = re.compile(r"[a-zA-Z]+")
ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
NUMERIC = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")
HEXADECIMAL = re.compile(r"[0-9a-fA-F]+")

_EMAIL = TypeAdapter(EmailStr)
_URL = TypeAdapter(AnyUrl)


def _number(param: str) -> int | float:
    """Parse a rule parameter as int, falling back to float.

    Raises:
        ValueError: If the parameter is not a number
    """
    try:
        return int(param)
    except ValueError:
        return float(param)


def _size(ctx: RuleContext) -> int | float | None:
    """Character count, numeric value or element count, by kind."""
    if ctx.kind in (FieldKind.STRING, FieldKind.COLLECTION):
        return len(ctx.value)
    if ctx.kind.is_numeric:
        return ctx.value
    return None


def required(ctx: RuleContext) -> bool:
    """Fails on the zero value of the field's kind."""
    if ctx.kind == FieldKind.NIL:
        return False
    if ctx.kind in (FieldKind.STRING, FieldKind.COLLECTION):
        return len(ctx.value) > 0
    if ctx.kind == FieldKind.BOOL:
        return ctx.value
    if ctx.kind.is_numeric:
        return ctx.value != 0
    return True


def min_size(ctx: RuleContext) -> bool:
    size = _size(ctx)
    return size is None or size >= _number(ctx.param)


def max_size(ctx: RuleContext) -> bool:
    size = _size(ctx)
    return size is None or size <= _number(ctx.param)


def exact_size(ctx: RuleContext) -> bool:
    size = _size(ctx)
    return size is None or size == _number(ctx.param)


def equals(ctx: RuleContext) -> bool:
    """Strings compare to the parameter text, everything else by size."""
    if ctx.kind == FieldKind.STRING:
        return ctx.value == ctx.param
    if ctx.kind == FieldKind.BOOL:
        return ctx.value == (ctx.param.strip().lower() == "true")
    return exact_size(ctx)


def not_equals(ctx: RuleContext) -> bool:
    if ctx.kind in (FieldKind.STRING, FieldKind.BOOL) or _size(ctx) is not None:
        return not equals(ctx)
    return True


def greater_than(ctx: RuleContext) -> bool:
    return not ctx.kind.is_numeric or ctx.value > _number(ctx.param)


def greater_than_or_equal(ctx: RuleContext) -> bool:
    return not ctx.kind.is_numeric or ctx.value >= _number(ctx.param)


def less_than(ctx: RuleContext) -> bool:
    return not ctx.kind.is_numeric or ctx.value < _number(ctx.param)


def less_than_or_equal(ctx: RuleContext) -> bool:
    return not ctx.kind.is_numeric or ctx.value <= _number(ctx.param)


def _string_rule(check) -> RuleFunc:
    """Wrap a str predicate so it passes for non-string kinds."""

    def rule(ctx: RuleContext) -> bool:
        return ctx.kind != FieldKind.STRING or check(ctx.value)

    rule.__name__ = check.__name__
    rule.__doc__ = check.__doc__
    return rule


def _matches(pattern: re.Pattern):
    def check(value: str) -> bool:
        return pattern.fullmatch(value) is not None

    check.__name__ = f"matches_{pattern.pattern}"
    return check


def _is_ascii(value: str) -> bool:
    return value.isascii()


def _is_lowercase(value: str) -> bool:
    return value != "" and value == value.lower()


def _is_uppercase(value: str) -> bool:
    return value != "" and value == value.upper()


def _is_email(value: str) -> bool:
    try:
        _EMAIL.validate_python(value)
    except ValidationError:
        return False
    return True


def _is_url(value: str) -> bool:
    try:
        _URL.validate_python(value)
    except ValidationError:
        return False
    return True


BUILTIN_RULES: dict[str, RuleFunc] = {
    "required": required,
    "len": exact_size,
    "min": min_size,
    "max": max_size,
    "eq": equals,
    "ne": not_equals,
    "gt": greater_than,
    "gte": greater_than_or_equal,
    "lt": less_than,
    "lte": less_than_or_equal,
    "ascii": _string_rule(_is_ascii),
    "alpha": _string_rule(_matches(ALPHA)),
    "alphanum": _string_rule(_matches(ALPHANUMERIC)),
    "numeric": _string_rule(_matches(NUMERIC)),
    "hexadecimal": _string_rule(_matches(HEXADECIMAL)),
    "lowercase": _string_rule(_is_lowercase),
    "uppercase": _string_rule(_is_uppercase),
    "email": _string_rule(_is_email),
    "url": _string_rule(_is_url),
}
