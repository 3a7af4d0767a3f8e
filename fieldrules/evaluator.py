"""Rule evaluator: applies a field's rule invocations to its value."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from fieldrules.errors import RuleFailure
from fieldrules.models.domain import FieldDescriptor, RuleContext, RuleFunc, RuleInvocation

logger = logging.getLogger(__name__)


def evaluate_field(
    field: FieldDescriptor,
    invocations: Iterable[RuleInvocation],
    rules: Mapping[str, RuleFunc],
    top: Any,
    log_unknown_rules: bool = True,
) -> list[RuleFailure]:
    """Run every rule invocation against one field, in tag order.

    Evaluation never short-circuits: a field collects one failure per rule
    that does not hold. Unregistered rules and rules that raise count as
    passing.

    Args:
        field: Field under test
        invocations: Rule invocations parsed from the field's tag
        rules: Rule functions by name (a registry snapshot)
        top: Record passed to validate()
        log_unknown_rules: Log unregistered rule names at debug level

    Returns:
        Failures in evaluation order (empty if every rule holds)
    """
    failures = []

    for invocation in invocations:
        func = rules.get(invocation.name)
        if func is None:
            if log_unknown_rules:
                logger.debug(
                    f"Unknown rule '{invocation.name}' on field '{field.name}', treating as pass"
                )
            continue

        ctx = RuleContext(
            top=top,
            current=top,
            value=field.value,
            kind=field.kind,
            annotation=field.annotation,
            param=invocation.param,
            field=field.name,
        )
        try:
            passed = bool(func(ctx))
        except Exception as e:
            logger.warning(
                f"Rule '{invocation.name}' raised on field '{field.name}', treating as pass: {e}"
            )
            continue

        if not passed:
            failures.append(
                RuleFailure(
                    field=field.name,
                    rule=invocation.name,
                    param=invocation.param,
                    value=field.value,
                )
            )

    return failures
