"""Unit tests for the rule evaluator."""

import logging

from fieldrules import FieldDescriptor, FieldKind, RuleFailure, RuleInvocation
from fieldrules.evaluator import evaluate_field
from fieldrules.rules import BUILTIN_RULES
from fieldrules.tags import parse_tag


def string_field(value: str, tag: str = "") -> FieldDescriptor:
    return FieldDescriptor(name="Name", tag=tag, value=value, kind=FieldKind.STRING)


class TestEvaluateField:
    """Tests for running a field's rules."""

    def test_all_rules_run_without_short_circuit(self):
        """Test that an empty string fails both required and min."""
        failures = evaluate_field(
            string_field(""), parse_tag("required,min=3"), BUILTIN_RULES, top=None
        )

        assert failures == [
            RuleFailure(field="Name", rule="required", param="", value=""),
            RuleFailure(field="Name", rule="min", param="3", value=""),
        ]

    def test_passing_field_has_no_failures(self):
        """Test that satisfied rules produce nothing."""
        failures = evaluate_field(
            string_field("alice"), parse_tag("required,min=3,max=64"), BUILTIN_RULES, top=None
        )

        assert failures == []

    def test_failures_keep_tag_order(self):
        """Test that failures are reported in tag order."""
        failures = evaluate_field(
            string_field("café"), parse_tag("ascii,max=2,min=10"), BUILTIN_RULES, top=None
        )

        assert [f.rule for f in failures] == ["ascii", "max", "min"]

    def test_unknown_rule_passes(self, caplog):
        """Test that unregistered rules pass and are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="fieldrules.evaluator"):
            failures = evaluate_field(
                string_field(""), [RuleInvocation(name="requird")], BUILTIN_RULES, top=None
            )

        assert failures == []
        assert "Unknown rule 'requird'" in caplog.text

    def test_unknown_rule_logging_can_be_disabled(self, caplog):
        """Test that unknown rules are silent when logging is off."""
        with caplog.at_level(logging.DEBUG, logger="fieldrules.evaluator"):
            evaluate_field(
                string_field(""),
                [RuleInvocation(name="requird")],
                BUILTIN_RULES,
                top=None,
                log_unknown_rules=False,
            )

        assert "requird" not in caplog.text

    def test_raising_rule_passes_and_warns(self, caplog):
        """Test that a rule that raises is treated as passing."""
        with caplog.at_level(logging.WARNING, logger="fieldrules.evaluator"):
            failures = evaluate_field(
                string_field("abc"), parse_tag("min=three"), BUILTIN_RULES, top=None
            )

        assert failures == []
        assert "Rule 'min' raised on field 'Name'" in caplog.text

    def test_rule_receives_context(self, mocker):
        """Test that rule functions get the record, value, kind and parameter."""
        rule = mocker.Mock(return_value=True)
        record = object()
        field = FieldDescriptor(
            name="age", tag="", value=17, kind=FieldKind.INT, annotation=int
        )

        evaluate_field(field, parse_tag("custom=18"), {"custom": rule}, top=record)

        ctx = rule.call_args.args[0]
        assert ctx.top is record
        assert ctx.current is record
        assert ctx.value == 17
        assert ctx.kind == FieldKind.INT
        assert ctx.annotation is int
        assert ctx.param == "18"
        assert ctx.field == "age"

    def test_truthy_results_count_as_pass(self, mocker):
        """Test that non-bool return values are coerced."""
        rules = {"truthy": mocker.Mock(return_value="yes"), "falsy": mocker.Mock(return_value=None)}

        failures = evaluate_field(
            string_field("x"), parse_tag("truthy,falsy"), rules, top=None
        )

        assert [f.rule for f in failures] == ["falsy"]
