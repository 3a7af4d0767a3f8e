"""Unit tests for the rule registry."""

import pytest

from fieldrules import RuleSpec
from fieldrules.rules import RuleRegistry


def always_pass(ctx):
    return True


def always_fail(ctx):
    return False


class TestRuleRegistry:
    """Tests for registration and snapshots."""

    def test_register_and_lookup(self):
        """Test that a registered rule is visible in the next snapshot."""
        registry = RuleRegistry()
        registry.register("custom", always_pass)

        assert registry.snapshot().rules["custom"] is always_pass

    def test_register_overwrites(self):
        """Test that re-registering a name replaces the function."""
        registry = RuleRegistry(rules={"custom": always_pass})
        registry.register("custom", always_fail)

        assert registry.snapshot().rules["custom"] is always_fail

    def test_register_default_message_overwrites(self):
        """Test that default messages follow overwrite semantics."""
        registry = RuleRegistry(messages={"custom": "old %s"})
        registry.register_default_message("custom", "new %s")

        assert registry.snapshot().messages["custom"] == "new %s"

    def test_register_specs_sets_rule_and_message(self):
        """Test that batch registration stores both halves of each spec."""
        registry = RuleRegistry()
        registry.register_specs(
            {
                "a": RuleSpec(func=always_pass, message="%s a"),
                "b": RuleSpec(func=always_fail, message="%s b"),
            }
        )
        snapshot = registry.snapshot()

        assert dict(snapshot.rules) == {"a": always_pass, "b": always_fail}
        assert dict(snapshot.messages) == {"a": "%s a", "b": "%s b"}

    def test_replace_messages_keeps_rules(self):
        """Test that replacing messages drops old templates but not rules."""
        registry = RuleRegistry(rules={"a": always_pass}, messages={"a": "%s a"})
        registry.replace_messages({"b": "%s b"})
        snapshot = registry.snapshot()

        assert dict(snapshot.messages) == {"b": "%s b"}
        assert "a" in snapshot.rules

    def test_snapshot_is_not_affected_by_later_writes(self):
        """Test that a taken snapshot is immutable and stable."""
        registry = RuleRegistry(rules={"a": always_pass})
        before = registry.snapshot()
        registry.register("b", always_fail)

        assert "b" not in before.rules
        assert "b" in registry.snapshot().rules
        with pytest.raises(TypeError):
            before.rules["c"] = always_pass

    def test_constructor_copies_input(self):
        """Test that mutating the source mapping does not leak into the registry."""
        rules = {"a": always_pass}
        registry = RuleRegistry(rules=rules)
        rules["b"] = always_fail

        assert "b" not in registry.snapshot().rules

    @pytest.mark.parametrize("name", ["", None])
    def test_empty_name_rejected(self, name):
        """Test that rule names must be non-empty strings."""
        with pytest.raises(ValueError):
            RuleRegistry().register(name, always_pass)

    def test_non_callable_rejected(self):
        """Test that rule functions must be callable."""
        with pytest.raises(TypeError):
            RuleRegistry().register("bad", "not callable")
