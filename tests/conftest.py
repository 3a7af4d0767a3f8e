"""Shared fixtures for fieldrules tests."""

import pytest

from fieldrules import ValidationEngine


@pytest.fixture
def engine() -> ValidationEngine:
    """Engine with built-in rules and default messages, reading the "valid" tag."""
    return ValidationEngine(tag_name="valid")
