"""Configuration and constants for the fieldrules validation engine.

Includes:
- Tag syntax constants (SYNTAX singleton, not configurable)
- Built-in default message templates (DEFAULT_MESSAGES)
- Engine settings (EngineSettings with FIELDRULES_ prefix)

Settings can be overridden via:
1. Environment variables (e.g., FIELDRULES_TAG_NAME=rules)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class TagSyntax:
    """Fixed delimiters of the rule-tag mini-language.

    These are NOT configurable - tags written against one engine must parse
    identically against every other engine.

    All attributes are immutable (frozen=True prevents modification).
    """

    RULE_SEPARATOR: str = ","
    PARAM_SEPARATOR: str = "="

    # Literal comma inside a rule parameter, e.g. "contains=a0x2Cb"
    COMMA_ESCAPE: str = "0x2C"

    # Message templates
    PLACEHOLDER: str = "%s"
    MAX_PLACEHOLDERS: int = 3


# Module-level singleton for tag syntax
SYNTAX = TagSyntax()


DEFAULT_TAG_NAME = "valid"

DEFAULT_MESSAGES: dict[str, str] = {
    "required": "%s is required",
    "len": "%s must have size %s",
    "min": "%s must have minimum size %s",
    "max": "%s must have maximum size %s",
    "eq": "%s must be equal to %s",
    "ne": "%s must not be equal to %s",
    "gt": "%s must be greater than %s",
    "gte": "%s must be at least %s",
    "lt": "%s must be less than %s",
    "lte": "%s must be at most %s",
    "ascii": "%s must contain only ascii characters",
    "alpha": "%s must contain only letters",
    "alphanum": "%s must contain only letters and numbers",
    "numeric": "%s must be a valid number",
    "hexadecimal": "%s must be a valid hexadecimal",
    "lowercase": "%s must be lowercase",
    "uppercase": "%s must be uppercase",
    "email": "%s must be a valid email address",
    "url": "%s must be a valid url",
}


class EngineSettings(BaseSettings):
    """Configuration for a ValidationEngine.

    Can be overridden via environment variables with FIELDRULES_ prefix:
    - FIELDRULES_TAG_NAME
    - FIELDRULES_MESSAGES (JSON object of rule name -> template)
    - FIELDRULES_LOG_UNKNOWN_RULES

    Attributes:
        tag_name: Metadata key holding the rule tag on each field
        messages: Default message template per rule name
        log_unknown_rules: Emit a debug log when a tag names an unregistered rule
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDRULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    tag_name: str = Field(
        default=DEFAULT_TAG_NAME, description="Field metadata key holding the rule tag"
    )
    messages: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_MESSAGES),
        description="Default message template per rule name",
    )
    log_unknown_rules: bool = Field(
        default=True, description="Log tags that reference unregistered rules"
    )

    @field_validator("tag_name")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            msg = "Tag name cannot be empty"
            raise ValueError(msg)
        return v.strip()
