# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType`, the enum that selects how an option's binding is
interpreted when the option is matched.

Supports alias coercion for config-friendly values.

Example:
    OptionType("flag")     → OptionType.FLAG
    OptionType("integer")  → OptionType.INT (via alias)
    OptionType("password") → OptionType.SECRET (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionType(Enum):
    """
    Defines the value type an option binds to.

    Members:
        FLAG: Boolean flag. Presence on the command line means `True`.
        INT: Integer value taken from the next token or the config value.
        STRING: String value taken from the next token or the config value.
        SECRET: Like STRING, but the command-line token is wiped after capture.
        CALLBACK: Invoke a callable with the application and the matched token.

    Aliases:
        - "bool" → "flag"
        - "integer" → "int"
        - "str" → "string"
        - "passwd" / "password" → "secret"
    """

    FLAG = "flag"
    INT = "int"
    STRING = "string"
    SECRET = "secret"
    CALLBACK = "callback"

    @classmethod
    def choices(cls) -> list[OptionType]:
        """Return a list of all option types."""
        return list(cls)

    @property
    def takes_value(self) -> bool:
        """Whether this type consumes a value on the command line."""
        return self in (OptionType.INT, OptionType.STRING, OptionType.SECRET)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "flag",
            "integer": "int",
            "str": "string",
            "passwd": "secret",
            "password": "secret",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the option type."""
        return self.value
