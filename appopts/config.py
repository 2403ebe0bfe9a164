# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Parser settings for an appopts application."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class ParserSettings(BaseModel):
    """
    Tunable parsing behavior shared by the command-line and config-file parsers.

    Attributes:
        strict_integers (bool): Reject non-numeric integer values with a bad-value
            error instead of reading the leading numeric prefix (which yields 0
            for non-numeric input).
        strip_comment_indent (bool): Ignore leading whitespace before checking a
            config line for a `#` or `;` comment marker.
        max_line_length (int | None): Longest accepted config line, excluding the
            line terminator. None means unlimited.
        wipe_secrets (bool): Overwrite command-line slots holding secret values
            once they have been captured.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strict_integers: bool = False
    strip_comment_indent: bool = True
    max_line_length: int | None = None
    wipe_secrets: bool = True

    @field_validator("max_line_length")
    @classmethod
    def validate_max_line_length(cls, value: int | None) -> int | None:
        if value is not None and value < 1:
            raise ValueError("max_line_length must be a positive integer")
        return value
