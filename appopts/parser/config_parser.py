# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ConfigFileParser`, the line-oriented `key = value` parser.

Format:
    # comment
    ; comment
    name = Alice
    count=3
    verbose
    debug = off

Keys are matched against long names only. Whitespace around the key and the
value is stripped, and `key =` with nothing after the separator counts as a
missing value. Flags accept an optional value from a fixed boolean
vocabulary. The first failure is reported through the application's error
handler and stops the parse.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from appopts.exceptions import (
    ArgumentRequiredError,
    LineTooLongError,
    OptionError,
    UnknownOptionError,
)
from appopts.logger import logger
from appopts.parser.matcher import match_config_key
from appopts.parser.option import Option
from appopts.parser.option_type import OptionType
from appopts.parser.utils import coerce_config_flag, coerce_int
from appopts.prompt_utils import readline_from

if TYPE_CHECKING:
    from appopts.app import App

COMMENT_START = "#;"
SEPARATOR = "="


def split_line(line: str) -> tuple[str, str | None]:
    """Split a config line on its first separator into a stripped key and value."""
    key, separator, value = line.partition(SEPARATOR)
    stripped = value.strip()
    return key.strip(), (stripped if separator and stripped else None)


class ConfigFileParser:
    """Applies `key = value` lines from a text stream to an application's options."""

    def __init__(self, app: App) -> None:
        self.app = app

    def parse(self, source: TextIO | str | Path) -> bool:
        """
        Parse a config stream, or the file at a path, into the registered bindings.

        Returns:
            bool: True if every non-comment, non-empty line was applied.
        """
        if isinstance(source, (str, Path)):
            with open(source, "r", encoding="UTF-8") as stream:
                return self.parse(stream)

        line_number = 0
        try:
            while (line := readline_from(source)) is not None:
                line_number += 1
                self._parse_line(line.rstrip("\r\n"), line_number)
        except OptionError as error:
            self.app.report(error)
            return False
        return True

    def _is_ignored(self, line: str) -> bool:
        if not line.strip():
            return True
        probe = line.lstrip() if self.app.settings.strip_comment_indent else line
        return probe[0] in COMMENT_START

    def _parse_line(self, line: str, line_number: int) -> None:
        limit = self.app.settings.max_line_length
        if limit is not None and len(line) > limit:
            raise LineTooLongError(line[:limit], line_number, limit)
        if self._is_ignored(line):
            return

        key, value = split_line(line)
        option = match_config_key(key, self.app.registry)
        if option is None:
            raise UnknownOptionError(key)
        logger.debug("Line %d: matched key '%s'", line_number, key)
        self._apply(option, key, value)

    def _apply(self, option: Option, key: str, value: str | None) -> None:
        if option.type == OptionType.FLAG:
            option.binding.value = coerce_config_flag(key, value)
            return
        if option.type == OptionType.CALLBACK:
            option.binding(self.app, key)
            return

        if value is None:
            raise ArgumentRequiredError(key)
        if option.type == OptionType.INT:
            option.binding.value = coerce_int(
                key, value, strict=self.app.settings.strict_integers
            )
        else:
            option.binding.value = value
