# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ArgvParser`, the single-pass command-line parser.

Scanning starts at index 1 (index 0 names the program). Tokens that do not
begin with `-` are skipped. Each dash-led token is matched against the
registry and dispatched by option type:

- FLAG sets its cell to True; no value is consumed.
- INT, STRING and SECRET consume the next token unconditionally.
- SECRET copies the value and then wipes the argv slot.
- CALLBACK is invoked with `(app, token)`.

The first failure is reported through the application's error handler and
stops the scan. Bindings applied before the failure are kept.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, MutableSequence

from appopts.exceptions import ArgumentRequiredError, OptionError, UnknownOptionError
from appopts.logger import logger
from appopts.parser.matcher import match_argv_token
from appopts.parser.option import Option
from appopts.parser.option_type import OptionType
from appopts.parser.utils import coerce_int, token_text, wipe_token
from appopts.utils import get_program_name

if TYPE_CHECKING:
    from appopts.app import App


class ArgvParser:
    """Applies a command-line argument list to an application's options."""

    def __init__(self, app: App) -> None:
        self.app = app

    def parse(self, args: MutableSequence) -> bool:
        """
        Parse `args` into the registered bindings.

        Args:
            args (MutableSequence): The argument vector, program name first.
                Secret values are wiped in place, so it must be mutable.

        Returns:
            bool: True if every option was matched and applied.
        """
        if not isinstance(args, MutableSequence):
            raise TypeError(
                f"args must be a mutable sequence such as a list, got {type(args).__name__}"
            )
        if not args:
            logger.debug("Empty argument vector, nothing to parse")
            return True

        self.app.program_name = get_program_name(args[0])
        index = 1
        try:
            while index < len(args):
                token = token_text(args[index])
                if not token.startswith("-"):
                    index += 1
                    continue
                option = match_argv_token(token, self.app.registry)
                if option is None:
                    raise UnknownOptionError(token)
                logger.debug("Matched '%s' to option '%s'", token, option.display_name)
                index = self._apply(option, token, args, index) + 1
        except OptionError as error:
            self.app.report(error)
            return False
        return True

    def _apply(
        self, option: Option, token: str, args: MutableSequence, index: int
    ) -> int:
        """Apply `option` and return the index of the last token it consumed."""
        if not option.type.takes_value:
            if option.type == OptionType.FLAG:
                option.binding.value = True
            else:
                option.binding(self.app, token)
            return index

        if index == len(args) - 1:
            raise ArgumentRequiredError(token)
        index += 1
        value = token_text(args[index])
        if option.type == OptionType.INT:
            option.binding.value = coerce_int(
                token,
                value,
                strict=self.app.settings.strict_integers,
                source="option",
            )
        elif option.type == OptionType.STRING:
            option.binding.value = value
        elif option.type == OptionType.SECRET:
            option.binding.value = value
            if self.app.settings.wipe_secrets:
                wipe_token(args, index)
        return index
