# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `App`, the application context that owns an option registry and
parses command lines and config files into it.

Typical Usage:
    verbose = BoolCell()
    port = IntCell(8080)
    password = StrCell()

    app = App(description="Demo server")
    app.add("v", "verbose", OptionType.FLAG, verbose, "Chatty output")
    app.add("p", "port", OptionType.INT, port, "Listen port")
    app.add(None, "password", OptionType.SECRET, password, "Admin password")
    app.add_help()

    if not app.parse_file("demo.conf") or not app.parse_args(sys.argv):
        sys.exit(1)

Failures never raise out of `parse_args` / `parse_file`; they are reported
through the application's error handler and the call returns False. The
handler receives `(app, token)`; `app.last_error` carries the failure kind.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, MutableSequence, TextIO

from appopts.config import ParserSettings
from appopts.exceptions import OptionError
from appopts.logger import logger
from appopts.parser.argv_parser import ArgvParser
from appopts.parser.config_parser import ConfigFileParser
from appopts.parser.option import Option
from appopts.parser.option_type import OptionType
from appopts.registry import OptionRegistry
from appopts.reporter import auto_help, default_error_handler
from appopts.utils import get_program_name

AppCallback = Callable[["App", str], None]


class App:
    """
    Application context for option parsing.

    Holds the program name, an optional description, the option registry,
    the parser settings and the error and help handlers.
    """

    def __init__(
        self,
        description: str | None = None,
        program_name: str | None = None,
        on_error: AppCallback | None = None,
        on_help: AppCallback | None = None,
        settings: ParserSettings | None = None,
    ) -> None:
        self.description: str | None = description
        self._program_name: str | None = program_name
        self.registry: OptionRegistry = OptionRegistry()
        self.settings: ParserSettings = settings or ParserSettings()
        self.on_error: AppCallback = on_error or default_error_handler
        self.on_help: AppCallback = on_help or auto_help
        self.last_error: OptionError | None = None

    @property
    def program_name(self) -> str:
        """Basename of argv[0] once `parse_args` has run."""
        if self._program_name is None:
            return get_program_name(sys.argv[0]) if sys.argv else ""
        return self._program_name

    @program_name.setter
    def program_name(self, value: str) -> None:
        self._program_name = value

    def add_option(self, option: Option) -> Option:
        """Register a copy of `option`."""
        return self.registry.add(option)

    def add(
        self,
        short_name: str | None,
        long_name: str | None,
        type: OptionType | str,
        binding: Any,
        description: str | None = None,
    ) -> Option:
        """
        Define and register an option.

        Args:
            short_name (str | None): Single character for `-x`, or None.
            long_name (str | None): Name for `--name` and config keys, or None.
            type (OptionType | str): The option type or one of its aliases.
            binding (Any): A cell matching `type`, or a callable for callbacks.
            description (str | None): Help text.

        Raises:
            OptionDefinitionError: If the names or the binding are invalid.
        """
        return self.add_option(
            Option(
                short_name=short_name,
                long_name=long_name,
                type=type,
                binding=binding,
                description=description,
            )
        )

    def add_short(
        self, short_name: str, type: OptionType | str, binding: Any
    ) -> Option:
        """Register an option that only has a short name."""
        return self.add(short_name, None, type, binding)

    def add_help(self) -> Option:
        """Register the built-in `-h`/`--help` option."""
        return self.registry.add_help()

    def set_error_handler(self, handler: AppCallback) -> None:
        """Replace the error handler. The default handler is no longer called."""
        if not callable(handler):
            raise TypeError(f"Error handler must be callable, got {type(handler).__name__}")
        self.on_error = handler

    def set_help_handler(self, handler: AppCallback) -> None:
        """Replace the help handler used by the built-in help option."""
        if not callable(handler):
            raise TypeError(f"Help handler must be callable, got {type(handler).__name__}")
        self.on_help = handler

    def show_help(self, token: str | None = None) -> None:
        """Invoke the help handler."""
        self.on_help(self, token or "")

    def report(self, error: OptionError) -> None:
        """Record `error` and pass its token to the error handler."""
        logger.warning("Parse failed on '%s': %s", error.token, error.message)
        self.last_error = error
        self.on_error(self, error.token)

    def parse_args(self, argv: MutableSequence | None = None) -> bool:
        """
        Parse a command line into the registered bindings.

        Args:
            argv (MutableSequence | None): Program name followed by arguments.
                Defaults to `sys.argv`. Secret values are wiped in place.

        Returns:
            bool: True on success, False after a reported failure.
        """
        self.last_error = None
        return ArgvParser(self).parse(sys.argv if argv is None else argv)

    def parse_file(self, source: TextIO | str | Path) -> bool:
        """
        Parse a `key = value` config stream, or the file at a path.

        Returns:
            bool: True on success, False after a reported failure.
        """
        self.last_error = None
        return ConfigFileParser(self).parse(source)

    def __str__(self) -> str:
        return (
            f"App(program_name={self.program_name!r}, "
            f"options={len(self.registry)})"
        )

    def __repr__(self) -> str:
        return str(self)
