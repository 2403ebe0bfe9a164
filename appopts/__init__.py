"""
Appopts Option Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .app import App
from .config import ParserSettings
from .exceptions import (
    AppOptsError,
    ArgumentRequiredError,
    BadValueError,
    LineTooLongError,
    OptionDefinitionError,
    OptionError,
    UnknownOptionError,
)
from .parser import BoolCell, IntCell, Option, OptionType, StrCell
from .registry import OptionRegistry
from .reporter import auto_help, default_error_handler

__version__ = "0.1.0"

__all__ = [
    "App",
    "AppOptsError",
    "ArgumentRequiredError",
    "BadValueError",
    "BoolCell",
    "IntCell",
    "LineTooLongError",
    "Option",
    "OptionDefinitionError",
    "OptionError",
    "OptionRegistry",
    "OptionType",
    "ParserSettings",
    "StrCell",
    "UnknownOptionError",
    "auto_help",
    "default_error_handler",
]
