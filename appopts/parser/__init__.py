"""
Appopts Option Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argv_parser import ArgvParser
from .binding import BoolCell, Cell, IntCell, StrCell
from .config_parser import ConfigFileParser
from .matcher import match_argv_token, match_config_key
from .option import Option
from .option_type import OptionType

__all__ = [
    "ArgvParser",
    "BoolCell",
    "Cell",
    "ConfigFileParser",
    "IntCell",
    "Option",
    "OptionType",
    "StrCell",
    "match_argv_token",
    "match_config_key",
]
