# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Finds the registered option a command-line token or config key refers to.

Tokens are classified by their second character: `-x` is short, `--name` is
long. A short token matches only when it is exactly two characters long, so
`-xVALUE` never matches `-x`. Long tokens and config keys match by exact
equality against the long name. Lookup walks the registry in insertion order
and the first match wins.
"""
from __future__ import annotations

from typing import Iterable

from appopts.parser.option import Option


def is_short_token(token: str) -> bool:
    """Return True if `token` has the `-x` shape rather than `--name`."""
    return token[1:2] != "-"


def match_argv_token(token: str, options: Iterable[Option]) -> Option | None:
    """
    Return the first option matching a dash-led command-line token.

    Args:
        token (str): The token, including its leading dash(es).
        options (Iterable[Option]): Options in registry order.

    Returns:
        Option | None: The matching option, or None if nothing matches.
    """
    if is_short_token(token):
        if len(token) != 2:
            return None
        name = token[1]
        return next((option for option in options if option.short_name == name), None)
    name = token[2:]
    return next((option for option in options if option.long_name == name), None)


def match_config_key(key: str, options: Iterable[Option]) -> Option | None:
    """Return the first option whose long name equals `key`."""
    return next((option for option in options if option.long_name == key), None)
