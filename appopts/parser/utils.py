# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for appopts parsing.

Functions:
- coerce_int: Best-effort leading-integer parse (non-numeric input yields 0),
  or strict `int()` parsing when requested.
- coerce_config_flag: Convert a config-file flag value using the fixed
  boolean vocabulary.
- wipe_token: Overwrite a secret command-line slot.
"""
from __future__ import annotations

import os
import re
from typing import MutableSequence

from appopts.exceptions import BadValueError

TRUTHY_VALUES: tuple[str, ...] = ("YES", "ON", "TRUE")
FALSY_VALUES: tuple[str, ...] = ("NO", "OFF", "FALSE")

_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def coerce_int(
    key: str, value: str, strict: bool = False, source: str = "configuration key"
) -> int:
    """
    Convert `value` to an integer.

    In the default permissive mode only the leading numeric prefix is read:
    `"42abc"` is 42 and `"abc"` is 0. In strict mode the whole value must be an
    integer literal.

    Args:
        key (str): The option token or config key, used in errors.
        value (str): The raw text.
        strict (bool): Reject anything `int()` rejects.
        source (str): What `key` is, for the error message.

    Raises:
        BadValueError: In strict mode, if `value` is not an integer.
    """
    if strict:
        try:
            return int(value.strip(), 10)
        except ValueError:
            raise BadValueError(key, value, source) from None
    match = _LEADING_INT.match(value)
    if not match:
        return 0
    return int(match.group(1))


def coerce_config_flag(key: str, value: str | None) -> bool:
    """
    Convert a config-file flag value to a boolean.

    A missing value means True. Otherwise the value is compared, case
    insensitively, against `TRUTHY_VALUES` and `FALSY_VALUES`.

    Raises:
        BadValueError: If the value is in neither vocabulary.
    """
    if value is None:
        return True
    normalized = value.upper()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise BadValueError(key, value)


def token_text(token: str | bytes | bytearray) -> str:
    """Return a command-line token as text."""
    if isinstance(token, (bytes, bytearray)):
        return os.fsdecode(bytes(token))
    return token


def wipe_token(args: MutableSequence, index: int) -> None:
    """
    Overwrite `args[index]` with zeros.

    `bytearray` slots are zeroed in place. `str` and `bytes` slots are
    immutable, so the list entry is replaced by zeros of the same length.
    """
    token = args[index]
    if isinstance(token, bytearray):
        token[:] = bytes(len(token))
    elif isinstance(token, bytes):
        args[index] = bytes(len(token))
    else:
        args[index] = "\x00" * len(token)
