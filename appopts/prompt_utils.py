# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Terminal and stream input helpers.

Includes:
- `readline_from()` / `readline()` for line reads of any length.
- `ask_secret()` for reading a password without echo.
"""
from __future__ import annotations

import sys
from typing import TextIO

from prompt_toolkit import PromptSession


def readline_from(stream: TextIO) -> str | None:
    """Read one line from `stream`, or return None at end of stream."""
    line = stream.readline()
    if not line:
        return None
    return line


def readline() -> str | None:
    """Read one line from standard input."""
    return readline_from(sys.stdin)


def ask_secret(message: str = "Password:", session: PromptSession | None = None) -> str:
    """
    Prompt for a secret with echo disabled.

    prompt_toolkit owns the terminal mode for the duration of the prompt and
    restores it on every exit path, including errors and Ctrl-C.
    """
    session = session or PromptSession()
    return session.prompt(f"{message} ", is_password=True)
