# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Default help and error handlers.

Both handlers take `(app, token)` and write plain text to the shared stderr
console's file, so help lines keep their `-x --name\t<description>` tabs.
Hosts replace them per application through `App(on_error=..., on_help=...)`
or `App.set_error_handler()` / `App.set_help_handler()`; a replacement fully
overrides the default.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from appopts.console import console
from appopts.exceptions import UnknownOptionError

if TYPE_CHECKING:
    from appopts.app import App


def format_help(app: App) -> list[str]:
    """Return the help text lines for `app`."""
    lines = []
    if app.description:
        lines.append(f"{app.program_name}: {app.description}")
    lines.append(f"Usage: {app.program_name} <options>")
    lines.append("Options:")
    for option in app.registry:
        lines.append(f"{option.get_flags_text()}\t{option.description or ''}")
    return lines


def auto_help(app: App, token: str | None = None) -> None:
    """Print the program banner and one line per registered option."""
    for line in format_help(app):
        console.file.write(f"{line}\n")


def default_error_handler(app: App, token: str) -> None:
    """Print the failure message for `token`, then the help text."""
    error = app.last_error
    if error is None or error.token != token:
        error = UnknownOptionError(token)
    console.file.write(f"{error.message}\n\n")
    auto_help(app, token)
