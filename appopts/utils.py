# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn

import pythonjsonlogger.json
from rich.logging import RichHandler

from appopts.console import console

FATAL_EXIT_CODE = 1


def die(message: str) -> NoReturn:
    """Print `message` to stderr and terminate the process."""
    console.print(message, markup=False)
    sys.exit(FATAL_EXIT_CODE)


def get_program_name(argv0: str | bytes | bytearray) -> str:
    """Return the basename of an argv[0] entry."""
    if isinstance(argv0, (bytes, bytearray)):
        argv0 = os.fsdecode(bytes(argv0))
    return os.path.basename(argv0.rstrip("/")) or argv0


_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in _CONTAINER_MARKERS)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route the `appopts` logger (and the rest of the root logger) to stderr.

    Args:
        mode (str | None): "cli" for Rich output or "json" for one JSON object
            per record. Defaults to `APPOPTS_LOG_MODE`, then to "json" inside
            containers and "cli" elsewhere.
        log_filename (str | None): Also write every record, at debug level, to
            this file.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("APPOPTS_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(file_handler)

    logging.getLogger("appopts").debug("Logging initialized in '%s' mode.", mode)
