# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for help and error output, bound to stderr."""
from rich.console import Console

console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)
