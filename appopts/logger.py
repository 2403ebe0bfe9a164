# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for appopts."""
import logging

logger: logging.Logger = logging.getLogger("appopts")
