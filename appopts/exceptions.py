# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by appopts.

Exception Hierarchy:
- AppOptsError
    ├── OptionDefinitionError
    └── OptionError
        ├── UnknownOptionError
        ├── ArgumentRequiredError
        ├── BadValueError
        └── LineTooLongError

`OptionDefinitionError` is raised to the host at registration time.
`OptionError` subclasses are raised while parsing and caught at the parse
boundary, where they are routed through the application's error handler and
turned into a `False` return value.
"""


class AppOptsError(Exception):
    """Base exception for appopts."""


class OptionDefinitionError(AppOptsError):
    """Exception raised when an option descriptor is malformed."""


class OptionError(AppOptsError):
    """Exception raised when a token or config line cannot be applied."""

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message


class UnknownOptionError(OptionError):
    """Exception raised when a token or key matches no registered option."""

    def __init__(self, token: str) -> None:
        super().__init__(token, f"ERROR: Wrong or invalid option '{token}'")


class ArgumentRequiredError(OptionError):
    """Exception raised when a typed option is missing its value."""

    def __init__(self, token: str) -> None:
        super().__init__(token, f"ERROR: Option '{token}' requires an argument")


class BadValueError(OptionError):
    """Exception raised when a value cannot be coerced to the option's type."""

    def __init__(
        self, token: str, value: str, source: str = "configuration key"
    ) -> None:
        super().__init__(token, f"ERROR: Bad value '{value}' for {source} '{token}'")
        self.value = value


class LineTooLongError(OptionError):
    """Exception raised when a config line exceeds the configured maximum length."""

    def __init__(self, token: str, line_number: int, limit: int) -> None:
        super().__init__(
            token,
            f"ERROR: Line {line_number} exceeds the maximum length of {limit} characters",
        )
        self.line_number = line_number
        self.limit = limit
