# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass, the descriptor for one registered option.

Each `Option` carries its short and long names, its `OptionType`, the binding
that receives parsed values (a cell or a callback), and help text.

The binding shape is checked against the type when the descriptor is
created, so the parsers never have to guess what a binding is:

- FLAG     → BoolCell
- INT      → IntCell
- STRING   → StrCell
- SECRET   → StrCell
- CALLBACK → callable `(app, token)`
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from appopts.exceptions import OptionDefinitionError
from appopts.parser.binding import BoolCell, IntCell, StrCell
from appopts.parser.option_type import OptionType

_CELL_FOR_TYPE: dict[OptionType, type] = {
    OptionType.FLAG: BoolCell,
    OptionType.INT: IntCell,
    OptionType.STRING: StrCell,
    OptionType.SECRET: StrCell,
}


@dataclass
class Option:
    """
    Represents a registered option.

    Attributes:
        short_name (str | None): Single character used as `-x`, or None.
        long_name (str | None): Name used as `--name` and as the config-file key.
        type (OptionType): How the binding is interpreted.
        binding (Any): A cell matching `type`, or a callable for CALLBACK.
        description (str | None): Help text.
    """

    short_name: str | None
    long_name: str | None
    type: OptionType
    binding: Any
    description: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, OptionType):
            try:
                self.type = OptionType(self.type)
            except ValueError as error:
                raise OptionDefinitionError(str(error)) from error
        self._validate_names()
        self._validate_binding()

    def _validate_names(self) -> None:
        if self.short_name is None and self.long_name is None:
            raise OptionDefinitionError(
                "An option needs at least a short name or a long name"
            )
        if self.short_name is not None:
            if not isinstance(self.short_name, str) or len(self.short_name) != 1:
                raise OptionDefinitionError(
                    f"Short name {self.short_name!r} must be a single character"
                )
            if self.short_name == "-":
                raise OptionDefinitionError("Short name cannot be '-'")
        if self.long_name is not None:
            if not isinstance(self.long_name, str) or not self.long_name:
                raise OptionDefinitionError(
                    f"Long name {self.long_name!r} must be a non-empty string"
                )
            if self.long_name.startswith("-"):
                raise OptionDefinitionError(
                    f"Long name '{self.long_name}' must not include leading dashes"
                )

    def _validate_binding(self) -> None:
        if self.type == OptionType.CALLBACK:
            if not callable(self.binding):
                raise OptionDefinitionError(
                    f"Option '{self.display_name}' is a callback but its binding "
                    f"is {type(self.binding).__name__}"
                )
            return
        expected = _CELL_FOR_TYPE[self.type]
        if not isinstance(self.binding, expected):
            raise OptionDefinitionError(
                f"Option '{self.display_name}' of type {self.type} must be bound "
                f"to a {expected.__name__}, got {type(self.binding).__name__}"
            )

    @property
    def display_name(self) -> str:
        """The long form if present, else the short form."""
        if self.long_name is not None:
            return f"--{self.long_name}"
        return f"-{self.short_name}"

    def get_flags_text(self) -> str:
        """Return the `-x --name` text used in help output."""
        short = f"-{self.short_name}" if self.short_name is not None else "  "
        long = f"--{self.long_name}" if self.long_name is not None else ""
        return f"{short} {long}".rstrip()

    def collides_with(self, other: Option) -> bool:
        """Check whether two options share a short or long name."""
        return (
            self.short_name is not None and self.short_name == other.short_name
        ) or (self.long_name is not None and self.long_name == other.long_name)
