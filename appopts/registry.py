# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionRegistry`, the ordered collection of registered options.

The registry only stores descriptors. Insertion order is preserved and is
both the lookup order ("first match wins") and the help display order.
Storage is preallocated and doubles when full; it never shrinks.

Colliding names are allowed. The earlier registration shadows the later one
during matching, and the collision is logged at debug level.

Running out of memory while allocating storage is fatal: the process exits
through `appopts.utils.die`.
"""
from __future__ import annotations

import copy
from typing import Any, Iterator

from appopts.logger import logger
from appopts.parser.option import Option
from appopts.parser.option_type import OptionType
from appopts.utils import die

INITIAL_CAPACITY = 10


def _show_help(app: Any, token: str) -> None:
    app.show_help(token)


HELP_OPTION = Option(
    short_name="h",
    long_name="help",
    type=OptionType.CALLBACK,
    binding=_show_help,
    description="(show this help message)",
)


class OptionRegistry:
    """Ordered, growable storage for `Option` descriptors."""

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Registry capacity must be at least 1, got {capacity}")
        try:
            self._slots: list[Option | None] = self._allocate(capacity)
        except MemoryError:
            die("Could not allocate the option registry")
        self._size = 0

    def _allocate(self, count: int) -> list[Option | None]:
        return [None] * count

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _grow(self) -> None:
        old_capacity = self.capacity
        try:
            self._slots.extend(self._allocate(old_capacity))
        except MemoryError:
            die("Could not grow the option registry")
        logger.debug("Option registry grew from %d to %d", old_capacity, self.capacity)

    def add(self, option: Option) -> Option:
        """
        Append a copy of `option` and return the stored copy.

        Args:
            option (Option): The descriptor to register.

        Returns:
            Option: The registered copy.
        """
        if not isinstance(option, Option):
            raise TypeError(f"Expected an Option, got {type(option).__name__}")
        if self._size >= self.capacity:
            self._grow()
        for existing in self:
            if existing.collides_with(option):
                logger.debug(
                    "Option '%s' collides with '%s'; the earlier one wins",
                    option.display_name,
                    existing.display_name,
                )
                break
        stored = copy.copy(option)
        self._slots[self._size] = stored
        self._size += 1
        logger.debug("Registered option '%s' (%s)", stored.display_name, stored.type)
        return stored

    def add_help(self) -> Option:
        """Append the built-in `-h`/`--help` option."""
        return self.add(HELP_OPTION)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Option]:
        for index in range(self._size):
            option = self._slots[index]
            assert option is not None
            yield option

    def __getitem__(self, index: int) -> Option:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("option index out of range")
        option = self._slots[index]
        assert option is not None
        return option

    def __str__(self) -> str:
        return f"OptionRegistry(options={self._size}, capacity={self.capacity})"

    def __repr__(self) -> str:
        return str(self)
