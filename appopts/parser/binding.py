# Appopts Option Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Mutable value cells that options write into.

A cell is owned by the host program; the parser only assigns `cell.value`.
Each cell class declares the Python type it holds so an `Option` can check
that its binding matches its `OptionType` when it is registered.
Cells compare and hash by identity: two cells are the same binding only if
they are the same object.

    verbose = BoolCell()
    port = IntCell(8080)
    name = StrCell()
"""
from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")


class Cell(Generic[T]):
    """A single mutable value slot."""

    holds: ClassVar[type] = object

    def __init__(self, value: T | None = None) -> None:
        self.value: T | None = value

    def __bool__(self) -> bool:
        return bool(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class BoolCell(Cell[bool]):
    """Cell bound by `OptionType.FLAG` options."""

    holds = bool

    def __init__(self, value: bool = False) -> None:
        super().__init__(value)


class IntCell(Cell[int]):
    """Cell bound by `OptionType.INT` options."""

    holds = int

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)


class StrCell(Cell[str]):
    """Cell bound by `OptionType.STRING` and `OptionType.SECRET` options."""

    holds = str
