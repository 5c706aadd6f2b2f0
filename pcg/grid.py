"""
project: PCG Maps
module: grid.py
License: MIT

Fixed-size 2-D cell container shared by every generator family.

Cells are stored row-major (``cells[row][col]``) and addressed with a
``(row, col)`` tuple. Cell values are expected to be immutable (enum members,
NamedTuples) so ``copy()`` only needs to duplicate the row lists.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")
Position = Tuple[int, int]


class Grid(Generic[T]):
    __slots__ = ("rows", "cols", "cells")

    def __init__(self, rows: int, cols: int, fill: T):
        self.rows = rows
        self.cols = cols
        self.cells: List[List[T]] = [[fill for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        """Build a grid from nested sequences (handy for hand-written fixtures)."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        grid = cls.__new__(cls)
        grid.rows = height
        grid.cols = width
        grid.cells = [list(r) for r in rows]
        return grid

    @property
    def size(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, pos: Position) -> T:
        r, c = pos
        return self.cells[r][c]

    def __setitem__(self, pos: Position, value: T) -> None:
        r, c = pos
        self.cells[r][c] = value

    def __iter__(self) -> Iterator[List[T]]:
        return iter(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def positions(self) -> Iterator[Position]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def count(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for row in self.cells for v in row if predicate(v))

    def copy(self) -> "Grid[T]":
        return Grid.from_rows(self.cells)


__all__ = ["Grid", "Position"]
