"""
project: PCG Maps
module: bomberman/structure.py
License: MIT

Structural pass: outer border ring plus the pillar lattice on every
(even row, even column) cell. Deterministic.
"""

from __future__ import annotations

from typing import List

from ..grid import Grid, Position
from .tiles import EMPTY, WALL, Cell


def is_structural(r: int, c: int, size: int) -> bool:
    if r == 0 or r == size - 1 or c == 0 or c == size - 1:
        return True
    return r % 2 == 0 and c % 2 == 0


def new_map(size: int) -> Grid[Cell]:
    return Grid(size, size, EMPTY)


def stamp_structure(grid: Grid[Cell]) -> List[Position]:
    """Mark border and lattice cells as WALL; return the free interior cells (row-major)."""
    size = grid.rows
    free: List[Position] = []
    for r, c in grid.positions():
        if is_structural(r, c, size):
            grid[r, c] = WALL
        elif grid[r, c] == EMPTY:
            free.append((r, c))
    return free


__all__ = ["is_structural", "new_map", "stamp_structure"]
