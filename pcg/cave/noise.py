"""
project: PCG Maps
module: cave/noise.py
License: MIT
"""

from __future__ import annotations

import random

from ..grid import Grid
from ..logging_utils import get_logger
from .tiles import EMPTY, FILLED, CaveTile

log = get_logger("pcg.cave")


def new_cave(rows: int, cols: int) -> Grid[CaveTile]:
    return Grid(rows, cols, EMPTY)


def fill_noise(grid: Grid[CaveTile], density: float, rng: random.Random) -> Grid[CaveTile]:
    """Seed every cell independently: FILLED with probability ``density``, else EMPTY."""
    for r, c in grid.positions():
        grid[r, c] = FILLED if rng.random() < density else EMPTY
    log.debug(event="noise_filled", density=density, filled=grid.count(lambda t: t is FILLED))
    return grid


__all__ = ["new_cave", "fill_noise"]
