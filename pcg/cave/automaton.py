"""
project: PCG Maps
module: cave/automaton.py
License: MIT

Cellular automaton smoothing for cave maps.

Rule: count the occupied cells (FILLED or AGENT) in the (2R+1)x(2R+1) window
centred on a cell, the centre itself included. Cells outside the map count as
occupied so edges read as solid rock. An AGENT cell is never rewritten; any
other cell becomes FILLED when the count reaches the threshold, else EMPTY.

Two sweep strategies are provided and give different results:
    * double buffered - every cell reads the previous generation; the new
      generation is returned as a fresh grid.
    * in place - cells are rewritten during the row-major sweep, so later
      cells already see the updated values of earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List

from ..grid import Grid
from ..logging_utils import get_logger
from .config import AutomatonMode
from .tiles import AGENT, EMPTY, FILLED, CaveTile

log = get_logger("pcg.cave")


def count_occupied(grid: Grid[CaveTile], r: int, c: int, radius: int) -> int:
    n = 0
    for dr in range(-radius, radius + 1):
        for dc in range(-radius, radius + 1):
            nr, nc = r + dr, c + dc
            if not grid.in_bounds(nr, nc) or grid.cells[nr][nc] != EMPTY:
                n += 1
    return n


def _next_value(src: Grid[CaveTile], r: int, c: int, radius: int, threshold: int) -> CaveTile:
    if src.cells[r][c] == AGENT:
        return AGENT
    return FILLED if count_occupied(src, r, c, radius) >= threshold else EMPTY


def step_double_buffered(grid: Grid[CaveTile], radius: int, threshold: int) -> Grid[CaveTile]:
    out = grid.copy()
    for r, c in grid.positions():
        out.cells[r][c] = _next_value(grid, r, c, radius, threshold)
    return out


def step_in_place(grid: Grid[CaveTile], radius: int, threshold: int) -> Grid[CaveTile]:
    for r, c in grid.positions():
        grid.cells[r][c] = _next_value(grid, r, c, radius, threshold)
    return grid


STRATEGIES: Dict[AutomatonMode, Callable[[Grid[CaveTile], int, int], Grid[CaveTile]]] = {
    AutomatonMode.DOUBLE_BUFFERED: step_double_buffered,
    AutomatonMode.IN_PLACE: step_in_place,
}


def step(
    grid: Grid[CaveTile], radius: int, threshold: int, mode: AutomatonMode = AutomatonMode.DOUBLE_BUFFERED
) -> Grid[CaveTile]:
    return STRATEGIES[AutomatonMode(mode)](grid, radius, threshold)


def filled_count(grid: Grid[CaveTile]) -> int:
    return grid.count(lambda t: t == FILLED)


@dataclass
class AutomatonRun:
    grid: Grid[CaveTile]
    fill_history: List[int] = field(default_factory=list)
    # independent copy of the grid after each iteration
    snapshots: List[Grid[CaveTile]] = field(default_factory=list)


def run_automaton(
    grid: Grid[CaveTile],
    radius: int,
    threshold: int,
    iterations: int,
    mode: AutomatonMode = AutomatonMode.DOUBLE_BUFFERED,
) -> AutomatonRun:
    """Apply ``iterations`` steps, recording the FILLED count and a snapshot after each one."""
    run = AutomatonRun(grid)
    for i in range(iterations):
        run.grid = step(run.grid, radius, threshold, mode)
        filled = filled_count(run.grid)
        run.fill_history.append(filled)
        run.snapshots.append(run.grid.copy())
        log.debug(event="automaton_step", iteration=i + 1, of=iterations, mode=AutomatonMode(mode).value, filled=filled)
    return run


__all__ = [
    "count_occupied",
    "step_double_buffered",
    "step_in_place",
    "step",
    "filled_count",
    "AutomatonRun",
    "run_automaton",
    "STRATEGIES",
]
