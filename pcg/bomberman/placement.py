"""
project: PCG Maps
module: bomberman/placement.py
License: MIT

Placement pass: destructible blocks (some hiding power-ups), one exit under a
block, scattered enemies and optional spawn-safe corners.

Each sub-pass works on its own uniformly shuffled copy of the free list, so
every selection (block cells, exit cell, enemy cells) is uniform over its
candidates. With safe corners the interior corners are not block candidates:
block targets are taken over the remaining cells, which keeps exactly one
exit whenever the block target is at least one. Targets that cannot be met
are clamped by availability; nothing here raises.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..grid import Grid, Position
from ..logging_utils import get_logger
from .tiles import DESTRUCTIBLE, EMPTY, ENEMIES, EXIT, POWER_UPS, Cell, CellKind, enemy, power_up

log = get_logger("pcg.bomberman")


@dataclass
class PlacementReport:
    free_cells: int
    block_candidates: int
    destructible_target: int
    power_target: int
    enemy_target: int
    power_ups_placed: int = 0
    exit_position: Optional[Position] = None
    enemies_placed: int = 0
    corners_cleared: int = 0


def placement_targets(free_count: int, p_destructible: float, p_power: float, p_enemy: float) -> Tuple[int, int, int]:
    """Return (destructible_total, power_total, enemy_total) for ``free_count`` cells."""
    destructible_total = math.floor(free_count * p_destructible)
    power_total = math.floor(destructible_total * p_power)
    enemy_total = math.floor((free_count - destructible_total) * p_enemy)
    return destructible_total, power_total, enemy_total


def interior_corners(size: int) -> List[Position]:
    if size < 3:
        return []
    lo, hi = 1, size - 2
    corners: List[Position] = []
    for pos in ((lo, lo), (lo, hi), (hi, lo), (hi, hi)):
        if pos not in corners:
            corners.append(pos)
    return corners


def place_blocks(grid: Grid[Cell], free: Sequence[Position], total: int, power_total: int, rng: random.Random) -> int:
    """Turn the first ``total`` shuffled free cells into blocks; the first ``power_total`` hide a power-up."""
    order = list(free)
    rng.shuffle(order)
    powers = 0
    for i, pos in enumerate(order[:total]):
        if i < power_total:
            grid[pos] = power_up(rng.choice(POWER_UPS))
            powers += 1
        else:
            grid[pos] = DESTRUCTIBLE
    return powers


def place_exit(grid: Grid[Cell], free: Sequence[Position], rng: random.Random) -> Optional[Position]:
    """Hide the exit under a uniformly chosen plain block.

    Falls back to a power-up block only when no plain block exists, so any map
    holding at least one block gets exactly one exit.
    """
    order = list(free)
    rng.shuffle(order)
    for wanted in (CellKind.DESTRUCTIBLE, CellKind.POWER_UP):
        for pos in order:
            if grid[pos].kind is wanted:
                grid[pos] = EXIT
                return pos
    return None


def place_enemies(grid: Grid[Cell], free: Sequence[Position], total: int, rng: random.Random) -> int:
    order = list(free)
    rng.shuffle(order)
    placed = 0
    for pos in order:
        if placed >= total:
            break
        if grid[pos] == EMPTY:
            grid[pos] = enemy(rng.choice(ENEMIES))
            placed += 1
    return placed


def clear_corners(grid: Grid[Cell]) -> int:
    """Force the four interior corners back to EMPTY (spawn safety). Walls are left alone."""
    cleared = 0
    for pos in interior_corners(grid.rows):
        cell = grid[pos]
        if cell.impassable or cell == EMPTY:
            continue
        grid[pos] = EMPTY
        cleared += 1
    return cleared


def place_all(
    grid: Grid[Cell],
    free: Sequence[Position],
    p_destructible: float,
    p_power: float,
    p_enemy: float,
    rng: random.Random,
    safe_corners: bool = False,
) -> PlacementReport:
    if safe_corners:
        corners = set(interior_corners(grid.rows))
        block_free = [p for p in free if p not in corners]
    else:
        block_free = list(free)
    d_total, p_total, _ = placement_targets(len(block_free), p_destructible, p_power, p_enemy)
    e_total = math.floor((len(free) - d_total) * p_enemy)
    report = PlacementReport(
        free_cells=len(free),
        block_candidates=len(block_free),
        destructible_target=d_total,
        power_target=p_total,
        enemy_target=e_total,
    )
    report.power_ups_placed = place_blocks(grid, block_free, d_total, p_total, rng)
    report.exit_position = place_exit(grid, block_free, rng)
    report.enemies_placed = place_enemies(grid, free, e_total, rng)
    if safe_corners:
        report.corners_cleared = clear_corners(grid)
    if report.enemies_placed < e_total:
        log.debug(event="enemy_undercount", target=e_total, placed=report.enemies_placed)
    log.debug(
        event="placement",
        free=len(free),
        blocks=d_total,
        power_ups=report.power_ups_placed,
        enemies=report.enemies_placed,
        exit=report.exit_position,
        corners_cleared=report.corners_cleared,
    )
    return report


__all__ = [
    "PlacementReport",
    "placement_targets",
    "interior_corners",
    "place_blocks",
    "place_exit",
    "place_enemies",
    "clear_corners",
    "place_all",
]
