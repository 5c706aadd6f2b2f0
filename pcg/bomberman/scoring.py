"""
project: PCG Maps
module: bomberman/scoring.py
License: MIT

Map scoring heuristic and brute-force parameter search.

    score = 0.5 * empty - 1.5 * enemies + power_bonus(power_ups) + 3.0 * blocks

``power_bonus`` is a step function: nothing up to 3 power-ups, 1.5 per
power-up from 4 to 8, and only 0.5 per power-up above 8. Going from 8 to 9
power-ups therefore lowers the score (12.0 -> 4.5); this is kept as-is.
The exit cell counts in no category.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

from ..grid import Grid
from ..logging_utils import get_logger
from .tiles import Cell, CellKind

log = get_logger("pcg.bomberman")

EMPTY_WEIGHT = 0.5
ENEMY_WEIGHT = -1.5
BLOCK_WEIGHT = 3.0

DEFAULT_DESTRUCTIBLE_VALUES = (0.2, 0.25, 0.3, 0.35, 0.4)
DEFAULT_POWER_VALUES = (0.1, 0.15, 0.2, 0.25, 0.3)
DEFAULT_ENEMY_VALUES = (0.05, 0.55, 0.1, 0.15, 0.2)


class TileTally(NamedTuple):
    empty: int
    enemies: int
    power_ups: int
    destructibles: int
    exits: int
    walls: int


def tally(grid: Grid[Cell]) -> TileTally:
    counts = {kind: 0 for kind in CellKind}
    for row in grid:
        for cell in row:
            counts[cell.kind] += 1
    return TileTally(
        empty=counts[CellKind.EMPTY],
        enemies=counts[CellKind.ENEMY],
        power_ups=counts[CellKind.POWER_UP],
        destructibles=counts[CellKind.DESTRUCTIBLE],
        exits=counts[CellKind.EXIT],
        walls=counts[CellKind.WALL],
    )


def power_bonus(count: int) -> float:
    bonus = 0.0
    if count > 3:
        bonus = 1.5 * count
    if count > 8:
        bonus = 0.5 * count
    return bonus


def score_map(grid: Grid[Cell]) -> float:
    t = tally(grid)
    return (
        EMPTY_WEIGHT * t.empty
        + ENEMY_WEIGHT * t.enemies
        + power_bonus(t.power_ups)
        + BLOCK_WEIGHT * t.destructibles
    )


@dataclass
class SearchResult:
    score: float
    p_destructible: float
    p_power: float
    p_enemy: float
    grid: Grid[Cell]
    evaluated: int

    @property
    def params(self) -> Tuple[float, float, float]:
        return self.p_destructible, self.p_power, self.p_enemy


def grid_search(
    generator,
    destructible_values: Sequence[float] = DEFAULT_DESTRUCTIBLE_VALUES,
    power_values: Sequence[float] = DEFAULT_POWER_VALUES,
    enemy_values: Sequence[float] = DEFAULT_ENEMY_VALUES,
) -> Optional[SearchResult]:
    """Generate one map per parameter triple and keep the first best-scoring one.

    ``generator`` is a ``BombermanGenerator``; its RNG is shared across the
    whole sweep. Returns ``None`` when any value list is empty.
    """
    best: Optional[SearchResult] = None
    evaluated = 0
    triples: Iterable[Tuple[float, float, float]] = itertools.product(destructible_values, power_values, enemy_values)
    for p_md, p_power, p_enemy in triples:
        result = generator.generate(p_destructible=p_md, p_power=p_power, p_enemy=p_enemy)
        s = score_map(result.grid)
        evaluated += 1
        log.debug(event="search_candidate", p_destructible=p_md, p_power=p_power, p_enemy=p_enemy, score=s)
        if best is None or s > best.score:
            best = SearchResult(s, p_md, p_power, p_enemy, result.grid, evaluated)
    if best is not None:
        best.evaluated = evaluated
    return best


__all__ = [
    "TileTally",
    "tally",
    "power_bonus",
    "score_map",
    "SearchResult",
    "grid_search",
    "DEFAULT_DESTRUCTIBLE_VALUES",
    "DEFAULT_POWER_VALUES",
    "DEFAULT_ENEMY_VALUES",
]
