"""
project: PCG Maps
module: bomberman/generator.py
License: MIT

Bomberman map generator.

Phases:
    * structure  - border ring + pillar lattice (``structure.stamp_structure``)
    * placement  - blocks, power-ups, exit, enemies, safe corners (``placement.place_all``)

One generator owns one ``random.Random``. Pass ``rng`` to share or script the
randomness; otherwise it is seeded from ``config.seed`` (random when unset).
The resolved seed is kept on the generator and in every map's metrics.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config import resolve_seed
from ..grid import Grid, Position
from ..logging_utils import get_logger
from ..metrics import finish_runtime, init_metrics, timed_phase
from .config import BombermanConfig
from .placement import PlacementReport, place_all
from .scoring import tally
from .structure import new_map, stamp_structure
from .tiles import Cell

log = get_logger("pcg.bomberman")


@dataclass
class BombermanMap:
    grid: Grid[Cell]
    p_destructible: float
    p_power: float
    p_enemy: float
    placement: PlacementReport
    metrics: Dict[str, Any]

    @property
    def exit_position(self) -> Optional[Position]:
        return self.placement.exit_position


class BombermanGenerator:
    def __init__(self, config: BombermanConfig | None = None, *, rng: random.Random | None = None):
        self.config = config or BombermanConfig()
        self.seed = resolve_seed(self.config.seed)
        # Local RNG so external random usage does not affect generation
        self._rng = rng if rng is not None else random.Random(self.seed)

    def generate(
        self,
        p_destructible: float | None = None,
        p_power: float | None = None,
        p_enemy: float | None = None,
    ) -> BombermanMap:
        """Build one map; any probability left as ``None`` comes from the config."""
        cfg = self.config
        p_md = cfg.p_destructible if p_destructible is None else p_destructible
        p_pw = cfg.p_power if p_power is None else p_power
        p_en = cfg.p_enemy if p_enemy is None else p_enemy

        start = time.perf_counter()
        metrics = init_metrics(self.seed)
        grid = new_map(cfg.size)
        free = timed_phase(metrics, "structure", stamp_structure, grid)
        report = timed_phase(
            metrics, "placement", place_all, grid, free, p_md, p_pw, p_en, self._rng, cfg.safe_corners
        )
        finish_runtime(metrics, start)
        metrics.update(
            {
                "free_cells": report.free_cells,
                "block_candidates": report.block_candidates,
                "destructible_target": report.destructible_target,
                "power_target": report.power_target,
                "enemy_target": report.enemy_target,
            }
        )
        metrics["tiles"] = tally(grid)._asdict()
        log.debug(event="bomberman_generated", seed=self.seed, runtime_us=metrics["runtime_us"])
        return BombermanMap(grid, p_md, p_pw, p_en, report, metrics)


def generate_map(config: BombermanConfig | None = None, *, rng: random.Random | None = None) -> BombermanMap:
    """One-shot convenience wrapper."""
    return BombermanGenerator(config, rng=rng).generate()


__all__ = ["BombermanMap", "BombermanGenerator", "generate_map"]
