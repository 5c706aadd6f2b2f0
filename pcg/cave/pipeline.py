"""
project: PCG Maps
module: cave/pipeline.py
License: MIT

Pipeline orchestration for the cave demos.

``generate_cave``: noise seed -> N automaton iterations.
``generate_drunk_map``: empty map with the agent placed -> drunk agent walks.

Both accept an explicit ``rng``; otherwise a ``random.Random`` is built from
the config seed (random when unset) and the resolved seed is reported in the
metrics.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import resolve_seed
from ..grid import Grid, Position
from ..logging_utils import get_logger
from ..metrics import fill_ratio, finish_runtime, init_metrics, timed_phase
from .automaton import filled_count, run_automaton
from .config import AutomatonConfig, DrunkAgentConfig
from .drunk_agent import DrunkAgentResult, run_drunk_agent
from .noise import fill_noise, new_cave
from .tiles import AGENT, CaveTile

log = get_logger("pcg.cave")


@dataclass
class CaveMap:
    grid: Grid[CaveTile]
    initial: Grid[CaveTile]
    fill_history: List[int] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
    snapshots: List[Grid[CaveTile]] = field(default_factory=list)


@dataclass
class DrunkMap:
    grid: Grid[CaveTile]
    initial: Grid[CaveTile]
    start: Position
    agent: DrunkAgentResult
    metrics: Dict[str, Any] = field(default_factory=dict)


def _rng_for(seed: Optional[int], rng: Optional[random.Random]):
    resolved = resolve_seed(seed)
    return resolved, (rng if rng is not None else random.Random(resolved))


def generate_cave(config: AutomatonConfig | None = None, *, rng: random.Random | None = None) -> CaveMap:
    cfg = config or AutomatonConfig()
    seed, rng = _rng_for(cfg.seed, rng)
    start = time.perf_counter()
    metrics = init_metrics(seed)
    grid = timed_phase(metrics, "noise", fill_noise, new_cave(cfg.rows, cfg.cols), cfg.density, rng)
    initial = grid.copy()
    run = timed_phase(metrics, "automaton", run_automaton, grid, cfg.radius, cfg.threshold, cfg.iterations, cfg.mode)
    finish_runtime(metrics, start)
    total = cfg.rows * cfg.cols
    metrics.update(
        {
            "mode": cfg.mode.value,
            "initial_filled": filled_count(initial),
            "filled": filled_count(run.grid),
            "fill_ratio": fill_ratio(filled_count(run.grid), total),
        }
    )
    return CaveMap(run.grid, initial, run.fill_history, metrics, run.snapshots)


def generate_drunk_map(config: DrunkAgentConfig | None = None, *, rng: random.Random | None = None) -> DrunkMap:
    cfg = config or DrunkAgentConfig()
    seed, rng = _rng_for(cfg.seed, rng)
    start_time = time.perf_counter()
    metrics = init_metrics(seed)
    row = cfg.start_row if cfg.start_row is not None else rng.randrange(cfg.rows)
    col = cfg.start_col if cfg.start_col is not None else rng.randrange(cfg.cols)
    initial = new_cave(cfg.rows, cfg.cols)
    initial[row, col] = AGENT
    result = timed_phase(metrics, "drunk_agent", run_drunk_agent, initial, cfg, (row, col), rng)
    finish_runtime(metrics, start_time)
    occupied = result.grid.count(lambda t: t.occupied)
    metrics.update(
        {
            "start": (row, col),
            "end": result.position,
            "rooms": len(result.rooms),
            "filled": occupied,
            "fill_ratio": fill_ratio(occupied, cfg.rows * cfg.cols),
        }
    )
    log.debug(event="drunk_agent_done", start=(row, col), end=result.position, rooms=len(result.rooms))
    return DrunkMap(result.grid, initial, (row, col), result, metrics)


__all__ = ["CaveMap", "DrunkMap", "generate_cave", "generate_drunk_map"]
