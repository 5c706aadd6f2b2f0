"""
project: PCG Maps
module: metrics.py
License: MIT
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict


def init_metrics(seed: int) -> Dict[str, Any]:
    return {
        "seed": seed,
        "runtime_us": 0,
        "phase_us": {},
    }


def timed_phase(metrics: Dict[str, Any], label: str, fn: Callable, *a, **k):
    """Run ``fn`` and record its duration (microseconds) under ``phase_us[label]``."""
    ps = time.perf_counter()
    r = fn(*a, **k)
    pe = time.perf_counter()
    metrics["phase_us"][label] = int((pe - ps) * 1_000_000)
    return r


def finish_runtime(metrics: Dict[str, Any], start: float) -> None:
    metrics["runtime_us"] = int((time.perf_counter() - start) * 1_000_000)


def fill_ratio(filled: int, total: int) -> float:
    return (filled / total) if total else 0.0
