"""
project: PCG Maps
module: config.py
License: MIT

Shared configuration helpers: env var overrides for the dataclass configs,
range checks and seed resolution.

Every generator family owns a dataclass config (see ``pcg.bomberman.config``
and ``pcg.cave.config``). Env keys are ``<prefix><FIELD>`` in upper case, e.g.
``PCG_BOMBERMAN_SAFE_CORNERS=1``. ``PCG_SEED`` is a global fallback for any
config whose seed is still unset.
"""

from __future__ import annotations

import os
import random
from dataclasses import fields
from enum import Enum
from typing import Mapping, Optional

from .errors import ConfigError

FALSY = {"0", "false", "no", "off", ""}
GLOBAL_SEED_ENV = "PCG_SEED"


def _coerce(name: str, raw: str, default):
    try:
        if isinstance(default, bool):
            return raw.strip().lower() not in FALSY
        if isinstance(default, Enum):
            return type(default)(raw.strip().lower())
        if isinstance(default, int):
            return int(raw)
        if isinstance(default, float):
            return float(raw)
        if default is None:
            return int(raw) if raw.strip() else None
    except ValueError:
        raise ConfigError(name, raw, "cannot parse value") from None
    return raw


def apply_env_overrides(cfg, prefix: str, environ: Optional[Mapping[str, str]] = None):
    """Overwrite dataclass fields of ``cfg`` from ``environ`` (default os.environ).

    Field types are inferred from the declared defaults. Returns ``cfg`` for chaining.
    """
    env = os.environ if environ is None else environ
    for f in fields(cfg):
        key = f"{prefix}{f.name.upper()}"
        if key in env:
            setattr(cfg, f.name, _coerce(key, env[key], f.default))
    if getattr(cfg, "seed", None) is None and env.get(GLOBAL_SEED_ENV, "").strip():
        cfg.seed = _coerce(GLOBAL_SEED_ENV, env[GLOBAL_SEED_ENV], None)
    return cfg


def apply_overrides(cfg, overrides: Mapping[str, object]):
    """Set every non-``None`` entry of ``overrides`` on ``cfg`` (CLI flags left unset are skipped)."""
    for k, v in overrides.items():
        if v is not None:
            setattr(cfg, k, v)
    return cfg


def check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigError(name, value, "probability must be within [0, 1]")


def check_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ConfigError(name, value, "must be > 0")


def check_non_negative(name: str, value: int | float) -> None:
    if value < 0:
        raise ConfigError(name, value, "must be >= 0")


def resolve_seed(seed: Optional[int]) -> int:
    # 0 is a valid deterministic seed; None => random
    if seed is None:
        return random.randint(0, 2**31 - 1)
    return seed


__all__ = [
    "apply_env_overrides",
    "apply_overrides",
    "check_probability",
    "check_positive",
    "check_non_negative",
    "resolve_seed",
]
