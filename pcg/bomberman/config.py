"""
project: PCG Maps
module: bomberman/config.py
License: MIT
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from ..config import apply_env_overrides, apply_overrides, check_positive, check_probability

ENV_PREFIX = "PCG_BOMBERMAN_"


@dataclass
class BombermanConfig:
    size: int = 15
    p_destructible: float = 0.4
    p_power: float = 0.1
    p_enemy: float = 0.05
    safe_corners: bool = False
    seed: Optional[int] = None

    def validate(self) -> "BombermanConfig":
        check_positive("size", self.size)
        check_probability("p_destructible", self.p_destructible)
        check_probability("p_power", self.p_power)
        check_probability("p_enemy", self.p_enemy)
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "BombermanConfig":
        return apply_overrides(apply_env_overrides(cls(), ENV_PREFIX, environ), overrides).validate()


__all__ = ["BombermanConfig", "ENV_PREFIX"]
