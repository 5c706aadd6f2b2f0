"""
project: PCG Maps
module: cave/config.py
License: MIT
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..config import apply_env_overrides, apply_overrides, check_non_negative, check_positive, check_probability
from ..errors import ConfigError

AUTOMATON_ENV_PREFIX = "PCG_AUTOMATON_"
DRUNK_ENV_PREFIX = "PCG_DRUNK_"


class AutomatonMode(str, Enum):
    DOUBLE_BUFFERED = "double"  # every cell reads the previous generation
    IN_PLACE = "inplace"  # later cells see updates made earlier in the same sweep


@dataclass
class AutomatonConfig:
    rows: int = 25
    cols: int = 40
    radius: int = 1
    threshold: int = 5
    iterations: int = 3
    density: float = 0.45
    mode: AutomatonMode = AutomatonMode.DOUBLE_BUFFERED
    seed: Optional[int] = None

    def validate(self) -> "AutomatonConfig":
        check_positive("rows", self.rows)
        check_positive("cols", self.cols)
        check_non_negative("radius", self.radius)
        check_non_negative("threshold", self.threshold)
        check_non_negative("iterations", self.iterations)
        check_probability("density", self.density)
        try:
            self.mode = AutomatonMode(self.mode)
        except ValueError:
            raise ConfigError("mode", self.mode, "expected 'double' or 'inplace'") from None
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "AutomatonConfig":
        return apply_overrides(apply_env_overrides(cls(), AUTOMATON_ENV_PREFIX, environ), overrides).validate()


@dataclass
class DrunkAgentConfig:
    rows: int = 25
    cols: int = 40
    walks: int = 8
    steps: int = 12
    room_rows: int = 5
    room_cols: int = 4
    p_room: float = 0.3
    p_room_increment: float = 0.1
    p_turn: float = 0.25
    p_turn_increment: float = 0.15
    start_row: Optional[int] = None
    start_col: Optional[int] = None
    seed: Optional[int] = None

    def validate(self) -> "DrunkAgentConfig":
        check_positive("rows", self.rows)
        check_positive("cols", self.cols)
        check_non_negative("walks", self.walks)
        check_non_negative("steps", self.steps)
        check_non_negative("room_rows", self.room_rows)
        check_non_negative("room_cols", self.room_cols)
        check_probability("p_room", self.p_room)
        check_probability("p_turn", self.p_turn)
        check_non_negative("p_room_increment", self.p_room_increment)
        check_non_negative("p_turn_increment", self.p_turn_increment)
        if self.start_row is not None and not 0 <= self.start_row < self.rows:
            raise ConfigError("start_row", self.start_row, f"must be within [0, {self.rows})")
        if self.start_col is not None and not 0 <= self.start_col < self.cols:
            raise ConfigError("start_col", self.start_col, f"must be within [0, {self.cols})")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "DrunkAgentConfig":
        return apply_overrides(apply_env_overrides(cls(), DRUNK_ENV_PREFIX, environ), overrides).validate()


__all__ = [
    "AutomatonMode",
    "AutomatonConfig",
    "DrunkAgentConfig",
    "AUTOMATON_ENV_PREFIX",
    "DRUNK_ENV_PREFIX",
]
