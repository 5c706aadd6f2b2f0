"""Public Bomberman package interface."""

from .config import BombermanConfig
from .generator import BombermanGenerator, BombermanMap, generate_map
from .scoring import SearchResult, grid_search, power_bonus, score_map, tally
from .tiles import (
    AGENT,
    DESTRUCTIBLE,
    EMPTY,
    EXIT,
    WALL,
    Cell,
    CellKind,
    Enemy,
    PowerUp,
)  # noqa: F401

__all__ = [
    "BombermanConfig",
    "BombermanGenerator",
    "BombermanMap",
    "generate_map",
    "SearchResult",
    "grid_search",
    "power_bonus",
    "score_map",
    "tally",
    "AGENT",
    "DESTRUCTIBLE",
    "EMPTY",
    "EXIT",
    "WALL",
    "Cell",
    "CellKind",
    "Enemy",
    "PowerUp",
]
