"""
project: PCG Maps
module: bomberman/tiles.py
License: MIT

Cell kinds for Bomberman maps.

A cell is a ``Cell(kind, payload)`` pair. Only POWER_UP and ENEMY cells carry a
payload (a ``PowerUp`` / ``Enemy`` member); every other kind has ``None``.
Glyphs match the classic console rendering.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Union


class CellKind(Enum):
    WALL = "X"  # impassable border or pillar
    DESTRUCTIBLE = "*"
    POWER_UP = "power_up"
    ENEMY = "enemy"
    EXIT = "S"
    EMPTY = "-"
    AGENT = "A"


class PowerUp(Enum):
    BOMB = "#"
    FIRE = "$"
    SPEED = "@"
    REMOTE = "&"


class Enemy(Enum):
    BALLOM = "B"
    ONIL = "O"
    DAHL = "D"
    MINVO = "M"


class Cell(NamedTuple):
    kind: CellKind
    payload: Optional[Union[PowerUp, Enemy]] = None

    @property
    def glyph(self) -> str:
        if self.payload is not None:
            return self.payload.value
        return self.kind.value

    @property
    def impassable(self) -> bool:
        return self.kind is CellKind.WALL


WALL = Cell(CellKind.WALL)
DESTRUCTIBLE = Cell(CellKind.DESTRUCTIBLE)
EXIT = Cell(CellKind.EXIT)
EMPTY = Cell(CellKind.EMPTY)
AGENT = Cell(CellKind.AGENT)

POWER_UPS = tuple(PowerUp)
ENEMIES = tuple(Enemy)


def power_up(kind: PowerUp) -> Cell:
    return Cell(CellKind.POWER_UP, kind)


def enemy(kind: Enemy) -> Cell:
    return Cell(CellKind.ENEMY, kind)


__all__ = [
    "CellKind",
    "PowerUp",
    "Enemy",
    "Cell",
    "WALL",
    "DESTRUCTIBLE",
    "EXIT",
    "EMPTY",
    "AGENT",
    "POWER_UPS",
    "ENEMIES",
    "power_up",
    "enemy",
]
