"""
project: PCG Maps
module: cave/tiles.py
License: MIT
"""

from enum import IntEnum


class CaveTile(IntEnum):
    EMPTY = 0
    FILLED = 1  # wall / room / carved corridor
    AGENT = 2

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    @property
    def occupied(self) -> bool:
        return self is not CaveTile.EMPTY


GLYPHS = {
    CaveTile.EMPTY: ".",
    CaveTile.FILLED: "#",
    CaveTile.AGENT: "@",
}

EMPTY = CaveTile.EMPTY
FILLED = CaveTile.FILLED
AGENT = CaveTile.AGENT

__all__ = ["CaveTile", "GLYPHS", "EMPTY", "FILLED", "AGENT"]
