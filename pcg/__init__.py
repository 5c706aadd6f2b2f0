"""
project: PCG Maps
module: __init__.py
License: MIT

Procedural tile map generators.

Two families live here:
    * ``pcg.bomberman`` - border + pillar lattice maps with destructible blocks,
      power-ups, a hidden exit and enemies, plus a scoring heuristic and a
      parameter grid search.
    * ``pcg.cave`` - cellular automaton smoothing (double buffered or in place)
      over Bernoulli noise, and a "drunk agent" corridor/room carver.

Configuration is sourced from dataclass defaults, ``PCG_*`` environment
variables (``.env`` supported through the CLI) and CLI flags, in increasing
order of precedence.
"""

from .errors import ConfigError, PCGError
from .grid import Grid, Position

__all__ = ["ConfigError", "PCGError", "Grid", "Position"]
