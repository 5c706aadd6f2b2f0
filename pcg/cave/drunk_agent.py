"""
project: PCG Maps
module: cave/drunk_agent.py
License: MIT

"Drunk agent" corridor carver.

The agent performs ``walks`` straight walks of up to ``steps`` cells in its
current facing, marking every visited cell FILLED and stopping a walk early
when the next step would leave the map. After each walk it makes two
independent trials:

    * room  - on success stamp a ``room_rows x room_cols`` rectangle centred on
      the agent (clamped to the map) and reset the room probability to its
      base value; on failure raise it by ``p_room_increment`` (capped at 1.0).
    * turn  - on success face a uniformly random direction (possibly the same
      one) and reset the turn probability; on failure raise it by
      ``p_turn_increment`` (capped at 1.0).

The final position is marked AGENT. The input grid is left untouched.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from ..grid import Grid, Position
from ..logging_utils import get_logger
from .config import DrunkAgentConfig
from .tiles import AGENT, FILLED, CaveTile

log = get_logger("pcg.cave")


class Direction(Enum):
    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)


DIRECTIONS = tuple(Direction)


@dataclass
class Room:
    top: int
    left: int
    bottom: int  # exclusive
    right: int  # exclusive

    def cells(self) -> Iterator[Position]:
        for r in range(self.top, self.bottom):
            for c in range(self.left, self.right):
                yield r, c


@dataclass
class WalkRecord:
    start: Position
    end: Position
    facing: Direction
    steps_taken: int
    hit_boundary: bool
    room: Optional[Room]
    turned: bool
    p_room: float
    p_turn: float


@dataclass
class DrunkAgentResult:
    grid: Grid[CaveTile]
    position: Position
    walks: List[WalkRecord] = field(default_factory=list)

    @property
    def rooms(self) -> List[Room]:
        return [w.room for w in self.walks if w.room is not None]


def stamp_room(grid: Grid[CaveTile], center: Position, room_rows: int, room_cols: int) -> Room:
    """Fill a rectangle centred on ``center``, clipped to the grid bounds."""
    r, c = center
    top = r - room_rows // 2
    left = c - room_cols // 2
    room = Room(
        top=max(0, top),
        left=max(0, left),
        bottom=min(grid.rows, top + room_rows),
        right=min(grid.cols, left + room_cols),
    )
    for pos in room.cells():
        grid[pos] = FILLED
    return room


class DrunkAgent:
    def __init__(self, config: DrunkAgentConfig, position: Position, rng: random.Random):
        self.config = config
        self.position = position
        self._rng = rng
        self.facing: Direction = rng.choice(DIRECTIONS)
        self.p_room = config.p_room
        self.p_turn = config.p_turn

    def _advance(self, grid: Grid[CaveTile]):
        r, c = self.position
        dr, dc = self.facing.value
        taken = 0
        hit_boundary = False
        grid[r, c] = FILLED
        for _ in range(self.config.steps):
            nr, nc = r + dr, c + dc
            if not grid.in_bounds(nr, nc):
                hit_boundary = True
                break
            r, c = nr, nc
            grid[r, c] = FILLED
            taken += 1
        self.position = (r, c)
        return taken, hit_boundary

    def _room_trial(self, grid: Grid[CaveTile]) -> Optional[Room]:
        cfg = self.config
        if self._rng.random() < self.p_room:
            room = stamp_room(grid, self.position, cfg.room_rows, cfg.room_cols)
            self.p_room = cfg.p_room
            log.debug(event="room_stamped", top=room.top, left=room.left, bottom=room.bottom, right=room.right)
            return room
        self.p_room = min(1.0, self.p_room + cfg.p_room_increment)
        return None

    def _turn_trial(self) -> bool:
        cfg = self.config
        if self._rng.random() < self.p_turn:
            self.facing = self._rng.choice(DIRECTIONS)
            self.p_turn = cfg.p_turn
            return True
        self.p_turn = min(1.0, self.p_turn + cfg.p_turn_increment)
        return False

    def walk(self, grid: Grid[CaveTile]) -> WalkRecord:
        """Perform one walk plus its room and turn trials, mutating ``grid``."""
        start = self.position
        facing = self.facing
        taken, hit_boundary = self._advance(grid)
        room = self._room_trial(grid)
        turned = self._turn_trial()
        record = WalkRecord(start, self.position, facing, taken, hit_boundary, room, turned, self.p_room, self.p_turn)
        log.debug(
            event="walk",
            start=start,
            end=self.position,
            facing=facing.name,
            steps=taken,
            hit_boundary=hit_boundary,
            room=room is not None,
            turned=turned,
        )
        return record

    def run(self, grid: Grid[CaveTile]) -> DrunkAgentResult:
        out = grid.copy()
        result = DrunkAgentResult(out, self.position)
        for _ in range(self.config.walks):
            result.walks.append(self.walk(out))
        out[self.position] = AGENT
        result.position = self.position
        return result


def run_drunk_agent(
    grid: Grid[CaveTile], config: DrunkAgentConfig, start: Position, rng: random.Random
) -> DrunkAgentResult:
    return DrunkAgent(config, start, rng).run(grid)


__all__ = [
    "Direction",
    "DIRECTIONS",
    "Room",
    "WalkRecord",
    "DrunkAgentResult",
    "stamp_room",
    "DrunkAgent",
    "run_drunk_agent",
]
