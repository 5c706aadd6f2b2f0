"""Public cave package interface: cellular automaton + drunk agent."""

from .automaton import count_occupied, run_automaton, step, step_double_buffered, step_in_place
from .config import AutomatonConfig, AutomatonMode, DrunkAgentConfig
from .drunk_agent import DIRECTIONS, Direction, DrunkAgent, DrunkAgentResult, Room, run_drunk_agent, stamp_room
from .noise import fill_noise, new_cave
from .pipeline import CaveMap, DrunkMap, generate_cave, generate_drunk_map
from .tiles import AGENT, EMPTY, FILLED, CaveTile  # noqa: F401

__all__ = [
    "count_occupied",
    "run_automaton",
    "step",
    "step_double_buffered",
    "step_in_place",
    "AutomatonConfig",
    "AutomatonMode",
    "DrunkAgentConfig",
    "DIRECTIONS",
    "Direction",
    "DrunkAgent",
    "DrunkAgentResult",
    "Room",
    "run_drunk_agent",
    "stamp_room",
    "fill_noise",
    "new_cave",
    "CaveMap",
    "DrunkMap",
    "generate_cave",
    "generate_drunk_map",
    "AGENT",
    "EMPTY",
    "FILLED",
    "CaveTile",
]
