"""Public dungeon package interface.

Import surface for the generation core: configuration, the orchestrator and its
one-call ``generate`` helper, the layout artifact and the cell-state constants.
"""

from .config import PRESETS, DungeonConfig  # noqa: F401
from .corridors import Corridor  # noqa: F401
from .errors import ConfigError, DungeonError, GenerationExhausted, InsufficientRooms  # noqa: F401
from .grid import GenerationGrid  # noqa: F401
from .layout import DungeonLayout  # noqa: F401
from .pipeline import ATTEMPTING, FAILED, IDLE, SUCCEEDED, LevelGenerator, generate  # noqa: F401
from .rooms import ROOM_NORMAL, ROOM_START, Room  # noqa: F401
from .tiles import CORRIDOR, EMPTY, FLOOR, WALL  # noqa: F401

__all__ = [
    "DungeonConfig",
    "PRESETS",
    "LevelGenerator",
    "generate",
    "DungeonLayout",
    "GenerationGrid",
    "Room",
    "Corridor",
    "ROOM_NORMAL",
    "ROOM_START",
    "DungeonError",
    "ConfigError",
    "InsufficientRooms",
    "GenerationExhausted",
    "IDLE",
    "ATTEMPTING",
    "SUCCEEDED",
    "FAILED",
    "EMPTY",
    "FLOOR",
    "WALL",
    "CORRIDOR",
]
