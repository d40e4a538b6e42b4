"""Finished generation artifact.

``DungeonLayout`` is what renderers and the HTTP API consume: the final cell grid
plus the room and corridor lists that produced it. Nothing mutates a layout after
the orchestrator hands it out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .corridors import Corridor
from .grid import GenerationGrid
from .rooms import ROOM_START, Room
from .tiles import CHARS, state_to_name


@dataclass
class DungeonLayout:
    grid: GenerationGrid
    rooms: List[Room]
    corridors: List[Corridor]
    seed: int
    attempts: int = 1
    spanning_corridors: int = 0
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def start_room(self) -> Optional[Room]:
        for room in self.rooms:
            if room.room_type == ROOM_START:
                return room
        return None

    def to_ascii(self) -> str:
        return "\n".join(self.grid.rows())

    def to_dict(self, include_paths: bool = True) -> Dict[str, Any]:
        corridors = []
        for c in self.corridors:
            entry = c.to_dict()
            if not include_paths:
                entry.pop("path")
                entry["length"] = len(c.path)
            corridors.append(entry)
        return {
            "seed": self.seed,
            "attempts": self.attempts,
            "width": self.width,
            "height": self.height,
            "grid": self.grid.rows(),
            "legend": {ch: state_to_name(state) for state, ch in CHARS.items()},
            "rooms": [r.to_dict() for r in self.rooms],
            "corridors": corridors,
            "spanning_corridors": self.spanning_corridors,
            "metrics": self.metrics,
        }


__all__ = ["DungeonLayout"]
