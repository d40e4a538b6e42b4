"""Corridor construction between two rooms.

A corridor starts on the wall-facing edge of room A that points toward room B,
ends on the matching edge of room B, and walks between them as a single-bend L:
one axis first (coin flip), then the other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .rng import RandomSource
from .rooms import Room

Coord2D = Tuple[int, int]


@dataclass
class Corridor:
    room_a: int
    room_b: int
    path: List[Coord2D] = field(default_factory=list)

    @classmethod
    def between(cls, rooms: Sequence[Room], a: int, b: int, rng: RandomSource) -> "Corridor":
        if a == b:
            raise ValueError("corridor endpoints must be two distinct rooms")
        start = closest_point_on_room(rooms[a], rooms[b].center)
        end = closest_point_on_room(rooms[b], rooms[a].center)
        horizontal_first = rng.randrange(0, 2) == 0
        return cls(a, b, build_l_path(start, end, horizontal_first))

    def connects(self, a: int, b: int) -> bool:
        return (self.room_a, self.room_b) in ((a, b), (b, a))

    @property
    def start(self) -> Coord2D:
        return self.path[0]

    @property
    def end(self) -> Coord2D:
        return self.path[-1]

    def to_dict(self):
        return {"room_a": self.room_a, "room_b": self.room_b, "path": [list(p) for p in self.path]}


def closest_point_on_room(room: Room, target: Coord2D) -> Coord2D:
    """Point on ``room``'s perimeter on the side facing ``target``.

    The target is clamped into the room, then pushed onto the vertical edge when
    the target lies mostly left/right of the center, else onto the horizontal edge.
    """
    x_min, y_min, x_max, y_max = room.bounds()
    tx, ty = target
    cx, cy = room.center
    px = min(max(tx, x_min), x_max - 1)
    py = min(max(ty, y_min), y_max - 1)
    if abs(tx - cx) > abs(ty - cy):
        px = x_min if tx < cx else x_max - 1
    else:
        py = y_min if ty < cy else y_max - 1
    return (px, py)


def build_l_path(start: Coord2D, end: Coord2D, horizontal_first: bool) -> List[Coord2D]:
    x, y = start
    ex, ey = end
    path = [(x, y)]

    def walk_x():
        nonlocal x
        while x != ex:
            x += 1 if x < ex else -1
            path.append((x, y))

    def walk_y():
        nonlocal y
        while y != ey:
            y += 1 if y < ey else -1
            path.append((x, y))

    if horizontal_first:
        walk_x()
        walk_y()
    else:
        walk_y()
        walk_x()
    return path


__all__ = ["Corridor", "closest_point_on_room", "build_l_path"]
