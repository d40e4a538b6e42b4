from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .config import DungeonConfig
from .errors import InsufficientRooms
from .rng import RandomSource

ROOM_NORMAL = "normal"
ROOM_START = "start"

ROOM_PADDING = 2  # wall ring (1) plus a gap
MARGIN = 2  # keep rooms off the outer two rows/columns of the level

Rect = Tuple[int, int, int, int]  # x_min, y_min, x_max (exclusive), y_max (exclusive)


@dataclass
class Room:
    x: int
    y: int
    w: int
    h: int
    room_type: str = ROOM_NORMAL
    is_main_path: bool = False

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"room size must be positive, got {self.w}x{self.h}")

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.w, self.h)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def bounds(self) -> Rect:
        return (self.x, self.y, self.x + self.w, self.y + self.h)

    def expanded_bounds(self, expansion: int) -> Rect:
        return (self.x - expansion, self.y - expansion, self.x + self.w + expansion, self.y + self.h + expansion)

    def cells(self):
        for ix in range(self.x, self.x + self.w):
            for iy in range(self.y, self.y + self.h):
                yield ix, iy

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def on_perimeter(self, x: int, y: int) -> bool:
        if not self.contains(x, y):
            return False
        return x in (self.x, self.x + self.w - 1) or y in (self.y, self.y + self.h - 1)

    def overlaps(self, other: "Room", padding: int = 1) -> bool:
        ax0, ay0, ax1, ay1 = self.expanded_bounds(padding)
        bx0, by0, bx1, by1 = other.expanded_bounds(padding)
        return ax0 < bx1 and bx0 < ax1 and ay0 < by1 and by0 < ay1

    def grow_to_include(self, x: int, y: int) -> bool:
        """Grow (never shrink) so the box reaches (x, y); position is fixed."""
        w = max(self.w, x - self.x + 1)
        h = max(self.h, y - self.y + 1)
        grown = (w, h) != (self.w, self.h)
        self.w, self.h = w, h
        return grown

    def to_dict(self):
        return {
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "type": self.room_type,
            "is_main_path": self.is_main_path,
        }


def place_rooms(config: DungeonConfig, rng: RandomSource) -> List[Room]:
    """Rejection-sample non-overlapping rooms.

    The target count is drawn once; each candidate costs one attempt whether it is
    accepted or not. Raises InsufficientRooms when fewer than ``min_rooms`` fit.
    The first accepted room is tagged as the start room.
    """
    target = rng.randint(config.min_rooms, config.max_rooms)
    (min_w, min_h), (max_w, max_h) = config.min_room_size, config.max_room_size
    width, height = config.level_width, config.level_height
    rooms: List[Room] = []
    attempts = 0
    while len(rooms) < target and attempts < config.max_placement_attempts:
        attempts += 1
        w = rng.randint(min_w, max_w)
        h = rng.randint(min_h, max_h)
        x_hi = width - w - MARGIN
        y_hi = height - h - MARGIN
        if x_hi < MARGIN or y_hi < MARGIN:
            # no legal position for this size on this level
            continue
        # a size that exactly fills the margin box has the single position MARGIN
        x = rng.randrange(MARGIN, max(x_hi, MARGIN + 1))
        y = rng.randrange(MARGIN, max(y_hi, MARGIN + 1))
        candidate = Room(x, y, w, h)
        if _room_overlaps(candidate, rooms):
            continue
        rooms.append(candidate)
    if len(rooms) < config.min_rooms:
        raise InsufficientRooms(len(rooms), config.min_rooms)
    rooms[0].room_type = ROOM_START
    return rooms


def _room_overlaps(room: Room, existing: List[Room]) -> bool:
    return any(room.overlaps(r, ROOM_PADDING) for r in existing)


def iter_padded_overlaps(rooms: List[Room]) -> Iterator[Tuple[int, int]]:
    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            if rooms[i].overlaps(rooms[j], ROOM_PADDING):
                yield i, j


__all__ = [
    "Room",
    "ROOM_NORMAL",
    "ROOM_START",
    "ROOM_PADDING",
    "place_rooms",
    "iter_padded_overlaps",
]
