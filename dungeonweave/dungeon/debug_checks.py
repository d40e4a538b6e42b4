"""Structural diagnostics for a finished layout.

``analyze`` returns lists of offending coordinates / indices; an empty list for
every key means the layout satisfies the generator's structural invariants.
Padded-overlap results are only meaningful for layouts built without the organic
blend, since blending grows rooms after placement.
"""
from __future__ import annotations

from typing import Any, Dict

from .connectivity import reachable_rooms
from .layout import DungeonLayout
from .rooms import iter_padded_overlaps
from .tiles import EMPTY, OPEN_STATES, WALL


def analyze(layout: DungeonLayout) -> Dict[str, Any]:
    grid = layout.grid
    open_without_wall = []
    orphan_walls = []
    for x, y in grid.coords():
        state = grid.get(x, y)
        if state in OPEN_STATES:
            if any(grid.get(nx, ny) == EMPTY for nx, ny in grid.neighbors8(x, y)):
                open_without_wall.append((x, y))
        elif state == WALL:
            if not any(grid.is_open(nx, ny) for nx, ny in grid.neighbors8(x, y)):
                orphan_walls.append((x, y))
    reachable = reachable_rooms(len(layout.rooms), layout.corridors)
    return {
        "padded_overlaps": list(iter_padded_overlaps(layout.rooms)),
        "open_cells_missing_wall": open_without_wall,
        "orphan_walls": orphan_walls,
        "unreachable_rooms": [i for i in range(len(layout.rooms)) if i not in reachable],
    }


def summarize(layout: DungeonLayout) -> Dict[str, int]:
    return {k: len(v) for k, v in analyze(layout).items()}
