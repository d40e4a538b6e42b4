from __future__ import annotations

from typing import List

from .corridors import Corridor
from .grid import GenerationGrid
from .rooms import Room
from .tiles import CORRIDOR, EMPTY, FLOOR, OPEN_STATES, WALL


def fill_grid(grid: GenerationGrid, rooms: List[Room], corridors: List[Corridor], preserve_base: bool = False) -> None:
    """Paint rooms as FLOOR and corridor paths as CORRIDOR.

    ``preserve_base`` keeps whatever the organic passes left in the grid; without
    it the grid is cleared first. Rooms win over corridors: a corridor cell is only
    painted where the grid is still EMPTY.
    """
    if not preserve_base:
        grid.reset(EMPTY)
    for room in rooms:
        for x, y in room.cells():
            if grid.in_bounds(x, y):
                grid.set(x, y, FLOOR)
    for corridor in corridors:
        for x, y in corridor.path:
            if grid.in_bounds(x, y) and grid.get(x, y) == EMPTY:
                grid.set(x, y, CORRIDOR)


def build_walls(grid: GenerationGrid) -> int:
    """Wall off every EMPTY 8-neighbour of a FLOOR/CORRIDOR cell; returns walls placed.

    Must run once over the finished paint. WALL is only ever written onto EMPTY,
    so open cells are never overwritten.
    """
    placed = 0
    cells = grid.cells
    for x in range(grid.width):
        column = cells[x]
        for y in range(grid.height):
            if column[y] not in OPEN_STATES:
                continue
            for nx, ny in grid.neighbors8(x, y):
                if cells[nx][ny] == EMPTY:
                    cells[nx][ny] = WALL
                    placed += 1
    return placed


def rasterize(grid: GenerationGrid, rooms: List[Room], corridors: List[Corridor], preserve_base: bool = False) -> int:
    fill_grid(grid, rooms, corridors, preserve_base=preserve_base)
    return build_walls(grid)


__all__ = ["fill_grid", "build_walls", "rasterize"]
