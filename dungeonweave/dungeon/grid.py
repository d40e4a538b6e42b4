from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from .tiles import EMPTY, OPEN_STATES, state_to_char

Coord2D = Tuple[int, int]

# 8-neighbourhood offsets, center excluded
NEIGHBORS_8 = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0))


class GenerationGrid:
    """Owned cell-state buffer for one generation attempt.

    Column-major like the rest of the dungeon code: ``cells[x][y]``. The buffer is
    allocated once and cleared with ``reset()`` between attempts.
    """

    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: List[List[int]] = [[EMPTY for _ in range(height)] for _ in range(width)]

    def reset(self, state: int = EMPTY) -> None:
        for column in self.cells:
            for y in range(self.height):
                column[y] = state

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.cells[x][y]

    def set(self, x: int, y: int, state: int) -> None:
        self.cells[x][y] = state

    def is_open(self, x: int, y: int) -> bool:
        return self.cells[x][y] in OPEN_STATES

    def coords(self) -> Iterator[Coord2D]:
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def neighbors8(self, x: int, y: int) -> Iterator[Coord2D]:
        for dx, dy in NEIGHBORS_8:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    def count(self, state: int) -> int:
        return sum(column.count(state) for column in self.cells)

    def counts(self) -> Dict[int, int]:
        out: Dict[int, int] = {}
        for column in self.cells:
            for state in column:
                out[state] = out.get(state, 0) + 1
        return out

    def rows(self) -> List[str]:
        # Row strings top to bottom (y), one character per cell
        return ["".join(state_to_char(self.cells[x][y]) for x in range(self.width)) for y in range(self.height)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, GenerationGrid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self.cells == other.cells


__all__ = ["GenerationGrid", "Coord2D", "NEIGHBORS_8"]
