"""Organic terrain layer and its merge into rooms and corridors.

Three passes run before rasterization when organic generation is enabled:

    * ``apply_noise``   - threshold coherent noise into FLOOR blobs.
    * ``random_walk``   - carve a wandering FLOOR trail.
    * ``blend_organic`` - grow rooms and corridor paths into adjacent FLOOR cells.

All three read and write the attempt's GenerationGrid. At this point the grid only
holds noise/walk FLOOR; rooms and corridors are painted afterwards by the
rasterizer, so the blend sees organic cells only.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .corridors import Corridor
from .grid import NEIGHBORS_8, GenerationGrid
from .rng import RandomSource
from .rooms import Room
from .tiles import FLOOR

Coord2D = Tuple[int, int]

NOISE_OFFSET_RANGE = 1000.0

# Candidate steps in scan order: dx outer, dy inner, cardinals only
_WALK_STEPS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0) and abs(dx) + abs(dy) == 1
)


def apply_noise(grid: GenerationGrid, rng: RandomSource, threshold: float, scale: float) -> int:
    """Mark FLOOR where noise exceeds ``threshold``; returns cells marked."""
    offset_x = rng.uniform(0.0, NOISE_OFFSET_RANGE)
    offset_y = rng.uniform(0.0, NOISE_OFFSET_RANGE)
    marked = 0
    for x in range(grid.width):
        for y in range(grid.height):
            if rng.noise(offset_x + x * scale, offset_y + y * scale) > threshold:
                grid.set(x, y, FLOOR)
                marked += 1
    return marked


def _next_random_position(grid: GenerationGrid, rng: RandomSource, pos: Coord2D) -> Coord2D:
    x, y = pos
    options = [
        (dx, dy)
        for dx, dy in _WALK_STEPS
        if 0 < x + dx < grid.width - 1 and 0 < y + dy < grid.height - 1
    ]
    if not options:
        return pos
    dx, dy = rng.choice(options)
    return (x + dx, y + dy)


def random_walk(
    grid: GenerationGrid,
    rng: RandomSource,
    steps: int,
    turn_chance: float,
    keep_direction: bool = False,
) -> int:
    """Carve a FLOOR trail; returns the number of distinct cells the walker marked.

    With ``keep_direction`` False (the historical behaviour) the "continue" branch
    re-rolls a fresh random neighbour just like a turn does. With it True the
    walker repeats its previous step vector until the next turn.
    """
    if grid.width < 3 or grid.height < 3:
        return 0
    x = rng.randrange(1, grid.width - 1)
    y = rng.randrange(1, grid.height - 1)
    heading: Optional[Coord2D] = None
    carved = set()
    for _ in range(steps):
        grid.set(x, y, FLOOR)
        carved.add((x, y))
        if rng.value() < turn_chance or not keep_direction or heading is None:
            nx, ny = _next_random_position(grid, rng, (x, y))
            heading = (nx - x, ny - y)
        else:
            nx, ny = x + heading[0], y + heading[1]
        x = min(max(nx, 1), grid.width - 2)
        y = min(max(ny, 1), grid.height - 2)
    return len(carved)


def blend_organic(
    grid: GenerationGrid, rooms: List[Room], corridors: List[Corridor], iterations: int
) -> Dict[str, int]:
    """Absorb adjacent organic FLOOR into rooms and corridors.

    Rooms grow toward higher coordinates only (position never moves). Corridor
    paths only gain points. Returns growth counters for metrics.
    """
    rooms_grown = 0
    absorbed = 0
    for _ in range(iterations):
        for room in rooms:
            x0, y0, x1, y1 = room.expanded_bounds(1)
            found = [
                (x, y)
                for x in range(x0, x1)
                for y in range(y0, y1)
                if grid.in_bounds(x, y) and grid.get(x, y) == FLOOR
            ]
            before = room.size
            for x, y in found:
                room.grow_to_include(x, y)
            if room.size != before:
                rooms_grown += 1
        for corridor in corridors:
            on_path = set(corridor.path)
            added: List[Coord2D] = []
            for px, py in list(corridor.path):
                for dx, dy in NEIGHBORS_8:
                    x, y = px + dx, py + dy
                    if not grid.in_bounds(x, y) or grid.get(x, y) != FLOOR:
                        continue
                    if (x, y) in on_path:
                        continue
                    on_path.add((x, y))
                    added.append((x, y))
            corridor.path.extend(added)
            absorbed += len(added)
    return {"rooms_grown": rooms_grown, "corridor_cells_absorbed": absorbed}


__all__ = ["apply_noise", "random_walk", "blend_organic"]
