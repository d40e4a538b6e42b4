from typing import Dict

from .grid import GenerationGrid
from .tiles import CORRIDOR, EMPTY, FLOOR, WALL


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'attempts': 0,
        'rooms': 0,
        'corridors': 0,
        'corridors_spanning': 0,
        'corridors_extra': 0,
        'organic_cells_seeded': 0,
        'walk_cells_carved': 0,
        'rooms_grown': 0,
        'corridor_cells_absorbed': 0,
        'tiles_floor': 0,
        'tiles_corridor': 0,
        'tiles_wall': 0,
        'tiles_empty': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }


def collect_tile_counts(metrics: Dict, grid: GenerationGrid) -> None:
    counts = grid.counts()
    metrics['tiles_floor'] = counts.get(FLOOR, 0)
    metrics['tiles_corridor'] = counts.get(CORRIDOR, 0)
    metrics['tiles_wall'] = counts.get(WALL, 0)
    metrics['tiles_empty'] = counts.get(EMPTY, 0)
