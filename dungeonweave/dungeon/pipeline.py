"""Generation orchestration.

``LevelGenerator`` owns one generation session: it picks the seed, runs the
ordered phases (placement, connection, optional organic blend, rasterization)
and retries the whole attempt under a reseed policy when placement comes up
short. Callers either get a complete ``DungeonLayout`` or, once the attempt
budget is spent, nothing at all (``state == FAILED`` with ``last_failure`` set).

``generate(config)`` is the one-call surface: it returns the layout or raises
``GenerationExhausted``.
"""
from __future__ import annotations

import random
import time
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .config import DungeonConfig
from .connectivity import connect_rooms
from .corridors import Corridor
from .errors import GenerationExhausted, InsufficientRooms
from .grid import GenerationGrid
from .layout import DungeonLayout
from .metrics import collect_tile_counts, init_metrics
from .organic import apply_noise, blend_organic, random_walk
from .raster import rasterize
from .rng import RandomSource
from .rooms import Room, place_rooms

IDLE = "idle"
ATTEMPTING = "attempting"
SUCCEEDED = "succeeded"
FAILED = "failed"

RANDOM_SEED_RANGE = 10000

log = get_logger("dungeonweave.dungeon")


class LevelGenerator:
    def __init__(self, config: DungeonConfig | None = None, seed_source: random.Random | None = None):
        self.config = (config if config is not None else DungeonConfig()).validate()
        # Picks fresh seeds when use_random_seed is set; never touches generation draws
        self._seed_source = seed_source if seed_source is not None else random.Random()
        self.state = IDLE
        self.seed: int = self.config.seed
        self.attempts = 0
        self.grid: Optional[GenerationGrid] = None
        self.rooms: List[Room] = []
        self.corridors: List[Corridor] = []
        self.spanning_corridors = 0
        self.start_room: Optional[Room] = None
        self.layout: Optional[DungeonLayout] = None
        self.last_failure: Optional[GenerationExhausted] = None
        self.metrics: Dict[str, Any] = {}
        # Accumulated (rooms, corridors) of every successful generation
        self.history: List[Tuple[List[Room], List[Corridor]]] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def generate_level(self) -> Optional[DungeonLayout]:
        cfg = self.config
        self._clear_session()
        self.seed = self._pick_seed()
        rng = RandomSource(self.seed)
        self.grid = GenerationGrid(cfg.level_width, cfg.level_height)
        self.metrics = init_metrics() if cfg.enable_metrics else {}
        self.state = ATTEMPTING
        started = time.perf_counter()
        phase_times: Dict[str, int] = {}

        while self.attempts < cfg.max_generation_attempts:
            self.attempts += 1
            try:
                self._try_generate(rng, phase_times)
            except InsufficientRooms as exc:
                log.warn(
                    event="generation_attempt_failed",
                    attempt=self.attempts,
                    seed=self.seed,
                    placed=exc.placed,
                    required=exc.required,
                )
                if self.attempts < cfg.max_generation_attempts:
                    self.seed = self._next_seed()
                    rng.reseed(self.seed)
                self._clear_generation_data()
                continue
            return self._finish(started, phase_times)

        self.state = FAILED
        self.last_failure = GenerationExhausted(self.attempts, self.seed)
        if cfg.enable_metrics:
            self.metrics["attempts"] = self.attempts
            self.metrics["runtime_ms"] = int((time.perf_counter() - started) * 1000)
            self.metrics["phase_ms"] = phase_times
        log.warn(event="generation_exhausted", attempts=self.attempts, seed=self.seed)
        return None

    def clear(self) -> None:
        """Drop the current layout and the accumulated history."""
        self._clear_session()
        self.history.clear()
        self.layout = None
        self.last_failure = None
        self.metrics = {}
        self.state = IDLE

    # ------------------------------------------------------------------
    # Attempt
    # ------------------------------------------------------------------
    def _try_generate(self, rng: RandomSource, phase_times: Dict[str, int]) -> None:
        cfg = self.config
        grid = self.grid

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = phase_times.get(label, 0) + int((time.perf_counter() - ps) * 1000)
            return r

        grid.reset()
        self.rooms = _phase("placement", place_rooms, cfg, rng)
        self.start_room = self.rooms[0]
        self.corridors, self.spanning_corridors = _phase(
            "connect", connect_rooms, self.rooms, rng, cfg.extra_connection_chance
        )
        if cfg.use_organic_generation:
            seeded = _phase("noise", apply_noise, grid, rng, cfg.noise_threshold, cfg.noise_scale)
            walked = _phase(
                "random_walk",
                random_walk,
                grid,
                rng,
                cfg.random_walk_steps,
                cfg.random_walk_turn_chance,
                cfg.walk_keep_direction,
            )
            growth = _phase("blend", blend_organic, grid, self.rooms, self.corridors, cfg.organic_blend_iterations)
            if cfg.enable_metrics:
                self.metrics["organic_cells_seeded"] = seeded
                self.metrics["walk_cells_carved"] = walked
                self.metrics.update(growth)
        _phase("raster", rasterize, grid, self.rooms, self.corridors, preserve_base=cfg.use_organic_generation)

    def _finish(self, started: float, phase_times: Dict[str, int]) -> DungeonLayout:
        self.state = SUCCEEDED
        if self.config.enable_metrics:
            m = self.metrics
            m["attempts"] = self.attempts
            m["rooms"] = len(self.rooms)
            m["corridors"] = len(self.corridors)
            m["corridors_spanning"] = self.spanning_corridors
            m["corridors_extra"] = len(self.corridors) - self.spanning_corridors
            collect_tile_counts(m, self.grid)
            m["runtime_ms"] = int((time.perf_counter() - started) * 1000)
            m["phase_ms"] = phase_times
        self.history.append((list(self.rooms), list(self.corridors)))
        self.layout = DungeonLayout(
            grid=self.grid,
            rooms=self.rooms,
            corridors=self.corridors,
            seed=self.seed,
            attempts=self.attempts,
            spanning_corridors=self.spanning_corridors,
            metrics=self.metrics,
        )
        log.info(
            event="dungeon_generated",
            rooms=len(self.rooms),
            corridors=len(self.corridors),
            seed=self.seed,
            attempts=self.attempts,
        )
        return self.layout

    # ------------------------------------------------------------------
    # Seeds & state
    # ------------------------------------------------------------------
    def _pick_seed(self) -> int:
        if self.config.use_random_seed:
            return self._seed_source.randrange(RANDOM_SEED_RANGE)
        return self.config.seed

    def _next_seed(self) -> int:
        if self.config.use_random_seed:
            return self._seed_source.randrange(RANDOM_SEED_RANGE)
        return self.seed + 1

    def _clear_generation_data(self) -> None:
        if self.grid is not None:
            self.grid.reset()
        self.rooms = []
        self.corridors = []
        self.spanning_corridors = 0
        self.start_room = None

    def _clear_session(self) -> None:
        self._clear_generation_data()
        self.grid = None
        self.attempts = 0
        self.last_failure = None


def generate(config: DungeonConfig | None = None) -> DungeonLayout:
    gen = LevelGenerator(config)
    layout = gen.generate_level()
    if layout is None:
        raise gen.last_failure
    return layout


__all__ = ["LevelGenerator", "generate", "IDLE", "ATTEMPTING", "SUCCEEDED", "FAILED"]
