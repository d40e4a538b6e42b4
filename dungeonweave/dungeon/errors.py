"""Exception hierarchy for dungeon generation.

Only two failures exist in the generation core: too few rooms on a single
attempt (recovered by the orchestrator) and an exhausted attempt budget
(reported to the caller). ConfigError covers rejected configuration input.
"""

from __future__ import annotations

from typing import Optional


class DungeonError(Exception):
    """Base class for all dungeon generation errors."""


class ConfigError(DungeonError, ValueError):
    """Raised when a DungeonConfig holds values generation cannot honour."""


class InsufficientRooms(DungeonError):
    def __init__(self, placed: int, required: int):
        self.placed = placed
        self.required = required
        super().__init__(f"placed {placed} rooms, need at least {required}")


class GenerationExhausted(DungeonError):
    def __init__(self, attempts: int, last_seed: Optional[int] = None):
        self.attempts = attempts
        self.last_seed = last_seed
        super().__init__(f"no valid layout after {attempts} attempts (last seed {last_seed})")

    def to_dict(self):
        return {"error": "generation_exhausted", "attempts": self.attempts, "seed": self.last_seed}


__all__ = ["DungeonError", "ConfigError", "InsufficientRooms", "GenerationExhausted"]
