"""Generation configuration.

``DungeonConfig`` carries every knob the pipeline reads. Values can come from
keyword arguments, a named preset, a JSON-style mapping (API / CLI payloads, which
may use either snake_case or the camelCase option names) or ``DUNGEON_*``
environment variables.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Tuple

from .errors import ConfigError

Size2D = Tuple[int, int]


@dataclass
class DungeonConfig:
    level_width: int = 50
    level_height: int = 50
    min_rooms: int = 8
    max_rooms: int = 15
    min_room_size: Size2D = (4, 4)
    max_room_size: Size2D = (10, 10)
    max_placement_attempts: int = 100
    max_generation_attempts: int = 10
    use_organic_generation: bool = True
    noise_threshold: float = 0.5
    noise_scale: float = 0.1
    random_walk_steps: int = 1000
    random_walk_turn_chance: float = 0.3
    organic_blend_iterations: int = 3
    seed: int = 0
    use_random_seed: bool = True
    extra_connection_chance: float = 0.2
    # False keeps the historical walker that re-rolls its heading on every step
    walk_keep_direction: bool = False
    enable_metrics: bool = True

    def __post_init__(self):
        self.min_room_size = _coerce_size(self.min_room_size, "min_room_size")
        self.max_room_size = _coerce_size(self.max_room_size, "max_room_size")

    def validate(self) -> "DungeonConfig":
        if self.level_width <= 0 or self.level_height <= 0:
            raise ConfigError("level dimensions must be positive")
        if self.min_rooms <= 0:
            raise ConfigError("min_rooms must be positive")
        if self.min_rooms > self.max_rooms:
            raise ConfigError("min_rooms must not exceed max_rooms")
        for axis in (0, 1):
            lo, hi = self.min_room_size[axis], self.max_room_size[axis]
            if lo <= 0 or hi <= 0:
                raise ConfigError("room sizes must be positive")
            if lo > hi:
                raise ConfigError("min_room_size must not exceed max_room_size")
        if self.max_placement_attempts <= 0 or self.max_generation_attempts <= 0:
            raise ConfigError("attempt budgets must be positive")
        for name in ("noise_threshold", "random_walk_turn_chance", "extra_connection_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1]")
        if self.noise_scale <= 0:
            raise ConfigError("noise_scale must be positive")
        if self.random_walk_steps < 0 or self.organic_blend_iterations < 0:
            raise ConfigError("walk steps and blend iterations must not be negative")
        return self

    def copy(self, **changes) -> "DungeonConfig":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["min_room_size"] = list(self.min_room_size)
        data["max_room_size"] = list(self.max_room_size)
        return data

    @classmethod
    def preset(cls, name: str, **overrides) -> "DungeonConfig":
        return cls(**{**_preset_values(name), **overrides})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: "DungeonConfig | None" = None) -> "DungeonConfig":
        """Build a config from a loosely-typed mapping (JSON body, CLI options).

        Keys may be snake_case field names or the camelCase option names
        (``levelWidth``, ``useOrganicGeneration`` ...). A ``preset`` key
        applies that preset's size and room-count values on top of ``base``; every
        other key overrides both.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        preset_name = None
        for key, raw in data.items():
            if key == "preset":
                preset_name = raw
                continue
            name = CAMEL_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"unknown option {key!r}")
            values[name] = _coerce_value(name, raw)
        start = base if base is not None else cls()
        if preset_name:
            values = {**_preset_values(str(preset_name)), **values}
        return replace(start, **values)

    @classmethod
    def from_env(cls, prefix: str = "DUNGEON_", environ: Mapping[str, str] | None = None) -> "DungeonConfig":
        env = os.environ if environ is None else environ
        env_map = {
            "WIDTH": "level_width",
            "HEIGHT": "level_height",
            "SEED": "seed",
            "ORGANIC": "use_organic_generation",
            "ENABLE_GENERATION_METRICS": "enable_metrics",
        }
        values: Dict[str, Any] = {}
        for suffix, name in env_map.items():
            key = prefix + suffix
            if key in env:
                values[name] = _coerce_value(name, env[key])
        if "seed" in values:
            values["use_random_seed"] = False
        return cls(**values)


PRESETS: Dict[str, Dict[str, Any]] = {
    "small": {"level_width": 30, "level_height": 30, "min_rooms": 5, "max_rooms": 8},
    "medium": {"level_width": 50, "level_height": 50, "min_rooms": 8, "max_rooms": 12},
    "large": {"level_width": 80, "level_height": 80, "min_rooms": 12, "max_rooms": 20},
}

CAMEL_ALIASES = {
    "levelWidth": "level_width",
    "levelHeight": "level_height",
    "minRooms": "min_rooms",
    "maxRooms": "max_rooms",
    "minRoomSize": "min_room_size",
    "maxRoomSize": "max_room_size",
    "maxPlacementAttempts": "max_placement_attempts",
    "maxGenerationAttempts": "max_generation_attempts",
    "useOrganicGeneration": "use_organic_generation",
    "noiseThreshold": "noise_threshold",
    "noiseScale": "noise_scale",
    "randomWalkSteps": "random_walk_steps",
    "randomWalkTurnChance": "random_walk_turn_chance",
    "organicBlendIterations": "organic_blend_iterations",
    "useRandomSeed": "use_random_seed",
    "extraConnectionChance": "extra_connection_chance",
    "walkKeepDirection": "walk_keep_direction",
    "enableMetrics": "enable_metrics",
}

_BOOL_FIELDS = {"use_organic_generation", "use_random_seed", "walk_keep_direction", "enable_metrics"}
_FLOAT_FIELDS = {"noise_threshold", "noise_scale", "random_walk_turn_chance", "extra_connection_chance"}
_SIZE_FIELDS = {"min_room_size", "max_room_size"}
def _preset_values(name: str) -> Dict[str, Any]:
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise ConfigError(f"unknown preset {name!r}") from None


_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _coerce_size(value, name: str) -> Size2D:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an int or a [w, h] pair")
    if isinstance(value, int):
        return (value, value)
    try:
        w, h = value
        return (int(w), int(h))
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an int or a [w, h] pair") from None


def _coerce_value(name: str, raw: Any) -> Any:
    try:
        if name in _BOOL_FIELDS:
            if isinstance(raw, str):
                s = raw.strip().lower()
                if s in _TRUTHY:
                    return True
                if s in _FALSY:
                    return False
                raise ConfigError(f"{name} expects a boolean, got {raw!r}")
            return bool(raw)
        if name in _SIZE_FIELDS:
            if isinstance(raw, str):
                raw = [int(p) for p in raw.replace("x", ",").split(",")]
                if len(raw) == 1:
                    raw = raw[0]
            return _coerce_size(raw, name)
        if isinstance(raw, bool):
            raise ConfigError(f"{name} expects a number, got {raw!r}")
        if name in _FLOAT_FIELDS:
            return float(raw)
        return int(raw)
    except (TypeError, ValueError) as exc:
        if isinstance(exc, ConfigError):
            raise
        raise ConfigError(f"invalid value for {name}: {raw!r}") from None


__all__ = ["DungeonConfig", "PRESETS", "CAMEL_ALIASES"]
