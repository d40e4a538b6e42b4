"""
project: dungeonweave
module: dungeon_api.py
License: MIT

Dungeon generation API routes.

Endpoints return the finished layout artifact as JSON: grid rows (one
character per cell), rooms, corridors and generation metrics. Failures are
ordinary responses: 400 for rejected configuration, 422 when the generator
exhausts its attempt budget.
"""

import threading
from dataclasses import astuple

from flask import Blueprint, current_app, jsonify, request, session

from dungeonweave.dungeon import ConfigError, DungeonConfig, GenerationExhausted, generate
from dungeonweave.logging_utils import get_logger

log = get_logger("dungeonweave.api")

# Simple in-process cache config->DungeonLayout for fixed-seed requests. Thread-safe with a
# lock because the dev server may serve requests from several threads.
_layout_cache = {}
_layout_cache_lock = threading.Lock()
_LAYOUT_CACHE_MAX = 8  # small LRU-ish manual cap


def get_cached_layout(config: DungeonConfig):
    if config.use_random_seed or current_app.config.get("DUNGEON_DISABLE_CACHE"):
        return generate(config)
    key = astuple(config)
    with _layout_cache_lock:
        layout = _layout_cache.get(key)
        if layout is not None:
            return layout
    layout = generate(config)
    with _layout_cache_lock:
        _layout_cache[key] = layout
        if len(_layout_cache) > _LAYOUT_CACHE_MAX:
            first_key = next(iter(_layout_cache.keys()))
            if first_key != key:
                _layout_cache.pop(first_key, None)
    return layout


def clear_layout_cache():
    with _layout_cache_lock:
        _layout_cache.clear()


def _defaults() -> DungeonConfig:
    base = current_app.config.get("DUNGEON_DEFAULTS") or DungeonConfig()
    return base.copy(enable_metrics=bool(current_app.config.get("DUNGEON_ENABLE_GENERATION_METRICS", True)))


def _session_config() -> DungeonConfig:
    """Config for the session's dungeon: defaults + optional ?preset= + session seed."""
    preset = request.args.get("preset")
    base = _defaults()
    cfg = DungeonConfig.from_mapping({"preset": preset}, base=base) if preset else base
    seed = session.get("dungeon_seed")
    if seed is None:
        seed = cfg.seed
    return cfg.copy(seed=int(seed), use_random_seed=False)


bp_dungeon = Blueprint("dungeon", __name__)


@bp_dungeon.errorhandler(ConfigError)
def _config_error(exc):
    return jsonify({"error": str(exc)}), 400


@bp_dungeon.errorhandler(GenerationExhausted)
def _exhausted(exc):
    log.warn(event="api_generation_exhausted", attempts=exc.attempts, seed=exc.last_seed)
    return jsonify(exc.to_dict()), 422


@bp_dungeon.route("/api/dungeon/generate", methods=["POST"])
def generate_dungeon():
    """
    Generate a layout from the JSON body.

    Body: any DungeonConfig option (snake_case or camelCase) plus optional "preset".
    Supplying "seed" without "use_random_seed" pins the seed.
    Query: ?paths=0 drops corridor paths from the response.
    Response: layout dict (seed, attempts, width, height, grid, rooms, corridors, metrics).
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ConfigError("request body must be a JSON object")
    options = dict(data)
    if "seed" in options and "use_random_seed" not in options and "useRandomSeed" not in options:
        options["use_random_seed"] = False
    cfg = DungeonConfig.from_mapping(options, base=_defaults()).validate()
    layout = get_cached_layout(cfg)
    include_paths = request.args.get("paths", "1") not in ("0", "false", "no")
    return jsonify(layout.to_dict(include_paths=include_paths))


@bp_dungeon.route("/api/dungeon/map")
def dungeon_map():
    """
    Return the layout for the session seed (see /api/dungeon/seed).
    Response: { 'seed', 'width', 'height', 'grid': [row strings], 'rooms', 'start_room' }
    """
    cfg = _session_config().validate()
    layout = get_cached_layout(cfg)
    start = layout.start_room
    return jsonify(
        {
            "seed": layout.seed,
            "width": layout.width,
            "height": layout.height,
            "grid": layout.grid.rows(),
            "rooms": [r.to_dict() for r in layout.rooms],
            "start_room": start.to_dict() if start else None,
        }
    )


@bp_dungeon.route("/api/dungeon/gen/metrics")
def generation_metrics():
    cfg = _session_config().copy(enable_metrics=True).validate()
    layout = get_cached_layout(cfg)
    return jsonify({"seed": layout.seed, "metrics": layout.metrics})
