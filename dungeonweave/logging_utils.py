"""Structured event logging for dungeon generation.

Every record is one line on stdout (stderr for errors): either ``key=value``
pairs or, with JSON mode on, a compact JSON object. The generator emits:

    generation_attempt_failed  warn   attempt, seed, placed, required
    dungeon_generated          info   rooms, corridors, seed, attempts
    generation_exhausted       warn   attempts, seed
    api_generation_exhausted   warn   attempts, seed (HTTP 422 responses)
    startup                    info   mode, host, port (``run.py server``)

Environment, read on every call so tests can flip it with monkeypatch:
    DUNGEONWEAVE_LOG_LEVEL  debug|info|warn|error (default info)
    DUNGEONWEAVE_LOG_JSON   1/true/yes/on for JSON lines

Fields whose value is None are dropped. ``level`` and ``ts`` are reserved.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_JSON_ON = ("1", "true", "yes", "on")


def _threshold() -> int:
    return LEVELS.get(os.getenv("DUNGEONWEAVE_LOG_LEVEL", "info").lower(), LEVELS["info"])


def _as_json() -> bool:
    return os.getenv("DUNGEONWEAVE_LOG_JSON", "0").lower() in _JSON_ON


def _kv_value(value: Any) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def render(level: str, fields: Dict[str, Any]) -> str:
    present = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if _as_json():
        return json.dumps({**present, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    head = [f"level={level}", f"ts={ts}"]
    return " ".join(head + [f"{k}={_kv_value(v)}" for k, v in present.items()])


class EventLogger:
    def __init__(self, name: str):
        self.name = name

    def _emit(self, level: str, fields: Dict[str, Any]) -> None:
        if LEVELS[level] < _threshold():
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(render(level, fields), file=stream)

    def debug(self, **fields):
        self._emit("debug", fields)

    def info(self, **fields):
        self._emit("info", fields)

    def warn(self, **fields):
        self._emit("warn", fields)

    def error(self, **fields):
        self._emit("error", fields)


_loggers: Dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    return _loggers.setdefault(name, EventLogger(name))


log = get_logger("dungeonweave")
