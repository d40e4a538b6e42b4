"""Seed management API routes.

Provides a single endpoint to create/update the active dungeon seed for the
current session. The map and metrics endpoints read it back.
"""
from flask import Blueprint, request, jsonify, session
import hashlib, random

from dungeonweave.dungeon.pipeline import RANDOM_SEED_RANGE

bp_seed = Blueprint('seed_api', __name__)

MAX_SEED = 2**31 - 1


def coerce_seed(payload_seed):
    """Convert provided seed (int or str) into a bounded non-negative int."""
    if payload_seed is None or isinstance(payload_seed, bool):
        return random.randrange(RANDOM_SEED_RANGE)
    if isinstance(payload_seed, int):
        return payload_seed % MAX_SEED
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randrange(RANDOM_SEED_RANGE)
        if s.isdigit():
            return int(s) % MAX_SEED
        h = hashlib.sha256(s.encode('utf-8')).digest()
        return int.from_bytes(h[:8], 'big') % MAX_SEED
    return random.randrange(RANDOM_SEED_RANGE)


@bp_seed.route('/api/dungeon/seed', methods=['POST'])
def set_seed():
    """Set (or generate) the session dungeon seed.

    Body JSON (all optional):
      { "seed": <int|str|null>, "regenerate": <bool> }
    - If seed omitted or null and regenerate true => random seed.
    - If seed provided (int or string) => deterministic hashing.

    Response: { "seed": <int> }
    """
    data = request.get_json(silent=True) or {}
    regenerate = data.get('regenerate')
    provided = data.get('seed', None)
    if regenerate and provided is None:
        seed = coerce_seed(None)
    else:
        seed = coerce_seed(provided)
    session['dungeon_seed'] = seed
    return jsonify({"seed": seed})
