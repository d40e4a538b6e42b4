"""
project: dungeonweave
module: config_api.py
License: MIT

Generation configuration endpoints: the default option set and the named
level presets (small / medium / large).
"""
from flask import Blueprint, current_app, jsonify

from dungeonweave.dungeon import PRESETS, DungeonConfig

bp_config = Blueprint('config', __name__)


@bp_config.route('/api/config/defaults')
def get_defaults():
    cfg = current_app.config.get('DUNGEON_DEFAULTS') or DungeonConfig()
    return jsonify(cfg.to_dict())


@bp_config.route('/api/config/presets')
def get_presets():
    return jsonify({name: DungeonConfig.preset(name).to_dict() for name in PRESETS})
