"""
project: dungeonweave
module: __init__.py
License: MIT

Flask application factory.

The generation core lives in ``dungeonweave.dungeon`` and has no web
dependencies; this module only wires the HTTP blueprints that expose it.
Configuration is sourced from environment variables (optionally loaded from a
``.env`` file) with reasonable defaults for development.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from dungeonweave.dungeon import ConfigError, DungeonConfig


def create_app(test_config=None):
    """Build and return a configured Flask app.

    ``test_config`` (a mapping) is applied last so tests can override anything.
    """
    # Load .env if present so SECRET_KEY / DUNGEON_* can be supplied without exporting
    load_dotenv()

    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # read-only installs still serve the API; file logging just stays off
        pass

    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        DUNGEON_ENABLE_GENERATION_METRICS=os.getenv("DUNGEON_ENABLE_GENERATION_METRICS", "1") == "1",
        DUNGEON_DISABLE_CACHE=os.getenv("DUNGEON_DISABLE_CACHE", "0") == "1",
    )
    try:
        app.config["DUNGEON_DEFAULTS"] = DungeonConfig.from_env()
    except ConfigError as exc:
        logging.getLogger(__name__).warning("Ignoring invalid DUNGEON_* environment: %s", exc)
        app.config["DUNGEON_DEFAULTS"] = DungeonConfig()
    if test_config:
        app.config.update(test_config)

    from dungeonweave.routes.config_api import bp_config
    from dungeonweave.routes.dungeon_api import bp_dungeon
    from dungeonweave.routes.seed_api import bp_seed

    app.register_blueprint(bp_dungeon)
    app.register_blueprint(bp_seed)
    app.register_blueprint(bp_config)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal", "error_id": error_id}), 500

    return app
