"""
project: dungeonweave
module: server.py
License: MIT

Server bootstrap helpers.

Exposes ``start_server`` for the CLI and ``configure_logging`` which routes the
stdlib logging tree (Flask / werkzeug) to the console and a rotating file in the
app's instance directory.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from dungeonweave import create_app


def configure_logging(log_dir: str, level: int = logging.INFO) -> str:
    """Configure logging to both console and a rotating file in ``log_dir``.

    Returns the log file path (``<log_dir>/app.log``). Safe to call repeatedly:
    previously installed root handlers are replaced, not duplicated.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "app.log")

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Start the development server with logging configured."""
    app = create_app()
    configure_logging(app.instance_path)
    try:
        print(f"[INFO] Starting dungeon API on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)
