import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from dungeonweave import create_app  # noqa: E402
from dungeonweave.routes.dungeon_api import clear_layout_cache  # noqa: E402
from dungeon_test_utils import compact_config  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test",
            "DUNGEON_DEFAULTS": compact_config(),
        }
    )
    return app


@pytest.fixture(autouse=True)
def _push_app_context(test_app):
    ctx = test_app.app_context()
    ctx.push()
    try:
        yield
    finally:
        ctx.pop()


@pytest.fixture(autouse=True)
def _fresh_layout_cache():
    clear_layout_cache()
    yield
    clear_layout_cache()


@pytest.fixture()
def client(test_app):
    return test_app.test_client()
