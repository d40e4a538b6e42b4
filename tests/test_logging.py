import json
import logging

from dungeonweave.logging_utils import get_logger
from dungeonweave.server import configure_logging


def test_key_value_format(capsys, monkeypatch):
    monkeypatch.delenv("DUNGEONWEAVE_LOG_JSON", raising=False)
    monkeypatch.delenv("DUNGEONWEAVE_LOG_LEVEL", raising=False)
    get_logger("tests.kv").info(event="dungeon_generated", rooms=4, note="two words")
    out = capsys.readouterr().out.strip()
    assert out.startswith("level=info ts=")
    assert "event=dungeon_generated" in out
    assert "rooms=4" in out
    assert "note=two_words" in out
    assert "logger=tests.kv" in out


def test_json_mode(capsys, monkeypatch):
    monkeypatch.setenv("DUNGEONWEAVE_LOG_JSON", "1")
    get_logger("tests.json").warn(event="generation_exhausted", attempts=10, seed=None)
    rec = json.loads(capsys.readouterr().out.strip())
    assert rec["level"] == "warn"
    assert rec["attempts"] == 10
    assert "seed" not in rec


def test_level_filter_and_stderr(capsys, monkeypatch):
    monkeypatch.delenv("DUNGEONWEAVE_LOG_JSON", raising=False)
    monkeypatch.setenv("DUNGEONWEAVE_LOG_LEVEL", "warn")
    log = get_logger("tests.level")
    log.info(event="hidden")
    log.error(event="shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=shown" in captured.err


def test_get_logger_cached():
    assert get_logger("tests.cache") is get_logger("tests.cache")


def test_generation_failure_logged(capsys, monkeypatch):
    from dungeonweave.dungeon import DungeonConfig, LevelGenerator

    monkeypatch.delenv("DUNGEONWEAVE_LOG_JSON", raising=False)
    monkeypatch.delenv("DUNGEONWEAVE_LOG_LEVEL", raising=False)
    cfg = DungeonConfig(level_width=10, level_height=10, min_rooms=50, max_rooms=50, max_generation_attempts=2, seed=4, use_random_seed=False)
    LevelGenerator(cfg).generate_level()
    out = capsys.readouterr().out
    assert out.count("event=generation_attempt_failed") == 2
    assert "event=generation_exhausted" in out


def test_configure_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        # Run twice to ensure handlers are replaced, not stacked
        configure_logging(str(tmp_path))
        path = configure_logging(str(tmp_path))
        assert len(root.handlers) == 2
        logging.getLogger("tests.file").info("hello from the dungeon")
        for h in root.handlers:
            h.flush()
        assert (tmp_path / "app.log").exists()
        assert "hello from the dungeon" in (tmp_path / "app.log").read_text()
        assert path == str(tmp_path / "app.log")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        root.setLevel(saved_level)
