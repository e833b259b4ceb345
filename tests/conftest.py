"""Shared fixtures for rawini tests."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep user-level config out of tests and run from a scratch directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return home


@pytest.fixture
def ini_file(tmp_path):
    """Factory: write an INI file under tmp_path and return its path."""
    def _write(content, name="config.ini"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def log_messages():
    """Capture rawini's loguru output as a list of message strings."""
    messages = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    logger.enable("rawini")
    try:
        yield messages
    finally:
        logger.disable("rawini")
        logger.remove(sink_id)
