# tests/conftest.py

import logging

import pytest
import structlog

from DiceRoller.metrics import reset_counters


@pytest.fixture(autouse=True)
def _clean_counters():
    reset_counters()
    yield
    reset_counters()


@pytest.fixture
def restore_logging():
    """Undo setup_logging() so later tests see default structlog/stdlib state."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    structlog.reset_defaults()


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    # Keep any config.toml / .env in the repo root from leaking into settings.
    monkeypatch.chdir(tmp_path)
    return tmp_path
