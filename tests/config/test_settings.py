from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest
from pydantic import ValidationError

ENV_VARS = ("TODO_MAX_TASKS", "TODO_MAX_CATEGORIES", "PLAYERS_HOST", "PLAYERS_PORT", "TODO_LOG_FILE")


def _reload_settings() -> Any:
    # Remove cached module to force re-evaluation of settings on import
    if "todo_backend.config.settings" in sys.modules:
        del sys.modules["todo_backend.config.settings"]
    import todo_backend.config.settings as settings_module

    importlib.reload(settings_module)
    return settings_module


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Prevent picking up values from a real .env during the test
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: None, raising=False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Leave a fully imported module behind for tests that patch it later
    _reload_settings()


def test_defaults() -> None:
    module = _reload_settings()
    s = module.settings
    assert s.max_tasks == module.DEFAULT_MAX_TASKS
    assert s.max_categories == module.DEFAULT_MAX_CATEGORIES
    assert s.players_host == "127.0.0.1"
    assert s.players_port == 5000
    assert s.log_file == Path("logs/app.log")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_MAX_TASKS", "5")
    monkeypatch.setenv("TODO_MAX_CATEGORIES", "2")
    monkeypatch.setenv("PLAYERS_HOST", "0.0.0.0")
    monkeypatch.setenv("PLAYERS_PORT", "8080")
    monkeypatch.setenv("TODO_LOG_FILE", "/tmp/todo.log")
    s = _reload_settings().settings
    assert (s.max_tasks, s.max_categories) == (5, 2)
    assert (s.players_host, s.players_port) == ("0.0.0.0", 8080)
    assert s.log_file == Path("/tmp/todo.log")


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_MAX_TASKS", "  ")
    module = _reload_settings()
    assert module.settings.max_tasks == module.DEFAULT_MAX_TASKS


def test_non_integer_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLAYERS_PORT", "http")
    with pytest.raises(RuntimeError, match="PLAYERS_PORT must be an integer"):
        _reload_settings()


def test_below_minimum_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    module = _reload_settings()
    monkeypatch.setenv("TODO_MAX_TASKS", "0")
    with pytest.raises(RuntimeError, match="TODO_MAX_TASKS must be >= 1"):
        module._build_settings()


def test_settings_are_frozen() -> None:
    s = _reload_settings().settings
    with pytest.raises(ValidationError):
        s.max_tasks = 3
