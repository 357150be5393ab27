"""Application settings for the todo stores and the players score server.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a Pydantic settings object.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_MAX_TASKS = 10_000
DEFAULT_MAX_CATEGORIES = 1_000
DEFAULT_PLAYERS_HOST = "127.0.0.1"
DEFAULT_PLAYERS_PORT = 5000
DEFAULT_LOG_FILE = Path("logs/app.log")


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    max_tasks: int = DEFAULT_MAX_TASKS
    max_categories: int = DEFAULT_MAX_CATEGORIES
    players_host: str = DEFAULT_PLAYERS_HOST
    players_port: int = DEFAULT_PLAYERS_PORT
    log_file: Path = DEFAULT_LOG_FILE

    model_config = ConfigDict(frozen=True)


def _env_int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise RuntimeError(f"{name} must be >= {minimum}, got {value}")
    return value


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    log_file = os.getenv("TODO_LOG_FILE")
    return Settings(
        max_tasks=_env_int("TODO_MAX_TASKS", DEFAULT_MAX_TASKS, minimum=1),
        max_categories=_env_int("TODO_MAX_CATEGORIES", DEFAULT_MAX_CATEGORIES, minimum=1),
        players_host=os.getenv("PLAYERS_HOST", DEFAULT_PLAYERS_HOST),
        players_port=_env_int("PLAYERS_PORT", DEFAULT_PLAYERS_PORT, minimum=1),
        log_file=Path(log_file) if log_file else DEFAULT_LOG_FILE,
    )


# Public settings instance
settings = _build_settings()
