"""
Players score server.

Endpoints:
    GET /players/{name}   -> score as plain text (200), or "0" (404) for unknown players
    GET /players/         -> "0" (404), an empty name is an unknown player
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from todo_backend.application.services.player_scores import PlayerScores

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = "0"


def score_response(score: str) -> tuple[int, str]:
    """Map a looked-up score to ``(status_code, body)``.

    An empty or zero score means the player is unknown.
    """
    if score in ("", NOT_FOUND_BODY):
        return 404, NOT_FOUND_BODY
    return 200, score


def create_app(scores: Optional[PlayerScores] = None) -> FastAPI:
    lookup = scores or PlayerScores()
    app = FastAPI(title="Player Scores", version="1.0.0")

    @app.get("/players/", response_class=PlainTextResponse)
    async def get_player_score_without_name() -> PlainTextResponse:
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    @app.get("/players/{name}", response_class=PlainTextResponse)
    async def get_player_score(name: str) -> PlainTextResponse:
        status_code, body = score_response(lookup.get_player_score(name))
        logger.debug("GET /players/%s -> %s", name, status_code)
        return PlainTextResponse(body, status_code=status_code)

    return app
