from __future__ import annotations

from typing import Any

import pytest


def test_players_server_runs_uvicorn(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    from todo_backend.cli import players_server

    monkeypatch.chdir(tmp_path)
    calls: list[dict[str, Any]] = []

    def fake_run(app: Any, **kwargs: Any) -> None:
        calls.append({"app": app, **kwargs})

    monkeypatch.setattr(players_server.uvicorn, "run", fake_run)
    code = players_server.main(["--port", "5123", "--host", "0.0.0.0"])
    assert code == 0
    assert len(calls) == 1
    assert calls[0]["port"] == 5123
    assert calls[0]["host"] == "0.0.0.0"
    routes = {getattr(r, "path", None) for r in calls[0]["app"].routes}
    assert "/players/{name}" in routes


def test_players_server_defaults_from_settings() -> None:
    from todo_backend.cli import players_server

    args = players_server.build_parser().parse_args([])
    assert args.port == players_server.settings.players_port
    assert args.host == players_server.settings.players_host
