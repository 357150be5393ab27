from __future__ import annotations

import json

import pytest

from todo_backend.application.services.todo_service import TodoService
from todo_backend.cli import todos
from todo_backend.domain.errors import ErrorKind, StoreOperationError


@pytest.fixture(autouse=True)
def _isolated_logs(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)


def test_demo_lists_seeded_tasks(capsys: pytest.CaptureFixture[str]) -> None:
    code = todos.main(["demo"])
    out = capsys.readouterr().out
    assert code == 0
    lines = out.strip().splitlines()
    assert lines[0] == "[ ] Learn Go (HIGH, Learn Go) [id=1]"
    assert lines[1] == "[ ] Read a book (MEDIUM, -) [id=2]"
    assert len(lines) == 3


def test_demo_toggle_and_open_only(capsys: pytest.CaptureFixture[str]) -> None:
    code = todos.main(["demo", "--toggle", "1", "--open-only"])
    out = capsys.readouterr().out
    assert code == 0
    assert "[id=1]" not in out
    assert "[id=2]" in out


def test_demo_json(capsys: pytest.CaptureFixture[str]) -> None:
    code = todos.main(["demo", "--json", "--toggle", "3"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert [c["name"] for c in payload["categories"]] == ["Learn Go", "Reading"]
    third = payload["tasks"][2]
    assert third["is_complete"] is True
    assert third["category_id"] == 1
    assert third["created_at"].endswith("Z")


def test_demo_unknown_toggle_fails(capsys: pytest.CaptureFixture[str]) -> None:
    code = todos.main(["demo", "--toggle", "42"])
    err = capsys.readouterr().err
    assert code == 1
    assert "Task with id=42 not found" in err


def test_seed_raises_on_store_error() -> None:
    service = TodoService()
    todos.seed(service)
    assert len(service.list_tasks()) == 3
    service.categories.delete_category(2)
    with pytest.raises(StoreOperationError) as info:
        todos._ok(service.create_task("x", category_id=2))
    assert info.value.kind is ErrorKind.INVALID_REFERENCE


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        todos.build_parser().parse_args([])
