import pytest

from todo_backend.domain.value_objects import CategoryId, Priority, TaskId


@pytest.mark.parametrize("raw", ["HIGH", "MEDIUM", "LOW"])
def test_priority_parse_known(raw: str) -> None:
    assert Priority.parse(raw) == Priority(raw)
    assert Priority.parse(raw).value == raw


@pytest.mark.parametrize("raw", [None, "", "high", "URGENT"])
def test_priority_parse_unknown(raw: str | None) -> None:
    assert Priority.parse(raw) is None


def test_priority_is_str_enum() -> None:
    assert Priority.HIGH == "HIGH"


def test_ids_are_ints() -> None:
    assert TaskId(5) == 5
    assert CategoryId(5) + 1 == 6
