from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable, List, Sequence, TypeVar

from todo_backend.application.services.todo_service import TodoService
from todo_backend.domain.entities import Category, Task
from todo_backend.domain.errors import StoreError, StoreOperationError
from todo_backend.domain.value_objects.enums import Priority
from todo_backend.logging_config import get_logger

T = TypeVar("T")

SAMPLE_CATEGORIES = ("Learn Go", "Reading")
SAMPLE_TASKS = (
    ("Learn Go", "Study Go programming", Priority.HIGH, "Learn Go"),
    ("Read a book", "Read 'The Go Programming Language'", Priority.MEDIUM, None),
    ("Write tests", "Cover the storage layer", Priority.LOW, "Learn Go"),
)


def _ok(result: T | StoreError) -> T:
    if isinstance(result, StoreError):
        raise result.to_exception()
    return result


def seed(service: TodoService) -> None:
    """Fill ``service`` with the sample categories and tasks."""
    by_name: dict[str, int] = {}
    for name in SAMPLE_CATEGORIES:
        by_name[name] = _ok(service.create_category(name)).id
    for title, description, priority, category in SAMPLE_TASKS:
        category_id = by_name[category] if category is not None else None
        _ok(service.create_task(title, description, priority, category_id))


def _format_rows(categories: Iterable[Category], tasks: Iterable[Task]) -> str:
    names = {c.id: c.name for c in categories}
    out_lines: List[str] = []
    for t in tasks:
        mark = "x" if t.is_complete else " "
        category = names.get(t.category_id, "-") if t.category_id is not None else "-"
        out_lines.append(f"[{mark}] {t.title} ({t.priority}, {category}) [id={t.id}]")
    return "\n".join(out_lines)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Inspect the in-memory todo store")
    sub = p.add_subparsers(dest="command", required=True)
    demo = sub.add_parser("demo", help="Seed sample data and print it")
    demo.add_argument("--json", action="store_true", help="Print tasks and categories as JSON")
    demo.add_argument(
        "--toggle",
        type=int,
        action="append",
        default=[],
        metavar="TASK_ID",
        help="Flip completion of a task after seeding (repeatable)",
    )
    demo.add_argument(
        "--open-only", action="store_true", help="Only list tasks that are not complete"
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger()

    service = TodoService()
    try:
        seed(service)
        for task_id in args.toggle:
            _ok(service.toggle_task(task_id))
    except StoreOperationError as exc:
        logger.error("Demo failed", extra={"operation": "demo", "kind": exc.kind.value})
        print(f"error: {exc}", file=sys.stderr)
        return 1

    tasks = service.open_tasks() if args.open_only else service.list_tasks()
    categories = service.list_categories()
    if args.json:
        payload = {
            "categories": [c.to_payload() for c in categories],
            "tasks": [t.to_payload() for t in tasks],
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif not tasks:
        print("No tasks.")
    else:
        print(_format_rows(categories, tasks))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
