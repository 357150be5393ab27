from __future__ import annotations

import logging
import threading
from typing import Iterator, Optional

from todo_backend.domain.entities import Category
from todo_backend.domain.errors import StoreError

from ..categories import CategoriesRepo

logger = logging.getLogger(__name__)


class CategoryStorage(CategoriesRepo):
    """In-memory implementation of :class:`CategoriesRepo`.

    - Categories are kept in a dict keyed by id; dict order is the insertion order.
    - Replacing a category keeps its position, deleting removes it.
    - All methods hold one re-entrant lock, so a single instance can be shared
      between threads (e.g. request handlers of a threaded HTTP server).
    """

    def __init__(self, max_items: int | None = None) -> None:
        self._items: dict[int, Category] = {}
        self._max_items = max_items
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Category]:
        with self._lock:
            snapshot = list(self._items.values())
        return iter(snapshot)

    def __contains__(self, category_id: object) -> bool:
        with self._lock:
            return category_id in self._items

    def __getitem__(self, index: int) -> Category:
        with self._lock:
            return list(self._items.values())[index]

    def add_category(self, category: Category) -> Optional[StoreError]:
        with self._lock:
            error = _validate(category)
            if error is None and category.id in self._items:
                error = StoreError.duplicate("Category", category.id)
            if (
                error is None
                and self._max_items is not None
                and len(self._items) >= self._max_items
            ):
                error = StoreError.full("Category", self._max_items)
            if error is not None:
                logger.debug("Category rejected id=%s kind=%s", category.id, error.kind.value)
                return error
            self._items[category.id] = category
            logger.debug("Category added id=%s total=%s", category.id, len(self._items))
            return None

    def get_category(self, category_id: int) -> Optional[Category]:
        with self._lock:
            return self._items.get(category_id)

    def find_by_name(self, name: str) -> Optional[Category]:
        with self._lock:
            for category in self._items.values():
                if category.name == name:
                    return category
        return None

    def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Category]:
        with self._lock:
            start = max(0, offset)
            return list(self._items.values())[start : start + max(0, limit)]

    def replace_category(self, category: Category) -> Optional[StoreError]:
        with self._lock:
            if category.id not in self._items:
                return StoreError.not_found("Category", category.id)
            error = _validate(category)
            if error is not None:
                return error
            self._items[category.id] = category
            logger.debug("Category replaced id=%s", category.id)
            return None

    def delete_category(self, category_id: int) -> Optional[StoreError]:
        with self._lock:
            if self._items.pop(category_id, None) is None:
                return StoreError.not_found("Category", category_id)
            logger.debug("Category deleted id=%s", category_id)
            return None


def _validate(category: Category) -> Optional[StoreError]:
    if not category.name.strip():
        return StoreError.invalid("Category name must not be empty", category.id)
    return None


def new_category_storage(max_items: int | None = None) -> CategoryStorage:
    """Return an empty category store."""
    return CategoryStorage(max_items=max_items)
