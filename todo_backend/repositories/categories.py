from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from todo_backend.domain.entities import Category
from todo_backend.domain.errors import StoreError


class CategoriesRepo(ABC):
    """Repository interface for categories."""

    @abstractmethod
    def add_category(self, category: Category) -> Optional[StoreError]:
        """Append a new category; return the rejection reason, if any."""

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Retrieve a category by identifier."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Category]:
        """Return the first category (in insertion order) with this exact name."""

    @abstractmethod
    def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Category]:
        """List categories in insertion order with pagination."""

    @abstractmethod
    def replace_category(self, category: Category) -> Optional[StoreError]:
        """Swap the stored category with the same identifier."""

    @abstractmethod
    def delete_category(self, category_id: int) -> Optional[StoreError]:
        """Remove a category by identifier."""

    @abstractmethod
    def __contains__(self, category_id: object) -> bool:
        """Return True when a category with this identifier is stored."""
