from __future__ import annotations

from enum import Enum
from typing import Optional


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @classmethod
    def parse(cls, raw: str | None) -> Optional["Priority"]:
        """Return the matching member, or ``None`` for values outside the domain."""
        if raw is None:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None
