"""Error values reported by the in-memory stores.

Store mutations never raise for domain problems; they return a
:class:`StoreError` describing what was rejected, or ``None`` on success.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    DUPLICATE_IDENTIFIER = "DUPLICATE_IDENTIFIER"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    NOT_FOUND = "NOT_FOUND"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"


class StoreOperationError(RuntimeError):
    """Raised by callers that choose to escalate a :class:`StoreError`."""

    def __init__(self, error: "StoreError") -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


class StoreError(BaseModel):
    kind: ErrorKind = Field(..., description="Category of the failure")
    message: str = Field(..., description="Human readable description")
    identifier: Optional[int] = Field(
        default=None, description="Identifier of the offending entity or reference"
    )

    model_config = ConfigDict(frozen=True)

    def to_exception(self) -> StoreOperationError:
        return StoreOperationError(self)

    @classmethod
    def duplicate(cls, entity: str, identifier: int) -> "StoreError":
        return cls(
            kind=ErrorKind.DUPLICATE_IDENTIFIER,
            message=f"{entity} with id={identifier} already exists",
            identifier=identifier,
        )

    @classmethod
    def not_found(cls, entity: str, identifier: int) -> "StoreError":
        return cls(
            kind=ErrorKind.NOT_FOUND,
            message=f"{entity} with id={identifier} not found",
            identifier=identifier,
        )

    @classmethod
    def invalid(cls, message: str, identifier: int | None = None) -> "StoreError":
        return cls(kind=ErrorKind.VALIDATION_FAILURE, message=message, identifier=identifier)

    @classmethod
    def invalid_reference(cls, message: str, identifier: int) -> "StoreError":
        return cls(kind=ErrorKind.INVALID_REFERENCE, message=message, identifier=identifier)

    @classmethod
    def full(cls, entity: str, max_items: int) -> "StoreError":
        return cls(
            kind=ErrorKind.CAPACITY_EXCEEDED,
            message=f"{entity} store is full (max_items={max_items})",
        )
