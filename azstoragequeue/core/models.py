"""Pydantic models - Single source of truth for data structures.

Every facade operation returns a QueueResult so callers can tell
"empty" apart from "not found" apart from "transport failure".
"""

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class QueueErrorKind(str, Enum):
    """Category of a failed remote call."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    SERVICE = "service"
    TRANSPORT = "transport"
    INVALID_ARGUMENT = "invalid_argument"


class QueueError(BaseModel):
    """Failure detail of a remote queue call."""

    kind: QueueErrorKind
    code: str = Field(..., description="Provider error code, HTTP status or exception name")
    message: str = Field(default="", description="Human-readable error message")
    status_code: int | None = Field(default=None, description="HTTP status, None when no response arrived")

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class QueueMessage(BaseModel):
    """A message read from, or written to, a storage queue."""

    message_id: str
    content: str | None = None
    pop_receipt: str | None = Field(default=None, description="Lease token, None for peeked messages")
    dequeue_count: int | None = None
    inserted_on: datetime | None = None
    expires_on: datetime | None = None
    next_visible_on: datetime | None = None

    @classmethod
    def from_azure(cls, message: Any) -> "QueueMessage":
        """Build from an azure.storage.queue.QueueMessage."""
        return cls(
            message_id=message.id,
            content=message.content,
            pop_receipt=getattr(message, "pop_receipt", None),
            dequeue_count=getattr(message, "dequeue_count", None),
            inserted_on=getattr(message, "inserted_on", None),
            expires_on=getattr(message, "expires_on", None),
            next_visible_on=getattr(message, "next_visible_on", None),
        )


class QueueResult(BaseModel, Generic[T]):
    """Outcome of a facade operation: {ok, value, error}."""

    ok: bool
    value: T | None = None
    error: QueueError | None = None

    @classmethod
    def success(cls, value: Any = None) -> "QueueResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: QueueError) -> "QueueResult":
        return cls(ok=False, error=error)

    @property
    def empty(self) -> bool:
        """True when the call succeeded but there was nothing to return."""
        return self.ok and (self.value is None or self.value == [])


class QueueStatus(BaseModel):
    """Advisory snapshot of one queue's length."""

    queue_name: str
    approximate_message_count: int | None = Field(
        default=None, description="Service estimate, eventually consistent - never exact"
    )
    error: QueueError | None = None
