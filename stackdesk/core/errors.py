"""Shared error types.

Every failure of a dispatcher action is one of these, so the console can tell the
operator which kind of problem happened without guessing from a message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stackdesk.domain.models import ResponsePayload


@dataclass(eq=False)
class AppError(Exception):
    """Base error for application-level failures."""

    message: str
    cause: Exception | None = None

    kind = "unexpected"

    def __str__(self) -> str:  # pragma: no cover
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "error": self.message}


class ValidationError(AppError):
    """Invalid operator input, caught before any network call."""

    kind = "validation"


class TransportError(AppError):
    """The call never produced an HTTP response (connection, DNS, TLS)."""

    kind = "transport"


class UnknownActionError(AppError):
    """No handler registered for the requested action id."""


class ResponseError(AppError):
    """An HTTP response arrived with a non-2xx status."""

    kind = "response"

    def __init__(self, payload: ResponsePayload) -> None:
        super().__init__(f"HTTP {payload.status} from {payload.method} {payload.url}")
        self.payload = payload

    def to_dict(self) -> dict[str, Any]:
        return self.payload.to_dict()
