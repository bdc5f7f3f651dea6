"""Error classes and helpers for date-tasks.

Every failure carries a stable ``code`` and a human ``message`` with
optional ``details``, and can be converted to a serializable payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass
class AppError(Exception):
    """Base application error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class BadRequestError(AppError):
    """Raised when arguments are well-typed but not acceptable."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("BAD_REQUEST", message, details)


class ParseError(AppError, ValueError):
    """Raised when a date string does not match the expected grammar."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("PARSE_ERROR", message, details)


class NegativeTimeSpanError(BadRequestError):
    """Raised when a time span ends before it starts."""


def to_error_payload(error: Exception) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Examples:
        >>> try:
        ...     raise ParseError("Not a date", {"value": "abc"})
        ... except Exception as e:
        ...     payload = to_error_payload(e)
        ...     assert payload["code"] == "PARSE_ERROR"
    """

    if isinstance(error, AppError):
        return error.to_payload()
    return {"code": "INTERNAL", "message": str(error)}
