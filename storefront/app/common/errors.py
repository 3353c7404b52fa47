from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ApiError(Exception):
    """Raise to return a consistent JSON error response."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details or {},
                "request_id": request_id,
            }
        }
        return payload


class ValidationError(ApiError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(400, "validation_error", message, details)


class ConflictError(ApiError):
    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(400, "conflict", message)


class NotFoundError(ApiError):
    def __init__(self, message: str = "Not found") -> None:
        super().__init__(404, "not_found", message)


class InvalidCredentialsError(ApiError):
    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(401, "invalid_credentials", message)


class AuthenticationRequired(ApiError):
    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(401, "unauthorized", message)


class StoreUnavailableError(ApiError):
    """The backing store could not be reached or timed out.

    The message is generic on purpose; the underlying cause travels as
    ``__cause__`` and is logged by the error handler.
    """

    def __init__(self, message: str = "Server error") -> None:
        super().__init__(500, "store_unavailable", message)
