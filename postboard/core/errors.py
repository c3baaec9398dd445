"""
Domain error taxonomy.

Services, validators and repositories raise only these exceptions. The server's
exception handlers translate them into HTTP responses using ``status_code`` and
``to_dict()``; anything that is not an ``AppError`` is treated as an internal error.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for errors that carry an HTTP status and a machine-readable code."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.details: Dict[str, Any] = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to the ``error`` member of a response envelope."""
        result: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(AppError):
    """Raised when a payload fails business validation (HTTP 400)."""

    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Validation failed", *, fields: Optional[Dict[str, str]] = None) -> None:
        self.fields: Dict[str, str] = dict(fields or {})
        super().__init__(message, details={"fields": self.fields} if self.fields else None)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(f"Invalid value for '{field}': {message}", fields={field: message})


class NotFoundError(AppError):
    """Raised when a requested resource does not exist (HTTP 404)."""

    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} not found",
            details={"resource": resource.lower(), "id": identifier},
        )


class ConflictError(AppError):
    """Raised when a write would violate a uniqueness rule (HTTP 409)."""

    status_code = 409
    code = "CONFLICT"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, details=details or None)
