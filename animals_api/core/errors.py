"""Error Hierarchy — typed, categorized exceptions for every Animals API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the wire envelope {"error": message[, "details": ...]}
    - Messages are fixed strings; no internal details leak to clients

Design Decisions:
    - Single hierarchy with AnimalsApiError base: one FastAPI handler catches all
    - Flat envelope over nested error object: clients match on the "error" string
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class AnimalsApiError(Exception):
    """Base exception for all Animals API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidAnimalDataError(AnimalsApiError):
    """Submitted record matched no variant or broke a field rule."""
    def __init__(self, field_errors: dict[str, list[str]]):
        super().__init__(
            "Invalid animal data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, field_errors,
        )
        self.field_errors = field_errors


class AnimalNotFoundError(AnimalsApiError):
    """No record carries the requested name."""
    def __init__(self, name: str):
        super().__init__(
            "Animal not found", "ANIMAL_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, 404,
        )
        self.name = name
