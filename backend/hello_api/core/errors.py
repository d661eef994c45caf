"""Error Hierarchy — typed, categorized exceptions for request failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All errors are request-scoped 4xx failures; nothing here crashes the process
    - to_response() produces the flat {"error": message} envelope clients rely on

Design Decisions:
    - Single hierarchy with HelloApiError base: one global handler catches all
    - ErrorContext as dataclass: request details for logs without leaking them to clients
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for log routing."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request details attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    method: str | None = None


class HelloApiError(Exception):
    """Base exception for all Hello API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the client-facing error body."""
        return {"error": self.message}


# ─── Validation Errors (400) ────────────────────────────────────

class MissingNameError(HelloApiError):
    """Greeting path carried no name segment."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "name is missing", "NAME_MISSING", ErrorCategory.VALIDATION,
            context=context,
        )


class InvalidJSONError(HelloApiError):
    """Request body could not be decoded into a user record."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid JSON format", "INVALID_JSON", ErrorCategory.VALIDATION,
            context=context,
        )


class MissingUserFieldsError(HelloApiError):
    """User record decoded but name or email is empty."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Name and Email are required", "USER_FIELDS_REQUIRED",
            ErrorCategory.VALIDATION, context=context,
        )
        self.missing = missing
