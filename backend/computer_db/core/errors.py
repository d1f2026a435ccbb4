"""Error Hierarchy — typed, categorized exceptions for all Computer Database failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal store details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ComputerDbError base: FastAPI global handler catches all
    - "Not found" is NOT an exception in the core — lookups return None.
      ResourceNotFoundError exists only for the web layer to shape a 404
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Violation:
    """A violated precondition: which field, and what was expected of it."""
    field: str
    message: str


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_id: int | None = None
    operation: str | None = None


class ComputerDbError(Exception):
    """Base exception for all Computer Database errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(ComputerDbError):
    """A caller-supplied value violates a precondition."""
    def __init__(self, violation: Violation, context: ErrorContext | None = None):
        super().__init__(
            violation.message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violation = violation

    @property
    def field(self) -> str:
        return self.violation.field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.violation.field
        return response


class ResourceNotFoundError(ComputerDbError):
    """Requested resource does not exist (web layer only)."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class AccessError(ComputerDbError):
    """The underlying store failed. Message is generic; details go to the log."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            "Data access failed. Please try again later.",
            "ACCESS_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
