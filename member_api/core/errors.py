"""Error Hierarchy — typed, categorized exceptions for member lookup failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() exposes only public_message; internal detail stays in `message`

Design Decisions:
    - Single hierarchy with MemberApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    STORAGE = "storage"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never for responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    member_id: str | None = None
    operation: str | None = None


class MemberApiError(Exception):
    """Base exception for all member API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = public_message or message

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"message": self.public_message}

    def to_log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "member_id": self.context.member_id,
            "operation": self.context.operation,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidMemberIdError(MemberApiError):
    """Member identifier is blank or malformed."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            reason, "INVALID_MEMBER_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MemberNotFoundError(MemberApiError):
    """No record exists for the requested member identifier."""
    def __init__(self, member_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.member_id = member_id
        super().__init__(
            f"Member '{member_id}' not found",
            "MEMBER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
            public_message="Member not found",
        )


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(MemberApiError):
    """Storage collaborator failed: connectivity, timeout or malformed data."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
            public_message="Server error",
        )
        self.operation = operation
