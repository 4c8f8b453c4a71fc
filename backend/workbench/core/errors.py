"""Error Hierarchy — typed, categorized exceptions for all Workbench failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are surfaced as-is; invariant and store errors are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - NotFoundOrDeniedError never reveals whether the resource exists

Design Decisions:
    - Single hierarchy with WorkbenchError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INVARIANT = "invariant"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    identity: str | None = None
    scope_type: str | None = None
    scope_id: str | None = None
    debug_info: dict[str, Any] | None = None


class WorkbenchError(Exception):
    """Base exception for all Workbench errors."""

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

class UnauthenticatedError(WorkbenchError):
    """No identity could be resolved for the request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, context, 401,
        )


class InputValidationError(WorkbenchError):
    """Input outside declared bounds or shape."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"field": self.field, "message": self.message},
        ]
        return response


class NotFoundOrDeniedError(WorkbenchError):
    """Resource absent, or caller lacks the required membership/role.

    Both cases produce the same message so callers cannot probe for
    resources they cannot access.
    """
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Invariant Errors (500-level) ───────────────────────────────

class DuplicateMembershipError(WorkbenchError):
    """A membership already exists for (identity, scope)."""
    def __init__(
        self, identity: str, scope_type: str, scope_id: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.identity, ctx.scope_type, ctx.scope_id = identity, scope_type, scope_id
        super().__init__(
            f"Membership already exists for {scope_type} '{scope_id}'",
            "DUPLICATE_MEMBERSHIP", ErrorCategory.INVARIANT,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class InvalidRoleError(WorkbenchError):
    """Role value outside the Role enumeration."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid role: {value!r}",
            "INVALID_ROLE", ErrorCategory.INVARIANT,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.value = value


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreError(WorkbenchError):
    """Persistent store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
