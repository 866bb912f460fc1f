"""Error Hierarchy - typed, categorized exceptions for every Inkwell failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always carries a top-level "status" message, the shape
      admin clients branch on, plus a structured "error" envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with InkwellError base: FastAPI global handler catches all
    - Client-side failures (RequestFailedError) share the hierarchy so form
      controllers handle server and transport errors through one except clause
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
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    STORAGE = "storage"
    EXTERNAL_API = "external_api"
    REQUEST = "request"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class InkwellError(Exception):
    """Base exception for all Inkwell errors."""

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
            "status": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(InkwellError):
    """Bearer credential missing, expired or rejected by the auth provider."""
    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(InkwellError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class UnknownCategoryError(InkwellError):
    """A post write referenced category ids that do not exist."""
    def __init__(self, category_ids: list[int], context: ErrorContext | None = None):
        super().__init__(
            f"Unknown category id(s): {', '.join(str(i) for i in category_ids)}",
            "UNKNOWN_CATEGORY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.category_ids = category_ids


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(InkwellError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class StorageError(InkwellError):
    """Object storage upload or lookup failed."""
    def __init__(self, message: str, key: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.ERROR, context, 502,
        )
        self.key = key


class ExternalServiceError(InkwellError):
    """Hosted auth provider or webhook call failed outside the 2xx range."""
    def __init__(
        self, service: str, message: str, status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{service} error: {message}",
            "EXTERNAL_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.service = service
        self.status_code = status_code


# ─── Client Errors ──────────────────────────────────────────────

class RequestFailedError(InkwellError):
    """API call returned a non-success status.

    Carries the remote status and the parsed body (None when the body is not
    JSON) so callers can surface the server's message.
    """
    def __init__(
        self, method: str, url: str, status_code: int, body: Any = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "API request failed", "REQUEST_FAILED", ErrorCategory.REQUEST,
            ErrorSeverity.ERROR, context, status_code,
        )
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body

    @property
    def remote_message(self) -> str | None:
        """Message reported by the server, if the body carried one."""
        if not isinstance(self.body, dict):
            return None
        for key in ("message", "status"):
            value = self.body.get(key)
            if isinstance(value, str) and value and value != "OK":
                return value
        return None
