"""Error Hierarchy: typed, categorized exceptions for the construction boundary.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are raised at construction time only, never from accessors or operators
    - to_dict() produces a structured envelope suitable for logging

Design Decisions:
    - Single hierarchy with TicketCoreError base: callers can catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    value: Any = None
    debug_info: dict[str, Any] | None = None


class TicketCoreError(Exception):
    """Base exception for all ticketcore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field,
                    "value": repr(self.context.value),
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class InvalidStatusError(TicketCoreError):
    """Ticket status is not one of the recognized lifecycle states."""
    def __init__(self, status: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "status"
        ctx.value = status
        super().__init__(
            f"Invalid ticket status {status!r}; expected one of "
            "'Open', 'InProgress', 'Closed'",
            "INVALID_STATUS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.status = status


class EmptyFieldError(TicketCoreError):
    """A required ticket text field is empty or whitespace-only."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field_name
        super().__init__(
            f"Ticket {field_name} cannot be empty or whitespace",
            "EMPTY_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field_name


class ValueOutOfRangeError(TicketCoreError):
    """Raw integer outside the unsigned 32-bit domain."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = "value"
        ctx.value = value
        super().__init__(
            f"{value!r} is not an unsigned 32-bit integer",
            "VALUE_OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.value = value
