"""
Exception hierarchy for the parcel tracker.

Provides layered exception structure for parcel store errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ParcelTrackerException(Exception):
    """Base exception for all parcel tracker errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ParcelTrackerException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EmptyAddressError(ValidationError):
    """Raised when a parcel address is empty."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("address cannot be empty", field="address", details=details)


class InvalidStatusError(ValidationError):
    """Raised when a status value is not a known parcel status."""

    def __init__(self, status: Any, details: dict[str, Any] | None = None) -> None:
        """
        Initialize invalid status error.

        Args:
            status: The rejected status value
            details: Additional context
        """
        details = details or {}
        details["status"] = str(status)
        super().__init__(f"invalid status: {status}", field="status", details=details)


class ParcelNotFoundError(ParcelTrackerException):
    """Raised when a parcel cannot be found."""

    def __init__(self, number: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize parcel not found error.

        Args:
            number: Number of the missing parcel
            details: Additional context
        """
        details = details or {}
        details["number"] = number
        super().__init__(f"parcel with number {number} not found", details)


class ParcelStatusGuardError(ParcelTrackerException):
    """
    Raised when an operation requires a registered parcel.

    Address changes and deletions are only allowed before a parcel
    is sent; ``operation`` names the blocked action.
    """

    def __init__(
        self,
        number: int,
        status: Any,
        operation: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize status guard error.

        Args:
            number: Parcel number
            status: Parcel status observed after the blocked statement
            operation: Blocked operation (set_address, delete)
            details: Additional context
        """
        status_value = getattr(status, "value", status)
        details = details or {}
        details.update({"number": number, "status": status_value, "operation": operation})
        super().__init__(
            f"{operation} not allowed for parcel {number}: parcel must be in registered status",
            details,
        )
