"""
Domain exceptions for the WhereWhen event engine.

This module defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns.
"""

from typing import Any


class WhereWhenException(Exception):
    """
    Base exception for all WhereWhen errors.

    All custom exceptions should inherit from this class to allow
    for consistent error handling and logging.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for API responses
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class EventException(WhereWhenException):
    """Base exception for event availability and attendance rules."""

    pass


class InvalidEventException(EventException):
    """Raised when event input fails a validation rule."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, "INVALID_EVENT", details)


class EventCancelledException(InvalidEventException):
    """Raised when attendance changes are attempted on a cancelled event."""

    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} has been cancelled")
        self.error_code = "EVENT_CANCELLED"
        self.details = {"event_id": event_id}


class EventNotFoundException(EventException):
    """Raised when a referenced event id does not resolve."""

    def __init__(self, event_id: str):
        super().__init__(
            f"Event with ID {event_id} not found",
            "EVENT_NOT_FOUND",
            {"event_id": event_id},
        )


class UnauthorizedEventAccessException(EventException):
    """Raised when the caller is not the organizer for an organizer-only action."""

    def __init__(self, event_id: str, action: str, user_id: str | None = None):
        super().__init__(
            f"Permission denied: {action} on event {event_id}",
            "UNAUTHORIZED_EVENT_ACCESS",
            {"event_id": event_id, "action": action, "user_id": user_id},
        )


class AlreadyAttendingEventException(EventException):
    """Raised when a user joins an event they already attend."""

    def __init__(self, event_id: str, user_id: str):
        super().__init__(
            "User is already attending this event",
            "ALREADY_ATTENDING_EVENT",
            {"event_id": event_id, "user_id": user_id},
        )


class NotAttendingEventException(EventException):
    """Raised when a user leaves an event they do not attend."""

    def __init__(self, event_id: str, user_id: str):
        super().__init__(
            "User is not attending this event",
            "NOT_ATTENDING_EVENT",
            {"event_id": event_id, "user_id": user_id},
        )


class EventFullException(EventException):
    """Raised when an event has reached its attendee limit."""

    def __init__(self, event_id: str, max_attendees: int):
        super().__init__(
            "Event is full",
            "EVENT_FULL",
            {"event_id": event_id, "max_attendees": max_attendees},
        )


class EventOperationError(WhereWhenException):
    """
    Opaque failure for unexpected lower-layer errors.

    The original error is chained as ``__cause__`` by the raiser and its
    repr is kept in ``details`` for logging and API responses.
    """

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(
            f"Event operation failed: {operation}",
            "EVENT_OPERATION_FAILED",
            {"operation": operation, "cause": repr(cause)},
        )
        self.operation = operation
        self.cause = cause
