"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing business entities, value objects,
and domain exceptions. It has no dependencies on other layers.
"""

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import AttendanceStatus, EventCategory, EventSource, EventStatus
from wherewhen.domain.exceptions import (
    AlreadyAttendingEventException,
    EventCancelledException,
    EventException,
    EventFullException,
    EventNotFoundException,
    EventOperationError,
    InvalidEventException,
    NotAttendingEventException,
    UnauthorizedEventAccessException,
    WhereWhenException,
)
from wherewhen.domain.value_objects import Location, Price

__all__ = [
    # Entities
    "EventEntity",
    # Value Objects
    "Location",
    "Price",
    # Enums
    "EventCategory",
    "EventSource",
    "EventStatus",
    "AttendanceStatus",
    # Exceptions
    "WhereWhenException",
    "EventException",
    "InvalidEventException",
    "EventCancelledException",
    "EventNotFoundException",
    "UnauthorizedEventAccessException",
    "AlreadyAttendingEventException",
    "NotAttendingEventException",
    "EventFullException",
    "EventOperationError",
]
