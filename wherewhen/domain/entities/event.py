"""
Event domain entity.

This represents the business concept of an event, independent of
where it comes from (user store or external catalog) and how it is stored.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from wherewhen.domain.enums import EventCategory, EventSource, EventStatus
from wherewhen.domain.exceptions import InvalidEventException
from wherewhen.domain.value_objects.core import Location, Price
from wherewhen.shared.utils.datetime import ensure_utc

# ACTIVE <-> RESCHEDULED, both -> CANCELLED
_ALLOWED_TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.ACTIVE: frozenset({EventStatus.RESCHEDULED, EventStatus.CANCELLED}),
    EventStatus.RESCHEDULED: frozenset({EventStatus.ACTIVE, EventStatus.CANCELLED}),
    EventStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class EventEntity:
    """
    Domain entity for Event.

    Instances are immutable value copies: every layer that changes an event
    builds a new instance with ``dataclasses.replace``. ``distance`` is derived
    for the current caller and never persisted.
    """

    id: str
    title: str
    category: EventCategory
    location: Location
    date_time: datetime
    source: EventSource
    created_at: datetime
    status: EventStatus = EventStatus.ACTIVE
    description: str | None = None
    end_date_time: datetime | None = None
    image_url: str | None = None
    organizer_id: str | None = None
    external_id: str | None = None
    external_url: str | None = None
    price: Price | None = None
    max_attendees: int | None = None
    distance: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_time", ensure_utc(self.date_time))
        object.__setattr__(self, "created_at", ensure_utc(self.created_at))
        if self.end_date_time is not None:
            object.__setattr__(self, "end_date_time", ensure_utc(self.end_date_time))

        if self.source == EventSource.USER_CREATED:
            if self.external_id is not None or self.external_url is not None:
                raise InvalidEventException(
                    "User-created events cannot carry external catalog references",
                    field="external_id",
                )
        elif self.organizer_id is not None:
            raise InvalidEventException(
                "Only user-created events have an organizer", field="organizer_id"
            )

        if self.end_date_time is not None and self.end_date_time < self.date_time:
            raise InvalidEventException(
                "End date must be after start date", field="end_date_time"
            )
        if self.max_attendees is not None and self.max_attendees <= 0:
            raise InvalidEventException(
                "Max attendees must be greater than 0", field="max_attendees"
            )

    def is_user_created(self) -> bool:
        return self.source == EventSource.USER_CREATED

    def is_external(self) -> bool:
        return self.source == EventSource.EXTERNAL_CATALOG

    def is_free(self) -> bool:
        return self.price is not None and self.price.is_free

    def has_capacity_limit(self) -> bool:
        return self.max_attendees is not None

    def is_full(self, attendee_count: int) -> bool:
        return self.max_attendees is not None and attendee_count >= self.max_attendees

    def accepts_attendance(self) -> bool:
        """Cancelled events block join/leave; rescheduled ones do not"""
        return self.status != EventStatus.CANCELLED

    def is_nearby(self, location: Location, radius_km: float) -> bool:
        distance = self.location.distance_to(location)
        return distance is not None and distance <= radius_km

    def with_distance(self, distance_km: float | None) -> "EventEntity":
        return replace(self, distance=distance_km)

    def transition_to(self, new_status: EventStatus) -> "EventEntity":
        """
        Move the event to ``new_status``.

        Re-applying the current status is a no-op. Cancelled events are
        terminal and cannot be re-opened.
        """
        if new_status == self.status:
            return self
        if new_status not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidEventException(
                f"Cannot change event status from {self.status.value} to {new_status.value}",
                field="status",
            )
        return replace(self, status=new_status)
