"""
Input commands for creating and updating user events.

These models only describe the shape of the input and normalize datetimes
to UTC. Business rules (blank titles, past dates, capacity) are checked by
the use cases so that violations surface as InvalidEventException.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from wherewhen.domain.enums import EventCategory
from wherewhen.domain.value_objects import Location, Price
from wherewhen.shared.utils.datetime import ensure_utc


class EventCreate(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    title: str
    category: EventCategory
    location: Location
    date_time: datetime
    organizer_id: str
    description: str | None = None
    end_date_time: datetime | None = None
    max_attendees: int | None = None
    image_url: str | None = None
    price: Price | None = None

    @field_validator("date_time", "end_date_time")
    @classmethod
    def normalize_datetime(cls, v: datetime | None) -> datetime | None:
        """Interpret naive datetimes as UTC."""
        return ensure_utc(v) if v is not None else None


class EventUpdate(BaseModel):
    """
    Partial update of a user event.

    Only fields explicitly passed are applied. For optional attributes
    (description, end_date_time, max_attendees, image_url, price) an explicit
    ``None`` clears the value; for required ones (title, category, location,
    date_time) ``None`` means "leave unchanged".
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    title: str | None = None
    description: str | None = None
    category: EventCategory | None = None
    location: Location | None = None
    date_time: datetime | None = None
    end_date_time: datetime | None = None
    max_attendees: int | None = None
    image_url: str | None = None
    price: Price | None = None

    @field_validator("date_time", "end_date_time")
    @classmethod
    def normalize_datetime(cls, v: datetime | None) -> datetime | None:
        """Interpret naive datetimes as UTC."""
        return ensure_utc(v) if v is not None else None

    def changes(self) -> dict:
        """Fields to apply, keyed by EventEntity attribute name"""
        required = {"title", "category", "location", "date_time"}
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if not (name in required and getattr(self, name) is None)
        }
