"""Domain enumerations for the WhereWhen event engine."""

from enum import Enum


class EventSource(str, Enum):
    """Where an event comes from"""

    USER_CREATED = "user_created"
    EXTERNAL_CATALOG = "external_catalog"


class EventStatus(str, Enum):
    """Event lifecycle status"""

    ACTIVE = "active"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [status.value for status in cls]


class EventCategory(str, Enum):
    """Event category"""

    MUSIC = "music"
    SPORTS = "sports"
    ARTS = "arts"
    THEATER = "theater"
    FAMILY = "family"
    FILM = "film"
    MISCELLANEOUS = "miscellaneous"
    OTHER = "other"

    @classmethod
    def from_catalog_segment(cls, segment: str | None) -> "EventCategory":
        """Map a catalog classification segment name; unknown names become OTHER"""
        if not segment:
            return cls.OTHER
        try:
            return cls(segment.strip().lower())
        except ValueError:
            return cls.OTHER


class AttendanceStatus(str, Enum):
    """Attendance state of a user for an event"""

    GOING = "going"
