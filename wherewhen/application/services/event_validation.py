"""Validity rules shared by the create, update and search use cases."""

from datetime import datetime

from wherewhen.domain.exceptions import InvalidEventException
from wherewhen.domain.value_objects import Location
from wherewhen.shared.utils.datetime import ensure_utc, utc_now


class EventValidator:
    """Raises InvalidEventException for the first rule an input breaks."""

    def __init__(self, max_search_radius_km: float = 500.0) -> None:
        self.max_search_radius_km = max_search_radius_km

    @staticmethod
    def validate_title(title: str) -> str:
        """Return the trimmed title"""
        trimmed = title.strip()
        if not trimmed:
            raise InvalidEventException("Event title cannot be empty", field="title")
        return trimmed

    @staticmethod
    def validate_schedule(
        date_time: datetime,
        end_date_time: datetime | None,
        *,
        require_future: bool,
        now: datetime | None = None,
    ) -> None:
        """
        Check start/end ordering, and future-ness of the start when creating.

        Updates skip the future check so organizers can still edit details of
        an event that is about to start.
        """
        start = ensure_utc(date_time)
        if require_future and start <= ensure_utc(now or utc_now()):
            raise InvalidEventException("Event date must be in the future", field="date_time")
        if end_date_time is not None and ensure_utc(end_date_time) < start:
            raise InvalidEventException(
                "End date must be after start date", field="end_date_time"
            )

    @staticmethod
    def validate_capacity(max_attendees: int | None) -> None:
        if max_attendees is not None and max_attendees <= 0:
            raise InvalidEventException(
                "Max attendees must be greater than 0", field="max_attendees"
            )

    def validate_radius(self, radius_km: float) -> None:
        if not 0 < radius_km <= self.max_search_radius_km:
            raise InvalidEventException(
                f"Radius must be greater than 0 and at most {self.max_search_radius_km:g} km",
                field="radius_km",
            )

    @staticmethod
    def validate_query(query: str) -> str:
        """Return the trimmed search query"""
        trimmed = query.strip()
        if not trimmed:
            raise InvalidEventException("Search query cannot be empty", field="query")
        return trimmed

    @staticmethod
    def validate_search_location(location: Location) -> None:
        if not location.has_coordinates():
            raise InvalidEventException(
                "Search location must include latitude and longitude", field="location"
            )
