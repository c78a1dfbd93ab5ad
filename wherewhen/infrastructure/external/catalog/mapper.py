"""Map Ticketmaster events to domain events."""

import uuid
from datetime import datetime

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import EventCategory, EventSource, EventStatus
from wherewhen.domain.value_objects import Location, Price
from wherewhen.infrastructure.external.catalog.models import (
    TicketmasterEvent,
    TicketmasterStartDate,
    TicketmasterVenue,
)
from wherewhen.shared.telemetry.logging import get_logger
from wherewhen.shared.utils import ensure_utc, utc_now

logger = get_logger(__name__)

CATALOG_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "https://app.ticketmaster.com/")


def catalog_event_id(external_id: str) -> str:
    """Stable event id for a catalog event, so repeated fetches deduplicate"""
    return str(uuid.uuid5(CATALOG_ID_NAMESPACE, external_id))


def parse_start(start: TicketmasterStartDate) -> datetime | None:
    """
    Start time from a Ticketmaster date block.

    ``dateTime`` is UTC. Local date/time pairs carry no zone and are read
    as UTC. Returns None when no usable date is present.
    """
    try:
        if start.date_time:
            return ensure_utc(datetime.fromisoformat(start.date_time.replace("Z", "+00:00")))
        if start.local_date and start.local_time:
            return ensure_utc(datetime.fromisoformat(f"{start.local_date}T{start.local_time}"))
        if start.local_date:
            return ensure_utc(datetime.fromisoformat(f"{start.local_date}T00:00:00"))
    except ValueError:
        logger.debug("Unparseable catalog start date: %s", start)
    return None


def _coordinate(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def to_location(venue: TicketmasterVenue | None) -> Location:
    if venue is None:
        return Location()

    latitude = longitude = None
    if venue.location:
        latitude = _coordinate(venue.location.latitude)
        longitude = _coordinate(venue.location.longitude)
    if latitude is None or longitude is None:
        latitude = longitude = None

    return Location(
        latitude=latitude,
        longitude=longitude,
        address=venue.address.line1 if venue.address else None,
        place_name=venue.name,
        city=venue.city.name if venue.city else None,
        country=venue.country.name if venue.country else None,
    )


def to_domain(api_event: TicketmasterEvent) -> EventEntity | None:
    """Domain event for a catalog entry, or None if it has no start date"""
    start = parse_start(api_event.dates.start)
    if start is None:
        return None

    venue = api_event.embedded.venues[0] if api_event.embedded and api_event.embedded.venues else None
    classification = api_event.classifications[0] if api_event.classifications else None
    segment = classification.segment.name if classification and classification.segment else None

    price = None
    if api_event.price_ranges:
        first = api_event.price_ranges[0]
        if first.min is not None or first.max is not None:
            price = Price(min_amount=first.min, max_amount=first.max, currency=first.currency)

    return EventEntity(
        id=catalog_event_id(api_event.id),
        title=api_event.name,
        category=EventCategory.from_catalog_segment(segment),
        location=to_location(venue),
        date_time=start,
        image_url=api_event.images[0].url if api_event.images else None,
        source=EventSource.EXTERNAL_CATALOG,
        external_id=api_event.id,
        external_url=api_event.url,
        price=price,
        distance=api_event.distance,
        status=EventStatus.ACTIVE,
        created_at=utc_now(),
    )
