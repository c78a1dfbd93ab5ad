"""Tests for the Ticketmaster catalog source, mapper and factory"""

from datetime import UTC, datetime

import httpx
import pytest

from wherewhen.domain import EventCategory, EventSource
from wherewhen.infrastructure.config.settings import Settings
from wherewhen.infrastructure.exceptions import CatalogNotConfiguredError, CatalogSourceError
from wherewhen.infrastructure.external.catalog import (
    CatalogSourceFactory,
    EmptyCatalogSource,
    TicketmasterCatalogSource,
)
from wherewhen.infrastructure.external.catalog.mapper import (
    catalog_event_id,
    parse_start,
    to_domain,
)
from wherewhen.infrastructure.external.catalog.models import (
    TicketmasterEvent,
    TicketmasterStartDate,
)


def api_event(event_id="G5vYZ9", **overrides):
    payload = {
        "id": event_id,
        "name": "Arctic Monkeys",
        "url": f"https://www.ticketmaster.es/event/{event_id}",
        "images": [{"url": "https://s1.ticketm.net/img.jpg", "ratio": "16_9"}],
        "dates": {"start": {"localDate": "2030-07-10", "dateTime": "2030-07-10T19:30:00Z"}},
        "classifications": [{"segment": {"id": "KZFzniwnSyZfZ7v7nJ", "name": "Music"}}],
        "priceRanges": [{"type": "standard", "currency": "EUR", "min": 45.0, "max": 90.0}],
        "distance": 2.3,
        "_embedded": {
            "venues": [
                {
                    "name": "WiZink Center",
                    "address": {"line1": "Av. Felipe II"},
                    "city": {"name": "Madrid"},
                    "country": {"name": "Spain", "countryCode": "ES"},
                    "location": {"longitude": "-3.6719", "latitude": "40.4237"},
                }
            ]
        },
    }
    payload.update(overrides)
    return payload


def search_payload(*events):
    return {"_embedded": {"events": list(events)}, "page": {"size": 50, "number": 0}}


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestMapper:
    def test_maps_full_event(self):
        event = to_domain(TicketmasterEvent.model_validate(api_event()))

        assert event.source == EventSource.EXTERNAL_CATALOG
        assert event.id == catalog_event_id("G5vYZ9")
        assert event.external_id == "G5vYZ9"
        assert event.organizer_id is None
        assert event.title == "Arctic Monkeys"
        assert event.category == EventCategory.MUSIC
        assert event.date_time == datetime(2030, 7, 10, 19, 30, tzinfo=UTC)
        assert event.location.latitude == pytest.approx(40.4237)
        assert event.location.place_name == "WiZink Center"
        assert event.location.city == "Madrid"
        assert event.price.format() == "45.0 - 90.0 EUR"
        assert event.image_url == "https://s1.ticketm.net/img.jpg"
        assert event.distance == 2.3

    def test_catalog_ids_are_stable(self):
        assert catalog_event_id("abc") == catalog_event_id("abc")
        assert catalog_event_id("abc") != catalog_event_id("abd")

    def test_event_without_start_is_skipped(self):
        assert to_domain(TicketmasterEvent.model_validate(api_event(dates={}))) is None

    def test_minimal_event(self):
        event = to_domain(
            TicketmasterEvent.model_validate(
                {"id": "x", "name": "Mystery", "dates": {"start": {"localDate": "2030-01-05"}}}
            )
        )

        assert event.category == EventCategory.OTHER
        assert not event.location.has_coordinates()
        assert event.price is None
        assert event.date_time == datetime(2030, 1, 5, tzinfo=UTC)

    def test_unparseable_coordinates_dropped(self):
        payload = api_event()
        payload["_embedded"]["venues"][0]["location"] = {"latitude": "n/a", "longitude": "1.0"}

        event = to_domain(TicketmasterEvent.model_validate(payload))

        assert event.location.latitude is None and event.location.longitude is None
        assert event.location.city == "Madrid"

    @pytest.mark.parametrize(
        "start, expected",
        [
            ({"dateTime": "2030-07-10T19:30:00Z"}, datetime(2030, 7, 10, 19, 30, tzinfo=UTC)),
            (
                {"localDate": "2030-07-10", "localTime": "21:00:00"},
                datetime(2030, 7, 10, 21, 0, tzinfo=UTC),
            ),
            ({"localDate": "2030-07-10"}, datetime(2030, 7, 10, tzinfo=UTC)),
            ({"localDate": "TBA"}, None),
            ({}, None),
        ],
    )
    def test_parse_start(self, start, expected):
        assert parse_start(TicketmasterStartDate.model_validate(start)) == expected


class TestTicketmasterCatalogSource:
    @pytest.mark.asyncio
    async def test_search_nearby_request_and_mapping(self):
        """
        GIVEN a Discovery API returning two events, one without a date
        WHEN searching nearby
        THEN the query parameters are built and only the dated event is returned
        """
        # GIVEN
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = request.url
            return httpx.Response(
                200, json=search_payload(api_event("a"), api_event("b", dates={}))
            )

        async with mock_client(handler) as client:
            source = TicketmasterCatalogSource("secret", page_size=20, client=client)

            # WHEN
            events = await source.search_nearby(40.4168, -3.7038, 12.3)

        # THEN
        assert [event.external_id for event in events] == ["a"]
        url = captured["url"]
        assert url.path == "/discovery/v2/events.json"
        assert url.params["apikey"] == "secret"
        assert url.params["latlong"] == "40.4168,-3.7038"
        assert url.params["radius"] == "13"
        assert url.params["unit"] == "km"
        assert url.params["size"] == "20"
        assert "classificationName" not in url.params

    @pytest.mark.asyncio
    async def test_search_by_category_adds_classification(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["params"] = request.url.params
            return httpx.Response(200, json={"page": {"totalElements": 0}})

        async with mock_client(handler) as client:
            source = TicketmasterCatalogSource("secret", client=client)
            events = await source.search_by_category(40.0, -3.0, EventCategory.SPORTS, 0.4)

        assert events == []
        assert captured["params"]["classificationName"] == "sports"
        assert captured["params"]["radius"] == "1"

    @pytest.mark.asyncio
    async def test_http_error_raises_catalog_error(self):
        async with mock_client(lambda request: httpx.Response(503)) as client:
            source = TicketmasterCatalogSource("secret", client=client)

            with pytest.raises(CatalogSourceError) as exc_info:
                await source.search_nearby(40.0, -3.0, 10)

        assert exc_info.value.details["reason"] == "HTTP 503"
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_transport_error_raises_catalog_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with mock_client(handler) as client:
            source = TicketmasterCatalogSource("secret", client=client)

            with pytest.raises(CatalogSourceError):
                await source.search_nearby(40.0, -3.0, 10)

    @pytest.mark.asyncio
    async def test_malformed_body_raises_catalog_error(self):
        async with mock_client(lambda request: httpx.Response(200, text="<html>")) as client:
            source = TicketmasterCatalogSource("secret", client=client)

            with pytest.raises(CatalogSourceError):
                await source.search_nearby(40.0, -3.0, 10)

    @pytest.mark.asyncio
    async def test_empty_catalog(self):
        source = EmptyCatalogSource()

        assert await source.search_nearby(0.0, 0.0, 10) == []
        assert await source.search_by_category(0.0, 0.0, EventCategory.FILM, 10) == []


class TestCatalogSourceFactory:
    def test_ticketmaster_backend(self):
        settings = Settings(catalog_backend="ticketmaster", ticketmaster_api_key="key")

        source = CatalogSourceFactory.create_catalog_source(settings)

        assert isinstance(source, TicketmasterCatalogSource)

    def test_ticketmaster_without_key(self):
        settings = Settings(catalog_backend="ticketmaster", ticketmaster_api_key=None)

        with pytest.raises(CatalogNotConfiguredError):
            CatalogSourceFactory.create_catalog_source(settings)

    def test_none_backend(self):
        settings = Settings(catalog_backend="none")

        assert isinstance(CatalogSourceFactory.create_catalog_source(settings), EmptyCatalogSource)
