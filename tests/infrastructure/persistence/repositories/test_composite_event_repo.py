"""Tests for CompositeEventRepository"""

from unittest.mock import AsyncMock

import pytest

from wherewhen.domain import EventCategory, EventSource
from wherewhen.infrastructure.exceptions import CatalogSourceError
from wherewhen.infrastructure.persistence.repositories import (
    CompositeEventRepository,
    merge_events,
)

from tests.factories import FROZEN_DATETIME, MADRID, build_event


def catalog_event(event_id, hours_ahead=24, **kwargs):
    return build_event(
        event_id,
        source=EventSource.EXTERNAL_CATALOG,
        hours_ahead=hours_ahead,
        base_time=FROZEN_DATETIME,
        **kwargs,
    )


def user_event(event_id, hours_ahead=24, **kwargs):
    return build_event(event_id, hours_ahead=hours_ahead, base_time=FROZEN_DATETIME, **kwargs)


@pytest.fixture
def catalog():
    source = AsyncMock()
    source.search_nearby.return_value = []
    source.search_by_category.return_value = []
    return source


@pytest.fixture
def store():
    user_store = AsyncMock()
    user_store.search_by_location.return_value = []
    return user_store


@pytest.fixture
def repo(catalog, store):
    return CompositeEventRepository(catalog=catalog, user_store=store)


class TestMergeEvents:
    def test_duplicate_ids_collapse_to_first(self):
        first = catalog_event("a", title="First")
        duplicate = catalog_event("a", title="Second")

        merged = merge_events([first, duplicate], [])

        assert merged == [first]

    def test_sorted_by_start_time_across_sources(self):
        one = catalog_event("c1", hours_ahead=1)
        two = user_event("u2", hours_ahead=2)
        three = catalog_event("c3", hours_ahead=3)

        merged = merge_events([three, one], [two])

        assert [event.id for event in merged] == ["c1", "u2", "c3"]

    def test_ties_keep_source_order(self):
        from_catalog = catalog_event("c", hours_ahead=5)
        from_store = user_event("u", hours_ahead=5)

        assert [e.id for e in merge_events([from_catalog], [from_store])] == ["c", "u"]


class TestSearchNearby:
    @pytest.mark.asyncio
    async def test_merges_both_sources(self, repo, catalog, store):
        """
        GIVEN events in the catalog and the user store
        WHEN searching nearby
        THEN both are returned, deduplicated and sorted
        """
        # GIVEN
        catalog.search_nearby.return_value = [catalog_event("c3", 3), catalog_event("c1", 1)]
        store.search_by_location.return_value = [user_event("u2", 2)]

        # WHEN
        result = await repo.search_nearby(MADRID, 10.0)

        # THEN
        assert [event.id for event in result] == ["c1", "u2", "c3"]
        catalog.search_nearby.assert_awaited_once_with(MADRID.latitude, MADRID.longitude, 10.0)
        store.search_by_location.assert_awaited_once_with(
            MADRID.latitude, MADRID.longitude, 10.0
        )

    @pytest.mark.asyncio
    async def test_catalog_failure_gives_partial_results(self, repo, catalog, store):
        """
        GIVEN a failing catalog
        WHEN searching nearby
        THEN user events are still returned
        """
        catalog.search_nearby.side_effect = CatalogSourceError("search_nearby", "HTTP 503")
        store.search_by_location.return_value = [user_event("u1")]

        result = await repo.search_nearby(MADRID, 10.0)

        assert [event.id for event in result] == ["u1"]

    @pytest.mark.asyncio
    async def test_store_failure_gives_partial_results(self, repo, catalog, store):
        catalog.search_nearby.return_value = [catalog_event("c1")]
        store.search_by_location.side_effect = ConnectionError("store down")

        result = await repo.search_nearby(MADRID, 10.0)

        assert [event.id for event in result] == ["c1"]

    @pytest.mark.asyncio
    async def test_both_sources_failing_gives_empty_list(self, repo, catalog, store):
        catalog.search_nearby.side_effect = TimeoutError()
        store.search_by_location.side_effect = TimeoutError()

        assert await repo.search_nearby(MADRID, 10.0) == []

    @pytest.mark.asyncio
    async def test_duplicate_within_one_source(self, repo, catalog):
        event = catalog_event("a")
        catalog.search_nearby.return_value = [event, event]

        assert await repo.search_nearby(MADRID, 10.0) == [event]


class TestFilteredSearches:
    @pytest.mark.asyncio
    async def test_by_category_filters_user_events(self, repo, catalog, store):
        catalog.search_by_category.return_value = [
            catalog_event("c1", category=EventCategory.SPORTS)
        ]
        store.search_by_location.return_value = [
            user_event("u-music", category=EventCategory.MUSIC),
            user_event("u-sports", 2, category=EventCategory.SPORTS),
        ]

        result = await repo.search_by_category(MADRID, EventCategory.SPORTS, 10.0)

        assert [event.id for event in result] == ["u-sports", "c1"]
        catalog.search_by_category.assert_awaited_once_with(
            MADRID.latitude, MADRID.longitude, EventCategory.SPORTS, 10.0
        )

    @pytest.mark.asyncio
    async def test_by_name_is_case_insensitive_substring(self, repo, catalog, store):
        catalog.search_nearby.return_value = [
            catalog_event("c1", title="JAZZ Festival"),
            catalog_event("c2", title="Rock night"),
        ]
        store.search_by_location.return_value = [user_event("u1", 2, title="Late jazz jam")]

        result = await repo.search_by_name(MADRID, "jazz", 10.0)

        assert [event.id for event in result] == ["u1", "c1"]


class TestUserStoreRouting:
    @pytest.mark.asyncio
    async def test_mutations_go_to_user_store_only(self, repo, catalog, store):
        event = user_event("u1")
        store.create.return_value = event
        store.update.return_value = event

        await repo.create_user_event(event)
        await repo.update_user_event(event)
        await repo.delete_user_event("u1")
        await repo.join_event("u1", "user-2")
        await repo.leave_event("u1", "user-2")

        store.create.assert_awaited_once_with(event)
        store.update.assert_awaited_once_with(event)
        store.delete.assert_awaited_once_with("u1")
        store.join.assert_awaited_once_with("u1", "user-2")
        store.leave.assert_awaited_once_with("u1", "user-2")
        assert catalog.method_calls == []

    @pytest.mark.asyncio
    async def test_reads_by_owner(self, repo, store):
        store.get_by_id.return_value = None
        store.get_attendees.return_value = ["a"]
        store.get_created_by.return_value = []
        store.get_joined_by.return_value = []

        assert await repo.get_by_id("x") is None
        assert await repo.get_attendees("x") == ["a"]
        await repo.get_user_created_events("org")
        await repo.get_user_joined_events("user")

        store.get_created_by.assert_awaited_once_with("org")
        store.get_joined_by.assert_awaited_once_with("user")

    @pytest.mark.asyncio
    async def test_store_errors_propagate_outside_searches(self, repo, store):
        store.create.side_effect = ConnectionError("store down")

        with pytest.raises(ConnectionError):
            await repo.create_user_event(user_event("u1"))
