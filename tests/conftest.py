"""Shared test fixtures for pytest"""
from unittest.mock import AsyncMock

import pytest

from wherewhen.infrastructure.config.settings import get_settings
from wherewhen.infrastructure.persistence import InMemoryUserEventStore
from wherewhen.shared.context import clear_current_user

from tests.factories import build_event


@pytest.fixture
def make_event():
    """Factory fixture for domain events"""
    return build_event


@pytest.fixture
def user_store() -> InMemoryUserEventStore:
    return InMemoryUserEventStore()


@pytest.fixture
def mock_repo() -> AsyncMock:
    """IEventRepository double: nothing found, writes echo their input"""
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_attendees = AsyncMock(return_value=[])
    repo.create_user_event = AsyncMock(side_effect=lambda event: event)
    repo.update_user_event = AsyncMock(side_effect=lambda event: event)
    repo.delete_user_event = AsyncMock(return_value=None)
    repo.join_event = AsyncMock(return_value=None)
    repo.leave_event = AsyncMock(return_value=None)
    return repo


@pytest.fixture(autouse=True)
def reset_context_and_settings():
    """Each test starts anonymous and re-reads settings from the environment"""
    clear_current_user()
    get_settings.cache_clear()
    yield
    clear_current_user()
    get_settings.cache_clear()
