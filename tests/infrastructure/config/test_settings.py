"""Tests for application settings"""

import pytest
from pydantic import ValidationError

from wherewhen.infrastructure.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CATALOG_BACKEND", raising=False)
    settings = Settings()

    assert settings.app_name == "WhereWhen"
    assert settings.default_search_radius_km == 25.0
    assert settings.max_search_radius_km == 500.0
    assert settings.catalog_backend == "ticketmaster"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_BACKEND", "none")
    monkeypatch.setenv("MAX_SEARCH_RADIUS_KM", "100")
    monkeypatch.setenv("TICKETMASTER_API_KEY", "from-env")

    settings = Settings()

    assert settings.catalog_backend == "none"
    assert settings.max_search_radius_km == 100.0
    assert settings.ticketmaster_api_key == "from-env"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_search_radius_km": 0},
        {"default_search_radius_km": 0},
        {"default_search_radius_km": 50, "max_search_radius_km": 10},
        {"ticketmaster_page_size": 0},
        {"ticketmaster_page_size": 201},
        {"catalog_backend": "eventbrite"},
    ],
)
def test_invalid_configuration(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)
