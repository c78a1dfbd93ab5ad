from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "WhereWhen"
    app_version: str = "1.0.0"
    debug: bool = False

    # Search
    default_search_radius_km: float = 25.0
    max_search_radius_km: float = 500.0

    # External event catalog
    catalog_backend: str = "ticketmaster"  # Options: "ticketmaster", "none"
    ticketmaster_api_key: str | None = None
    ticketmaster_base_url: str = "https://app.ticketmaster.com"
    ticketmaster_timeout_seconds: float = 10.0
    ticketmaster_page_size: int = 50  # Discovery API caps size at 200

    @model_validator(mode="after")
    def validate_search_config(self) -> "Settings":
        """Validate search radius bounds and catalog backend"""
        if self.max_search_radius_km <= 0:
            raise ValueError("MAX_SEARCH_RADIUS_KM must be greater than 0")
        if not 0 < self.default_search_radius_km <= self.max_search_radius_km:
            raise ValueError(
                "DEFAULT_SEARCH_RADIUS_KM must be greater than 0 and "
                f"at most {self.max_search_radius_km}"
            )
        if not 1 <= self.ticketmaster_page_size <= 200:
            raise ValueError("TICKETMASTER_PAGE_SIZE must be between 1 and 200")

        if self.catalog_backend not in ("ticketmaster", "none"):
            raise ValueError(
                f"Invalid catalog_backend '{self.catalog_backend}'. "
                f"Must be one of: 'ticketmaster', 'none'"
            )
        # Note: the API key is checked by CatalogSourceFactory so that settings
        # stay loadable in environments that never talk to the catalog
        return self

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow", case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
