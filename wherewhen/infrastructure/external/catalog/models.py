"""Ticketmaster Discovery API response models (only the fields we map)"""

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TicketmasterImage(_ApiModel):
    url: str


class TicketmasterStartDate(_ApiModel):
    local_date: str | None = Field(default=None, alias="localDate")
    local_time: str | None = Field(default=None, alias="localTime")
    date_time: str | None = Field(default=None, alias="dateTime")


class TicketmasterDates(_ApiModel):
    start: TicketmasterStartDate = Field(default_factory=TicketmasterStartDate)


class TicketmasterSegment(_ApiModel):
    name: str | None = None


class TicketmasterClassification(_ApiModel):
    segment: TicketmasterSegment | None = None


class TicketmasterPriceRange(_ApiModel):
    min: float | None = None
    max: float | None = None
    currency: str = "EUR"


class TicketmasterNamed(_ApiModel):
    name: str | None = None


class TicketmasterAddress(_ApiModel):
    line1: str | None = None


class TicketmasterVenueLocation(_ApiModel):
    latitude: str | None = None
    longitude: str | None = None


class TicketmasterVenue(_ApiModel):
    name: str | None = None
    address: TicketmasterAddress | None = None
    city: TicketmasterNamed | None = None
    country: TicketmasterNamed | None = None
    location: TicketmasterVenueLocation | None = None


class TicketmasterEventEmbedded(_ApiModel):
    venues: list[TicketmasterVenue] = Field(default_factory=list)


class TicketmasterEvent(_ApiModel):
    id: str
    name: str
    url: str | None = None
    images: list[TicketmasterImage] = Field(default_factory=list)
    dates: TicketmasterDates = Field(default_factory=TicketmasterDates)
    classifications: list[TicketmasterClassification] = Field(default_factory=list)
    price_ranges: list[TicketmasterPriceRange] = Field(default_factory=list, alias="priceRanges")
    distance: float | None = None
    embedded: TicketmasterEventEmbedded | None = Field(default=None, alias="_embedded")


class TicketmasterEmbedded(_ApiModel):
    events: list[TicketmasterEvent] = Field(default_factory=list)


class TicketmasterSearchResponse(_ApiModel):
    embedded: TicketmasterEmbedded | None = Field(default=None, alias="_embedded")

    def events(self) -> list[TicketmasterEvent]:
        return self.embedded.events if self.embedded else []
