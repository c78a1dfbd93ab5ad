"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass

from wherewhen.shared.utils.geo import distance_km


@dataclass(frozen=True)
class Location:
    """
    Geographic location of an event or a user.

    Coordinates are optional so that address-only entries can be stored;
    distance computations require both latitude and longitude.
    """

    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    place_name: str | None = None
    city: str | None = None
    country: str | None = None

    def __post_init__(self) -> None:
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("Latitude and longitude must be provided together")
        if self.latitude is not None and not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if self.longitude is not None and not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def distance_to(self, other: "Location") -> float | None:
        """Distance in km, or None when either side has no coordinates"""
        if not (self.has_coordinates() and other.has_coordinates()):
            return None
        return distance_km(self.latitude, self.longitude, other.latitude, other.longitude)  # type: ignore[arg-type]

    def format_address(self) -> str:
        parts = [part for part in (self.place_name, self.address, self.city) if part]
        return ", ".join(parts)


@dataclass(frozen=True)
class Price:
    """Ticket price: free, a single amount or a range, in one currency."""

    min_amount: float | None
    max_amount: float | None
    currency: str = "EUR"
    is_free: bool = False

    def __post_init__(self) -> None:
        for amount in (self.min_amount, self.max_amount):
            if amount is not None and amount < 0:
                raise ValueError("Price amount cannot be negative")
        if (
            self.min_amount is not None
            and self.max_amount is not None
            and self.min_amount > self.max_amount
        ):
            raise ValueError("Minimum price cannot exceed maximum price")

    @classmethod
    def free(cls) -> "Price":
        return cls(min_amount=None, max_amount=None, is_free=True)

    @classmethod
    def single(cls, amount: float, currency: str = "EUR") -> "Price":
        return cls(min_amount=amount, max_amount=amount, currency=currency)

    @classmethod
    def range(cls, min_amount: float, max_amount: float, currency: str = "EUR") -> "Price":
        return cls(min_amount=min_amount, max_amount=max_amount, currency=currency)

    def format(self) -> str:
        if self.is_free:
            return "Free"
        if self.min_amount is not None and self.max_amount is not None:
            if self.min_amount == self.max_amount:
                return f"{self.min_amount} {self.currency}"
            return f"{self.min_amount} - {self.max_amount} {self.currency}"
        if self.min_amount is not None:
            return f"From {self.min_amount} {self.currency}"
        return "Price not available"
