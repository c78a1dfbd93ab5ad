"""Domain value objects."""

from wherewhen.domain.value_objects.core import Location, Price

__all__ = [
    "Location",
    "Price",
]
