"""
Application layer interfaces (ports).

These protocols define the contracts between the application layer
and the infrastructure layer, following the Dependency Inversion Principle.
"""

from wherewhen.application.interfaces.repositories import (
    ICatalogSource,
    IEventRepository,
    IUserEventStore,
)
from wherewhen.application.interfaces.services import IIdentityProvider, ILocationProvider

__all__ = [
    # Repository interfaces
    "ICatalogSource",
    "IUserEventStore",
    "IEventRepository",
    # Service interfaces
    "ILocationProvider",
    "IIdentityProvider",
]
