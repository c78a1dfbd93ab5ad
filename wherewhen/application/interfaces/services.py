"""
Service interfaces (ports) for the application layer.

Capabilities supplied by the host platform: where the caller is and who
the caller is.
"""

from __future__ import annotations

from typing import Protocol

from wherewhen.domain.value_objects import Location


class ILocationProvider(Protocol):
    """Protocol for the caller's current location (DIP)"""

    async def current_location(self) -> Location:
        """Current location of the caller; raises when unavailable"""
        ...


class IIdentityProvider(Protocol):
    """Protocol for the authenticated caller's identity (DIP)"""

    def current_user_id(self) -> str | None:
        """Id of the authenticated caller, or None if anonymous"""
        ...
