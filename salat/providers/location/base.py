from __future__ import annotations

from typing import Protocol

from salat.domain.models import GeoPoint


class LocationSource(Protocol):
    """Asynchronous source of the user's position; raises LocationError on failure."""

    async def acquire(self) -> GeoPoint:
        raise NotImplementedError
