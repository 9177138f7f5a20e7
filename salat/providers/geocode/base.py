from __future__ import annotations

from typing import Protocol

from salat.domain.models import GeoPoint


class PlaceNameResolver(Protocol):
    """Reverse geocoder; returns "" instead of raising when the lookup fails."""

    async def resolve_place_name(self, point: GeoPoint) -> str:
        raise NotImplementedError
