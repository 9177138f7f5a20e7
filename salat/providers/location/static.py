from __future__ import annotations

from typing import Optional

from salat.domain.errors import LocationError
from salat.domain.models import GeoPoint

from .base import LocationSource


class StaticLocationSource(LocationSource):
    def __init__(self, point: Optional[GeoPoint]):
        self.point = point

    async def acquire(self) -> GeoPoint:
        if self.point is None:
            raise LocationError("no location configured")
        return self.point
