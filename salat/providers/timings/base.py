from __future__ import annotations

from datetime import date
from typing import List, Protocol

from salat.domain.models import DayTimings, GeoPoint


class TimingsProvider(Protocol):
    """Contract for remote prayer-timing providers."""

    async def fetch_daily_timings(self, day: date, point: GeoPoint, method: int) -> DayTimings:
        raise NotImplementedError

    async def fetch_month_timings(self, year: int, month: int, point: GeoPoint, method: int) -> List[DayTimings]:
        raise NotImplementedError
