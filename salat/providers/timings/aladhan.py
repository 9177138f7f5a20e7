from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from salat.domain.errors import TimingsFetchError
from salat.domain.models import DayTimings, GeoPoint, TRACKED_PRAYERS
from salat.infra.aladhan_client import AladhanClient

from .base import TimingsProvider


class AladhanTimingsProvider(TimingsProvider):
    def __init__(self, client: Optional[AladhanClient] = None):
        self.client = client or AladhanClient()

    async def fetch_daily_timings(self, day: date, point: GeoPoint, method: int) -> DayTimings:
        data = await self.client.fetch_timings(day, point.lat, point.lon, method)
        return self._map_day(data, fallback_day=day)

    async def fetch_month_timings(self, year: int, month: int, point: GeoPoint, method: int) -> List[DayTimings]:
        records = await self.client.fetch_calendar(year, month, point.lat, point.lon, method)
        return [self._map_day(record) for record in records]

    @staticmethod
    def _parse_gregorian(value: str) -> date:
        return datetime.strptime(value, "%d-%m-%Y").date()

    @classmethod
    def _map_day(cls, record: dict, fallback_day: Optional[date] = None) -> DayTimings:
        try:
            raw_timings = record["timings"]
            timings = {name: str(raw_timings[name]) for name in TRACKED_PRAYERS}
            date_info = record.get("date") or {}
            gregorian = (date_info.get("gregorian") or {}).get("date")
            if gregorian:
                day = cls._parse_gregorian(gregorian)
            elif fallback_day is not None:
                day = fallback_day
            else:
                raise TimingsFetchError("calendar record without gregorian date")
            hijri = (date_info.get("hijri") or {}).get("date")
            tz_name = (record.get("meta") or {}).get("timezone")
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise TimingsFetchError(f"malformed timings record: {exc}") from exc
        result = DayTimings(day=day, timings=timings, timezone=tz_name, hijri=hijri, raw=record)
        try:
            result.events()
        except ValueError as exc:
            raise TimingsFetchError(str(exc)) from exc
        return result
