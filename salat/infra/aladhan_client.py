from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

import httpx

from salat.domain.errors import TimingsFetchError


class AladhanClient:
    BASE_URL = "https://api.aladhan.com/v1"

    def __init__(self, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport

    async def fetch_timings(self, day: date, lat: float, lon: float, method: int) -> Dict[str, Any]:
        params = {"latitude": lat, "longitude": lon, "method": method}
        data = await self._get(f"/timings/{day.strftime('%d-%m-%Y')}", params)
        if not isinstance(data, dict):
            raise TimingsFetchError("timings payload is not an object")
        return data

    async def fetch_calendar(self, year: int, month: int, lat: float, lon: float, method: int) -> List[Dict[str, Any]]:
        params = {
            "latitude": lat,
            "longitude": lon,
            "method": method,
            "month": month,
            "year": year,
        }
        data = await self._get("/calendar", params)
        if not isinstance(data, list):
            raise TimingsFetchError("calendar payload is not a list")
        return data

    async def _get(self, path: str, params: Dict[str, Any]) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self.BASE_URL, timeout=self.timeout, transport=self.transport
            ) as client:
                resp = await client.get(path, params=params)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPError as exc:
            raise TimingsFetchError(f"request to {path} failed: {exc}") from exc
        except ValueError as exc:
            raise TimingsFetchError(f"invalid JSON from {path}") from exc
        if not isinstance(payload, dict) or payload.get("code") != 200:
            status = payload.get("status") if isinstance(payload, dict) else None
            raise TimingsFetchError(status or "Error fetching timings")
        if "data" not in payload:
            raise TimingsFetchError("payload without data")
        return payload["data"]
