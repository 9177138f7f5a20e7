from __future__ import annotations

import asyncio
import time
from typing import Callable, Optional

import httpx

from salat.domain.errors import LocationError
from salat.domain.models import GeoPoint
from salat.infra.ipapi_client import IpApiClient

from .base import LocationSource

ACQUIRE_TIMEOUT_S = 10.0
MAX_FIX_AGE_S = 60.0


class IpLocationSource(LocationSource):
    """Approximate position from the public IP address.

    A fix younger than ``max_age`` seconds is reused instead of querying again.
    """

    def __init__(
        self,
        client: Optional[IpApiClient] = None,
        *,
        timeout: float = ACQUIRE_TIMEOUT_S,
        max_age: float = MAX_FIX_AGE_S,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self.client = client or IpApiClient(timeout=timeout)
        self.timeout = timeout
        self.max_age = max_age
        self._monotonic = monotonic
        self._cached: Optional[GeoPoint] = None
        self._cached_at = 0.0

    async def acquire(self) -> GeoPoint:
        now = self._monotonic()
        if self._cached is not None and now - self._cached_at <= self.max_age:
            return self._cached
        try:
            payload = await asyncio.wait_for(self.client.lookup(), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise LocationError("timed out waiting for a location fix") from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise LocationError(f"location lookup failed: {exc}") from exc
        if not isinstance(payload, dict):
            raise LocationError("location lookup returned no coordinates")
        if payload.get("error"):
            raise LocationError(str(payload.get("reason") or "location lookup refused"))
        try:
            point = GeoPoint(lat=float(payload["latitude"]), lon=float(payload["longitude"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise LocationError("location lookup returned no coordinates") from exc
        self._cached = point
        self._cached_at = self._monotonic()
        return point
