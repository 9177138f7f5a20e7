from __future__ import annotations

import sys
from typing import Optional

import httpx

from salat.domain.errors import GeocodeError
from salat.domain.models import GeoPoint
from salat.infra.bigdatacloud_client import BigDataCloudClient

from .base import PlaceNameResolver


class BigDataCloudGeocoder(PlaceNameResolver):
    """Reverse geocoder returning "City, Country"; failures degrade to ""."""

    def __init__(self, client: Optional[BigDataCloudClient] = None, language: str = "en"):
        self.client = client or BigDataCloudClient()
        self.language = language

    async def resolve_place_name(self, point: GeoPoint) -> str:
        try:
            return await self._lookup(point)
        except GeocodeError as exc:
            print(f"[geocode] WARNING: {exc}", file=sys.stderr)
            return ""

    async def _lookup(self, point: GeoPoint) -> str:
        try:
            data = await self.client.reverse(point.lat, point.lon, self.language)
        except (httpx.HTTPError, ValueError) as exc:
            raise GeocodeError(f"reverse geocode failed: {exc}") from exc
        if not isinstance(data, dict):
            raise GeocodeError("reverse geocode payload is not an object")
        for key in ("city", "locality", "principalSubdivision", "countryName"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise GeocodeError(f"unexpected {key} in reverse geocode payload: {value!r}")
        return self._format(data)

    @staticmethod
    def _format(data: dict) -> str:
        city = data.get("city") or data.get("locality") or data.get("principalSubdivision") or ""
        country = data.get("countryName") or ""
        return ", ".join(part for part in (city, country) if part)
