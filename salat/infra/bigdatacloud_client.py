from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


class BigDataCloudClient:
    BASE_URL = "https://api.bigdatacloud.net/data/reverse-geocode-client"

    def __init__(self, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport

    async def reverse(self, lat: float, lon: float, language: str = "en") -> Dict[str, Any]:
        params = {"latitude": lat, "longitude": lon, "localityLanguage": language}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(self.BASE_URL, params=params)
            resp.raise_for_status()
            return resp.json()
