from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


class IpApiClient:
    BASE_URL = "https://ipapi.co/json/"

    def __init__(self, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport

    async def lookup(self) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(self.BASE_URL)
            resp.raise_for_status()
            return resp.json()
