from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

from salat.config import Settings
from salat.domain.errors import LocationError
from salat.domain.models import GeoPoint
from salat.pages.display import DisplaySink
from salat.providers.geocode.base import PlaceNameResolver
from salat.providers.location.base import LocationSource
from salat.providers.orientation.sensors import OrientationSensor
from salat.providers.timings.base import TimingsProvider
from salat.services.countdown import Ticker
from salat.services.tasbeeh import CounterStore

LOCATION_UNAVAILABLE = "Location unavailable"


@dataclass
class PageContext:
    settings: Settings
    display: DisplaySink
    location: LocationSource
    geocoder: PlaceNameResolver
    timings: TimingsProvider
    counter_store: Optional[CounterStore] = None
    orientation: Optional[OrientationSensor] = None
    # Called as clock(tzinfo_or_None), like datetime.now
    clock: Callable[..., datetime] = datetime.now
    ticker: Optional[Ticker] = None
    # Seconds a live page stays up; None keeps it until cancelled
    lifetime: Optional[float] = None
    # Page actions requested by the caller, e.g. ["reset", "increment:3"]
    actions: List[str] = field(default_factory=list)
    _teardown: List[Callable[[], None]] = field(default_factory=list, repr=False)
    _closed: bool = field(default=False, repr=False)

    def on_teardown(self, callback: Callable[[], None]) -> None:
        self._teardown.append(callback)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        while self._teardown:
            self._teardown.pop()()

    async def keep_alive(self) -> None:
        if self.lifetime is None:
            await asyncio.Event().wait()
        elif self.lifetime > 0:
            await asyncio.sleep(self.lifetime)


def warn(page: str, message: str) -> None:
    print(f"[{page}] WARNING: {message}", file=sys.stderr)


async def show_location(ctx: PageContext, slot: str, page: str) -> Optional[GeoPoint]:
    """Acquire the position and publish its place name; returns None when unavailable."""
    try:
        point = await ctx.location.acquire()
    except LocationError as exc:
        warn(page, f"location failed ({exc})")
        ctx.display.text(slot, LOCATION_UNAVAILABLE)
        return None
    name = await ctx.geocoder.resolve_place_name(point)
    ctx.display.text(slot, name or point.label())
    return point
