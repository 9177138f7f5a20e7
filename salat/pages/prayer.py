from __future__ import annotations

from datetime import tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from salat.domain.errors import TimingsFetchError
from salat.domain.models import CountdownState, DailyEvent, GeoPoint
from salat.domain.schedule import find_next_event
from salat.services.countdown import CountdownSession

from .context import PageContext, show_location, warn

PAGE = "prayer"


class PrayerView:
    """Today's prayer list with the next prayer highlighted and a live countdown."""

    def __init__(self, ctx: PageContext, method: Optional[int] = None) -> None:
        self.ctx = ctx
        self.method = ctx.settings.method if method is None else method
        self.point: Optional[GeoPoint] = None
        self.events: List[DailyEvent] = []
        self.tz: Optional[tzinfo] = None
        self._next_label: Optional[str] = None
        self.session = CountdownSession(
            on_tick=self._on_tick,
            on_render=self._on_render,
            clock=self.now,
            ticker=ctx.ticker,
        )
        ctx.on_teardown(self.session.stop)

    def now(self):
        return self.ctx.clock(self.tz)

    async def load(self) -> None:
        self.point = await show_location(self.ctx, "location", PAGE)
        await self.refresh_times()

    async def change_method(self, method: int) -> None:
        self.method = method
        await self.refresh_times()

    async def refresh_times(self) -> None:
        if self.point is None:
            return
        try:
            day = self.now().date()
            timings = await self.ctx.timings.fetch_daily_timings(day, self.point, self.method)
            tz = self._zone(timings.timezone)
            # The first fetch may use the wrong calendar day before the zone is known
            zone_today = self.ctx.clock(tz).date()
            if zone_today != day:
                timings = await self.ctx.timings.fetch_daily_timings(zone_today, self.point, self.method)
                tz = self._zone(timings.timezone)
        except TimingsFetchError as exc:
            warn(PAGE, f"error fetching prayer times ({exc})")
            return
        self.tz = tz
        self.events = timings.events()
        self.render_list()
        self.session.replace(self.events)

    def render_list(self) -> None:
        if not self.events:
            return
        next_idx, _ = find_next_event(self.events, self.now())
        self._next_label = self.events[next_idx].label
        self.ctx.display.text("next", f"Next: {self.events[next_idx].label}")
        rows = [[event.label, event.hhmm] for event in self.events]
        self.ctx.display.rows("prayers", rows, highlight=next_idx)

    def _on_tick(self, state: CountdownState) -> None:
        if state.label != self._next_label:
            self._next_label = state.label
            self.ctx.display.text("next", f"Next: {state.label}")
        self.ctx.display.text("countdown", str(state.remaining))

    def _on_render(self, state: CountdownState) -> None:
        self.render_list()

    @staticmethod
    def _zone(name: Optional[str]) -> Optional[tzinfo]:
        if not name:
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            warn(PAGE, f"unknown timezone {name!r}; using local time")
            return None


async def init_prayer(ctx: PageContext) -> None:
    view = PrayerView(ctx)
    await view.load()
    if view.session.running:
        await ctx.keep_alive()
