from __future__ import annotations

from typing import List

from salat.domain.errors import TimingsFetchError
from salat.domain.models import DayTimings
from salat.domain.ramadan import RAMADAN_METHOD, ramadan_months, select_ramadan_days

from .context import PageContext, show_location, warn

PAGE = "ramadan"
HEADER = ["Date", "Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]


async def init_ramadan(ctx: PageContext) -> None:
    point = await show_location(ctx, "ramadan-location", PAGE)
    if point is None:
        return
    combined: List[DayTimings] = []
    try:
        for year, month in ramadan_months():
            combined.extend(await ctx.timings.fetch_month_timings(year, month, point, RAMADAN_METHOD))
    except TimingsFetchError as exc:
        warn(PAGE, f"failed to fetch calendar ({exc})")
        return
    days = select_ramadan_days(combined, ctx.clock(None).date())
    highlight = next((idx for idx, day in enumerate(days) if day.is_today), None)
    ctx.display.text("ramadan-header", "\t".join(HEADER))
    ctx.display.rows("ramadan-table", [day.row() for day in days], highlight=highlight)
