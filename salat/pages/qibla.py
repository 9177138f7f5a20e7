from __future__ import annotations

from salat.domain.compass import arrow_rotation
from salat.domain.geodesy import qibla_bearing, qibla_distance_km
from salat.providers.orientation.sensors import detect_orientation

from .context import PageContext, show_location

PAGE = "qibla"


async def init_qibla(ctx: PageContext) -> None:
    point = await show_location(ctx, "qibla-location", PAGE)
    if point is None:
        return
    bearing = qibla_bearing(point)
    distance = qibla_distance_km(point)
    info = f"Direction: {bearing:.1f}° · Distance: {distance:.0f} km"

    capability = await detect_orientation(ctx.orientation)
    if capability.note:
        info += f" · {capability.note}"
    ctx.display.text("qibla-info", info)

    if capability.granted and ctx.orientation is not None:
        heading = ctx.orientation.heading()
        if heading is not None:
            ctx.display.text("compass-arrow", f"rotate({arrow_rotation(bearing, heading):.1f}deg)")
            return
    ctx.display.text("compass-arrow", f"rotate({bearing:.1f}deg)")
