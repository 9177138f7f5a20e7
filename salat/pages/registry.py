from __future__ import annotations

from salat.hub.page_registry import PageRegistry

from .prayer import init_prayer
from .qibla import init_qibla
from .ramadan import init_ramadan
from .tasbeeh import init_tasbeeh


def default_registry() -> PageRegistry:
    registry = PageRegistry()
    registry.register("prayer", init_prayer)
    registry.register("ramadan", init_ramadan)
    registry.register("qibla", init_qibla)
    registry.register("tasbeeh", init_tasbeeh)
    return registry


async def run_page(registry: PageRegistry, name: str, ctx) -> None:
    initializer = registry.get(name)
    try:
        await initializer(ctx)
    finally:
        ctx.close()
