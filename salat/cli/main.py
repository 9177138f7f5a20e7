from __future__ import annotations

import asyncio
from typing import List, Optional

import typer

from salat.config import Settings, get_settings
from salat.domain.models import GeoPoint
from salat.infra.aladhan_client import AladhanClient
from salat.infra.bigdatacloud_client import BigDataCloudClient
from salat.infra.database import create_counter_engine
from salat.infra.db.counter_repository import CounterRepository
from salat.pages.context import PageContext
from salat.pages.display import ConsoleDisplay
from salat.pages.registry import default_registry, run_page
from salat.providers.geocode.bigdatacloud import BigDataCloudGeocoder
from salat.providers.location.ip_lookup import IpLocationSource
from salat.providers.location.static import StaticLocationSource
from salat.providers.orientation.sensors import FixedHeadingSensor, NoOrientationSensor
from salat.providers.timings.aladhan import AladhanTimingsProvider

app = typer.Typer(help="Prayer times, Ramadan schedule, Qibla direction and tasbeeh counter")


def _point(lat: Optional[float], lon: Optional[float]) -> Optional[GeoPoint]:
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        raise typer.BadParameter("--lat and --lon must be given together")
    try:
        return GeoPoint(lat=lat, lon=lon)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def build_context(
    settings: Settings,
    *,
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    seconds: Optional[float] = None,
    heading: Optional[float] = None,
    alpha: Optional[float] = None,
    actions: Optional[List[str]] = None,
) -> PageContext:
    point = _point(lat, lon)
    if point is None and settings.has_static_location:
        point = GeoPoint(lat=settings.lat, lon=settings.lon)
    location = StaticLocationSource(point) if point is not None else IpLocationSource(timeout=settings.http_timeout)

    if heading is None:
        heading = settings.heading
    if alpha is not None:
        orientation = FixedHeadingSensor.from_alpha(alpha)
    elif heading is not None:
        orientation = FixedHeadingSensor(heading)
    else:
        orientation = NoOrientationSensor()

    return PageContext(
        settings=settings,
        display=ConsoleDisplay(),
        location=location,
        geocoder=BigDataCloudGeocoder(BigDataCloudClient(timeout=settings.http_timeout)),
        timings=AladhanTimingsProvider(AladhanClient(timeout=settings.http_timeout)),
        counter_store=CounterRepository(create_counter_engine(settings.database_url)),
        orientation=orientation,
        lifetime=seconds,
        actions=list(actions or []),
    )


def _settings(method: Optional[int]) -> Settings:
    settings = get_settings()
    if method is None:
        return settings
    return Settings(
        database_url=settings.database_url,
        lat=settings.lat,
        lon=settings.lon,
        method=method,
        http_timeout=settings.http_timeout,
        heading=settings.heading,
    )


def _run(page: str, ctx: PageContext) -> None:
    registry = default_registry()
    if page not in registry:
        raise typer.BadParameter(f"unknown page '{page}'; choose from {', '.join(registry.names())}")
    try:
        asyncio.run(run_page(registry, page, ctx))
    except KeyboardInterrupt:
        typer.echo("")


@app.command("show")
def cli_show(
    page: str = typer.Argument(..., help="prayer, ramadan, qibla or tasbeeh"),
    lat: Optional[float] = typer.Option(None, help="Latitude (IP lookup when omitted)"),
    lon: Optional[float] = typer.Option(None, help="Longitude"),
    method: Optional[int] = typer.Option(None, help="Calculation method id"),
    seconds: Optional[float] = typer.Option(None, help="Seconds to keep the live countdown"),
):
    """Open a page by its identifier."""
    ctx = build_context(_settings(method), lat=lat, lon=lon, seconds=seconds)
    _run(page, ctx)


@app.command("prayer")
def cli_prayer(
    lat: Optional[float] = typer.Option(None, help="Latitude"),
    lon: Optional[float] = typer.Option(None, help="Longitude"),
    method: Optional[int] = typer.Option(None, help="Calculation method id"),
    seconds: Optional[float] = typer.Option(None, help="Seconds to keep the live countdown"),
):
    ctx = build_context(_settings(method), lat=lat, lon=lon, seconds=seconds)
    _run("prayer", ctx)


@app.command("ramadan")
def cli_ramadan(
    lat: Optional[float] = typer.Option(None, help="Latitude"),
    lon: Optional[float] = typer.Option(None, help="Longitude"),
):
    ctx = build_context(_settings(None), lat=lat, lon=lon)
    _run("ramadan", ctx)


@app.command("qibla")
def cli_qibla(
    lat: Optional[float] = typer.Option(None, help="Latitude"),
    lon: Optional[float] = typer.Option(None, help="Longitude"),
    heading: Optional[float] = typer.Option(None, help="Device compass heading in degrees"),
    alpha: Optional[float] = typer.Option(None, help="Raw orientation alpha angle"),
):
    ctx = build_context(_settings(None), lat=lat, lon=lon, heading=heading, alpha=alpha)
    _run("qibla", ctx)


@app.command("tasbeeh")
def cli_tasbeeh(
    increment: int = typer.Option(0, help="Add N to the counter"),
    reset: bool = typer.Option(False, help="Reset the counter to zero"),
):
    if increment < 0:
        raise typer.BadParameter("increment must be >= 0")
    actions = []
    if reset:
        actions.append("reset")
    if increment:
        actions.append(f"increment:{increment}")
    ctx = build_context(_settings(None), actions=actions)
    _run("tasbeeh", ctx)


@app.command("init-db")
def cli_init_db():
    """Create the counter database."""
    settings = get_settings()
    create_counter_engine(settings.database_url)
    typer.echo(f"[init-db] database ready at {settings.database_url}")


if __name__ == "__main__":
    app()
