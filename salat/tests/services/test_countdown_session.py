import asyncio
from datetime import datetime, timedelta

import pytest

from salat.domain.models import DailyEvent
from salat.services.countdown import AsyncioTicker, CountdownSession
from salat.tests.fakes import FakeClock, FakeTicker

EVENTS = [
    DailyEvent("Fajr", 5, 0),
    DailyEvent("Sunrise", 6, 30),
    DailyEvent("Dhuhr", 12, 15),
    DailyEvent("Asr", 15, 45),
    DailyEvent("Maghrib", 18, 20),
    DailyEvent("Isha", 19, 45),
]


def _session(now: datetime):
    ticks, renders = [], []
    clock = FakeClock(now)
    ticker = FakeTicker()
    session = CountdownSession(on_tick=ticks.append, on_render=renders.append, clock=clock, ticker=ticker)
    return session, clock, ticker, ticks, renders


def test_start_schedules_one_second_trigger():
    session, _, ticker, _, _ = _session(datetime(2026, 3, 1, 12, 16))
    session.start(EVENTS)
    assert session.running
    assert len(ticker.handles) == 1
    assert ticker.handles[0].interval == 1.0


def test_restart_cancels_previous_trigger_exactly_once():
    session, _, ticker, ticks, _ = _session(datetime(2026, 3, 1, 12, 16))
    session.start(EVENTS)
    session.replace(EVENTS[:3])
    first, second = ticker.handles
    assert first.cancel_count == 1
    assert second.cancel_count == 0

    ticker.fire()
    assert len(ticks) == 1
    session.stop()
    session.stop()
    assert first.cancel_count == 1
    assert second.cancel_count == 1
    assert not session.running


def test_tick_publishes_next_event_and_remaining():
    session, _, ticker, ticks, _ = _session(datetime(2026, 3, 1, 12, 16))
    session.start(EVENTS)
    ticker.fire()
    state = ticks[-1]
    assert state.label == "Asr"
    assert state.next_index == 3
    assert str(state.remaining) == "03:29:00"


def test_render_on_minute_boundary_crossing():
    session, clock, ticker, _, renders = _session(datetime(2026, 3, 1, 12, 16))
    session.start(EVENTS)
    ticker.fire()  # 03:29:00
    assert renders == []
    clock.now += timedelta(seconds=1)
    ticker.fire()  # 03:28:59
    assert len(renders) == 1
    clock.now += timedelta(seconds=1)
    ticker.fire()  # 03:28:58
    assert len(renders) == 1


def test_render_when_skipped_seconds_cross_boundary():
    session, clock, ticker, _, renders = _session(datetime(2026, 3, 1, 12, 15, 58))
    session.start(EVENTS)
    ticker.fire()
    clock.now += timedelta(seconds=3)  # clock drift skips the :00 tick
    ticker.fire()
    assert len(renders) == 1


def test_render_when_next_event_changes():
    session, clock, ticker, ticks, renders = _session(datetime(2026, 3, 1, 15, 44, 59, 500_000))
    session.start(EVENTS)
    ticker.fire()
    clock.now += timedelta(seconds=1)
    ticker.fire()
    assert ticks[-1].label == "Maghrib"
    assert renders[-1].next_index == 4


def test_start_requires_events():
    session, _, ticker, _, _ = _session(datetime(2026, 3, 1, 12, 16))
    with pytest.raises(ValueError):
        session.start([])
    assert ticker.handles == []


def test_tick_after_stop_is_noop():
    session, _, _, ticks, _ = _session(datetime(2026, 3, 1, 12, 16))
    assert session.tick() is None
    assert ticks == []


def test_asyncio_ticker_stops_firing_after_cancel():
    ticks = []

    async def scenario():
        session = CountdownSession(on_tick=ticks.append, ticker=AsyncioTicker(), interval=0.01)
        session.start(EVENTS)
        await asyncio.sleep(0.1)
        session.stop()
        seen = len(ticks)
        await asyncio.sleep(0.05)
        return seen

    seen = asyncio.run(scenario())
    assert seen >= 2
    assert len(ticks) == seen
