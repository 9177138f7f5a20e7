from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, List, Optional, Protocol, Sequence

from salat.domain.models import CountdownState, DailyEvent
from salat.domain.schedule import countdown_state


class TickHandle(Protocol):
    def cancel(self) -> None:
        ...


class Ticker(Protocol):
    """Source of the periodic trigger that drives a countdown session."""

    def schedule(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        ...


class _RepeatingCall:
    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callable[[], None]) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._timer = loop.call_later(interval, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self._timer = self._loop.call_later(self._interval, self._fire)
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()


class AsyncioTicker:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _RepeatingCall(loop, interval, callback)


class CountdownSession:
    """Live countdown towards the next daily event.

    At most one periodic trigger is active per session: ``start`` cancels the
    previous trigger before scheduling a new one. Each tick publishes the
    current state through ``on_tick``; ``on_render`` is called additionally
    whenever a minute boundary of the remaining time is crossed or the next
    event changes, so the caller can move its highlight.
    """

    def __init__(
        self,
        *,
        on_tick: Callable[[CountdownState], None],
        on_render: Optional[Callable[[CountdownState], None]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        ticker: Optional[Ticker] = None,
        interval: float = 1.0,
    ) -> None:
        self._on_tick = on_tick
        self._on_render = on_render
        self._clock = clock or datetime.now
        self._ticker = ticker or AsyncioTicker()
        self._interval = interval
        self._events: List[DailyEvent] = []
        self._handle: Optional[TickHandle] = None
        self._last_bucket: Optional[int] = None
        self._last_index: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def events(self) -> List[DailyEvent]:
        return list(self._events)

    def start(self, events: Sequence[DailyEvent]) -> None:
        if not events:
            raise ValueError("countdown requires at least one event")
        self.stop()
        self._events = list(events)
        self._last_bucket = None
        self._last_index = None
        self._handle = self._ticker.schedule(self._interval, self.tick)

    replace = start

    def stop(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def tick(self) -> Optional[CountdownState]:
        if not self._events:
            return None
        state = countdown_state(self._events, self._clock())
        self._on_tick(state)
        crossed = self._last_bucket is not None and (
            state.remaining.minute_bucket != self._last_bucket or state.next_index != self._last_index
        )
        self._last_bucket = state.remaining.minute_bucket
        self._last_index = state.next_index
        if crossed and self._on_render is not None:
            self._on_render(state)
        return state
