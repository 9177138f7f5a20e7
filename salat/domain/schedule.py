from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from typing import Sequence, Tuple

from .models import CountdownState, DailyEvent, Remaining

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


def _at(event: DailyEvent, now: datetime, day_offset: int = 0) -> datetime:
    day = now.date() + timedelta(days=day_offset)
    return datetime.combine(day, time(event.hour, event.minute), tzinfo=now.tzinfo)


def find_next_event(events: Sequence[DailyEvent], now: datetime) -> Tuple[int, datetime]:
    """Return (index, target) of the first event strictly later than ``now``.

    Events are scanned in stored order and are expected to be ascending by time
    of day. When every event of today has passed, the first event of the
    following day is returned. An event equal to ``now`` counts as passed.
    """
    for idx, event in enumerate(events):
        candidate = _at(event, now)
        if candidate > now:
            return idx, candidate
    return 0, _at(events[0], now, day_offset=1)


def compute_remaining(target: datetime, now: datetime) -> Remaining:
    if target.tzinfo is not None and now.tzinfo is not None:
        # Wall-clock subtraction inside one zone ignores DST shifts
        diff = target.astimezone(timezone.utc) - now.astimezone(timezone.utc)
    else:
        diff = target - now
    total_ms = max(0, diff // timedelta(milliseconds=1))
    hours = total_ms // MS_PER_HOUR
    minutes = (total_ms % MS_PER_HOUR) // MS_PER_MINUTE
    seconds = (total_ms % MS_PER_MINUTE) // MS_PER_SECOND
    return Remaining(hours=hours, minutes=minutes, seconds=seconds, total_ms=total_ms)


def countdown_state(events: Sequence[DailyEvent], now: datetime) -> CountdownState:
    idx, target = find_next_event(events, now)
    return CountdownState(
        next_index=idx,
        label=events[idx].label,
        target=target,
        remaining=compute_remaining(target, now),
        wrapped=target.date() != now.date(),
    )
