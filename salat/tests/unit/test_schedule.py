from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from salat.domain.models import DailyEvent, DayTimings
from salat.domain.schedule import compute_remaining, countdown_state, find_next_event

EVENTS = [
    DailyEvent("Fajr", 5, 0),
    DailyEvent("Sunrise", 6, 30),
    DailyEvent("Dhuhr", 12, 15),
    DailyEvent("Asr", 15, 45),
    DailyEvent("Maghrib", 18, 20),
    DailyEvent("Isha", 19, 45),
]


def test_next_event_midday():
    idx, target = find_next_event(EVENTS, datetime(2026, 3, 1, 12, 16))
    assert EVENTS[idx].label == "Asr"
    assert target == datetime(2026, 3, 1, 15, 45)


def test_next_event_wraps_to_tomorrow():
    idx, target = find_next_event(EVENTS, datetime(2026, 3, 1, 23, 59, 59))
    assert idx == 0
    assert target == datetime(2026, 3, 2, 5, 0)


def test_wrap_crosses_month_end():
    idx, target = find_next_event(EVENTS, datetime(2026, 2, 28, 21, 0))
    assert idx == 0
    assert target == datetime(2026, 3, 1, 5, 0)


def test_event_at_now_counts_as_passed():
    idx, target = find_next_event(EVENTS, datetime(2026, 3, 1, 12, 15))
    assert EVENTS[idx].label == "Asr"
    idx, _ = find_next_event(EVENTS, datetime(2026, 3, 1, 12, 14, 59))
    assert EVENTS[idx].label == "Dhuhr"


def test_before_first_event_selects_it_today():
    idx, target = find_next_event(EVENTS, datetime(2026, 3, 1, 0, 1))
    assert idx == 0
    assert target == datetime(2026, 3, 1, 5, 0)


def test_target_keeps_timezone():
    tz = ZoneInfo("Asia/Riyadh")
    _, target = find_next_event(EVENTS, datetime(2026, 3, 1, 12, 16, tzinfo=tz))
    assert target.tzinfo is tz


def test_remaining_formats_hours_minutes_seconds():
    now = datetime(2026, 3, 1, 10, 0)
    remaining = compute_remaining(now + timedelta(milliseconds=3_661_000), now)
    assert str(remaining) == "01:01:01"
    assert remaining.total_ms == 3_661_000


def test_remaining_floors_milliseconds():
    now = datetime(2026, 3, 1, 10, 0)
    remaining = compute_remaining(now + timedelta(milliseconds=59_999), now)
    assert str(remaining) == "00:00:59"
    assert remaining.minute_bucket == 0


def test_remaining_never_negative():
    now = datetime(2026, 3, 1, 10, 0)
    assert str(compute_remaining(now - timedelta(seconds=5), now)) == "00:00:00"


def test_remaining_over_dst_change_uses_elapsed_time():
    london = ZoneInfo("Europe/London")
    now = datetime(2026, 3, 29, 0, 30, tzinfo=london)
    target = datetime(2026, 3, 29, 5, 0, tzinfo=london)
    assert str(compute_remaining(target, now)) == "03:30:00"


def test_countdown_state_marks_wrap():
    state = countdown_state(EVENTS, datetime(2026, 3, 1, 20, 0))
    assert state.label == "Fajr"
    assert state.wrapped is True
    assert str(state.remaining) == "09:00:00"
    state = countdown_state(EVENTS, datetime(2026, 3, 1, 12, 16))
    assert state.wrapped is False


def test_daily_event_parse_strips_suffix():
    event = DailyEvent.parse("Fajr", "05:12 (+03)")
    assert (event.hour, event.minute) == (5, 12)
    assert event.hhmm == "05:12"
    with pytest.raises(ValueError):
        DailyEvent.parse("Isha", "late")
    with pytest.raises(ValueError):
        DailyEvent("Bad", 24, 0)


def test_day_timings_events_in_prayer_order():
    day = DayTimings(
        day=datetime(2026, 3, 1).date(),
        timings={
            "Isha": "19:45 (AST)",
            "Fajr": "05:00 (AST)",
            "Maghrib": "18:20",
            "Dhuhr": "12:15",
            "Sunrise": "06:30",
            "Asr": "15:45",
            "Midnight": "00:30",
        },
    )
    assert [e.label for e in day.events()] == [e.label for e in EVENTS]
    assert day.clock("Isha") == "19:45"
