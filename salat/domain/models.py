from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional

TRACKED_PRAYERS = ("Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha")


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self):
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"latitude out of range: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"longitude out of range: {self.lon}")

    def label(self) -> str:
        return f"{self.lat:.2f}, {self.lon:.2f}"


@dataclass(frozen=True)
class DailyEvent:
    label: str
    hour: int
    minute: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be between 0 and 59, got {self.minute}")

    @classmethod
    def parse(cls, label: str, value: str) -> "DailyEvent":
        # Provider values look like "05:12" or "05:12 (+03)"
        clock = value.strip()[:5]
        try:
            hour_s, minute_s = clock.split(":")
            return cls(label=label, hour=int(hour_s), minute=int(minute_s))
        except ValueError as exc:
            raise ValueError(f"invalid time for {label}: {value!r}") from exc

    @property
    def hhmm(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class Remaining:
    hours: int
    minutes: int
    seconds: int
    total_ms: int

    @property
    def minute_bucket(self) -> int:
        return self.total_ms // 60_000

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class CountdownState:
    next_index: int
    label: str
    target: datetime
    remaining: Remaining
    # True when every event of today has passed and the target is tomorrow's first
    wrapped: bool = False


@dataclass
class DayTimings:
    day: date
    timings: Dict[str, str]
    timezone: Optional[str] = None
    hijri: Optional[str] = None
    raw: Optional[dict] = field(default=None, repr=False)

    def events(self) -> List[DailyEvent]:
        return [DailyEvent.parse(name, self.timings[name]) for name in TRACKED_PRAYERS]

    def clock(self, name: str) -> str:
        return self.timings[name].strip()[:5]
