from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Tuple

from .models import DayTimings, TRACKED_PRAYERS

# Subject to moon sighting
RAMADAN_START = date(2026, 2, 19)
RAMADAN_END = date(2026, 3, 20)
# Umm al-Qura
RAMADAN_METHOD = 4


@dataclass(frozen=True)
class RamadanDay:
    day: date
    times: Tuple[str, ...]
    is_today: bool = False

    def row(self) -> List[str]:
        return [f"{self.day.day} {self.day.strftime('%b')}", *self.times]


def ramadan_months(start: date = RAMADAN_START, end: date = RAMADAN_END) -> List[Tuple[int, int]]:
    months: List[Tuple[int, int]] = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        months.append((year, month))
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return months


def select_ramadan_days(
    days: Iterable[DayTimings],
    today: date,
    *,
    start: date = RAMADAN_START,
    end: date = RAMADAN_END,
) -> List[RamadanDay]:
    selected: List[RamadanDay] = []
    for record in days:
        if record.day < start or record.day > end:
            continue
        selected.append(
            RamadanDay(
                day=record.day,
                times=tuple(record.clock(name) for name in TRACKED_PRAYERS),
                is_today=record.day == today,
            )
        )
    return selected
