from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Engine

from .tables import counters_table


class CounterRepository:
    """Persistent counter store backed by the ``counters`` table."""

    def __init__(self, engine: Engine, name: str = "tasbeeh"):
        if engine is None:
            raise ValueError("engine is required")
        self.engine = engine
        self.name = name

    def get_count(self) -> int:
        with self.engine.begin() as conn:
            value = conn.execute(
                select(counters_table.c.value).where(counters_table.c.name == self.name)
            ).scalar_one_or_none()
        if value is None or value < 0:
            return 0
        return int(value)

    def set_count(self, value: int) -> None:
        now = datetime.now(timezone.utc)
        with self.engine.begin() as conn:
            existing = conn.execute(
                select(counters_table.c.name).where(counters_table.c.name == self.name)
            ).scalar_one_or_none()
            if existing:
                conn.execute(
                    update(counters_table)
                    .where(counters_table.c.name == self.name)
                    .values(value=int(value), updated_at=now)
                )
            else:
                conn.execute(
                    insert(counters_table).values(name=self.name, value=int(value), updated_at=now)
                )
