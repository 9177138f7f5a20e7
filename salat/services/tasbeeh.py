from __future__ import annotations

from typing import Protocol


class CounterStore(Protocol):
    def get_count(self) -> int:
        ...

    def set_count(self, value: int) -> None:
        ...


class MemoryCounterStore:
    def __init__(self, value: int = 0) -> None:
        self.value = value

    def get_count(self) -> int:
        return self.value

    def set_count(self, value: int) -> None:
        self.value = value


class TasbeehCounter:
    def __init__(self, store: CounterStore) -> None:
        self._store = store
        self._count = max(0, store.get_count())

    @property
    def count(self) -> int:
        return self._count

    def increment(self, by: int = 1) -> int:
        if by < 1:
            raise ValueError("increment must be >= 1")
        return self._update(self._count + by)

    def reset(self) -> int:
        return self._update(0)

    def _update(self, value: int) -> int:
        self._count = value
        self._store.set_count(value)
        return value
