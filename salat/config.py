from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

DEFAULT_METHOD = 2
DEFAULT_HTTP_TIMEOUT = 10.0


def _default_database_url() -> str:
    return f"sqlite:///{Path.home() / '.salat' / 'salat.db'}"


def _int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {value!r}") from exc


def _float(name: str, default: float) -> float:
    value = _optional_float(name)
    return default if value is None else value


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class Settings:
    database_url: str
    lat: Optional[float] = None
    lon: Optional[float] = None
    method: int = DEFAULT_METHOD
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    heading: Optional[float] = None

    @property
    def has_static_location(self) -> bool:
        return self.lat is not None and self.lon is not None


def load_settings() -> Settings:
    return Settings(
        database_url=os.getenv("SALAT_DATABASE_URL") or _default_database_url(),
        lat=_optional_float("SALAT_LAT"),
        lon=_optional_float("SALAT_LON"),
        method=_int("SALAT_METHOD", DEFAULT_METHOD),
        http_timeout=_float("SALAT_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        heading=_optional_float("SALAT_HEADING"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
