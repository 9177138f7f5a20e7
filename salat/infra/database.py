from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from salat.infra.db.tables import metadata


def create_counter_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite:///"):
        Path(database_url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(database_url, future=True)
    metadata.create_all(engine)
    return engine
