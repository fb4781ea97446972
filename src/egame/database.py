"""Database engine management for the sql storage backend."""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from egame.config import Settings
from egame.models import Base


def _configure_sqlite_wal(
    dbapi_connection: Any, connection_record: Any  # noqa: ARG001
) -> None:
    """Switch SQLite connections to WAL journaling."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine described by ``settings.database_url``.

    SQLite engines get WAL pragmas applied on every new connection.
    """
    engine = create_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )
    if settings.database_url.startswith("sqlite"):
        event.listen(engine, "connect", _configure_sqlite_wal)
    return engine


def init_db(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    Base.metadata.create_all(bind=engine)


def check_database_health(engine: Engine) -> bool:
    """Return True when a trivial query succeeds."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
