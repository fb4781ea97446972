"""SQLAlchemy repository storing the world as a single JSON row."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter
from sqlalchemy import delete, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from egame.domain.models import World
from egame.models import WorldDocument
from egame.repository.errors import WorldNotFoundError

logger = logging.getLogger(__name__)

WORLD_ADAPTER: TypeAdapter[World] = TypeAdapter(World)


class SqlWorldRepository:
    """Persist the world in the ``world_documents`` table.

    The table never holds more than one row: ``replace`` deletes every row and
    inserts the new document inside one transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self._sessions: sessionmaker[Session] = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )

    def load(self) -> World:
        with self._sessions() as session:
            document = session.scalars(
                select(WorldDocument).order_by(WorldDocument.id).limit(1)
            ).first()
            if document is None:
                raise WorldNotFoundError("no world document stored")
            return WORLD_ADAPTER.validate_json(document.payload)

    def replace(self, world: World) -> None:
        payload = WORLD_ADAPTER.dump_json(world).decode("utf-8")
        with self._sessions.begin() as session:
            session.execute(delete(WorldDocument))
            session.add(WorldDocument(payload=payload))

    def exists(self) -> bool:
        with self._sessions() as session:
            count = session.execute(select(func.count()).select_from(WorldDocument)).scalar()
            return bool(count)

    def ensure_seeded(self) -> bool:
        if self.exists():
            return False
        self.replace(World())
        logger.info("seeded empty world document")
        return True
