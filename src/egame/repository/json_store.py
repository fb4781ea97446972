"""JSON-file repository for the world document."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter

from egame.domain.models import World
from egame.repository.errors import WorldNotFoundError

logger = logging.getLogger(__name__)

WORLD_ADAPTER: TypeAdapter[World] = TypeAdapter(World)


class JsonWorldRepository:
    """Persist the world as a single JSON snapshot on disk."""

    FILENAME = "world.json"

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self.base_path / self.FILENAME

    def load(self) -> World:
        """Load the stored world snapshot."""

        try:
            data = self.path.read_bytes()
        except FileNotFoundError as exc:
            raise WorldNotFoundError(f"no world stored in {self.base_path}") from exc
        return WORLD_ADAPTER.validate_json(data)

    def replace(self, world: World) -> None:
        """Write the world to a temporary file and rename it over the snapshot."""

        payload = WORLD_ADAPTER.dump_json(world, indent=2)
        staging = self.base_path / f"{self.FILENAME}.tmp"
        staging.write_bytes(payload)
        staging.replace(self.path)

    def exists(self) -> bool:
        return self.path.exists()

    def ensure_seeded(self) -> bool:
        if self.exists():
            return False
        self.replace(World())
        logger.info("seeded empty world at %s", self.path)
        return True
