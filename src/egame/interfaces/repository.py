"""Protocol for world persistence.

Repositories store exactly one world document.  The service layer only
relies on these four operations, so the JSON and SQL backends can be swapped
through configuration.
"""

from __future__ import annotations

from typing import Protocol

from egame.domain.models import World


class WorldRepository(Protocol):
    """Single-document store for the game world."""

    def load(self) -> World:
        """Return the stored world or raise ``WorldNotFoundError``."""
        ...

    def replace(self, world: World) -> None:
        """Atomically discard the stored world and store ``world``."""
        ...

    def exists(self) -> bool:
        """Whether a world document is currently stored."""
        ...

    def ensure_seeded(self) -> bool:
        """Store an empty world if none exists; return whether one was created."""
        ...
