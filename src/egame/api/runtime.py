"""Runtime primitives backing the egame HTTP API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import asdict
from typing import TypeVar

from sqlalchemy.engine import Engine

from egame.clock import Clock
from egame.config import Settings, get_settings
from egame.database import create_db_engine, init_db
from egame.domain import battle as battle_rules
from egame.domain import economy, fleet
from egame.domain.errors import RuleViolation, require_sender
from egame.domain.models import PlayerID, World
from egame.domain.rules_config import DEFAULT_RULES, RulesConfig
from egame.interfaces import WorldRepository
from egame.repository import JsonWorldRepository, SqlWorldRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[World, PlayerID, int], T]


class WorldService:
    """Serialized load, mutate and persist cycle around the rules engine.

    Every call holds one lock from loading the world until the mutated world
    has been written back, so concurrent requests never interleave.
    """

    def __init__(
        self,
        repository: WorldRepository,
        *,
        clock: Callable[[], int],
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._rules = rules
        self._lock = asyncio.Lock()

    def seed(self) -> bool:
        """Create the empty world document unless one already exists."""

        return self._repository.ensure_seeded()

    async def snapshot(self) -> World:
        """Return the stored world without accruing anything."""

        async with self._lock:
            return await asyncio.to_thread(self._repository.load)

    def building_price(self, level: int) -> int:
        return economy.building_price(level, rules=self._rules)

    async def start(self, sender: str | None) -> World:
        world, _ = await self._transact(
            "start",
            sender,
            lambda w, player, block: economy.start(w, player, block, rules=self._rules),
        )
        return world

    async def build(self, sender: str | None) -> World:
        world, _ = await self._transact(
            "build",
            sender,
            lambda w, player, block: economy.build(w, player, block, rules=self._rules),
        )
        return world

    async def update_balance(self, sender: str | None) -> World:
        world, _ = await self._transact("update_balance", sender, economy.accrue)
        return world

    async def summon_fleet(self, sender: str | None, size: int) -> World:
        world, _ = await self._transact(
            "summon_fleet",
            sender,
            lambda w, player, block: fleet.summon_fleet(
                w, player, size, block, rules=self._rules
            ),
        )
        return world

    async def send_fleet(self, sender: str | None, target: str) -> World:
        world, _ = await self._transact(
            "send_fleet",
            sender,
            lambda w, player, block: fleet.send_fleet(
                w, player, PlayerID(target), block, rules=self._rules
            ),
        )
        return world

    async def battle(self, sender: str | None, attacker: str, defender: str) -> World:
        world, report = await self._transact(
            "battle",
            sender,
            lambda w, _player, block: battle_rules.battle(
                w, PlayerID(attacker), PlayerID(defender), block, rules=self._rules
            ),
        )
        logger.info(
            "battle %s -> %s: present=%s sizes %d/%d -> %d/%d, looted %d",
            report.attacker,
            report.defender,
            report.defender_present,
            report.attacker_size_before,
            report.defender_size_before,
            report.attacker_size_after,
            report.defender_size_after,
            report.looted,
        )
        return world

    async def _transact(
        self, name: str, sender: str | None, operation: Operation[T]
    ) -> tuple[World, T]:
        player = require_sender(sender)
        async with self._lock:
            world = await asyncio.to_thread(self._repository.load)
            block = self._clock()
            try:
                result = operation(world, player, block)
            except RuleViolation as exc:
                logger.warning("%s by '%s' rejected: %s", name, player, exc.kind)
                raise
            await asyncio.to_thread(self._repository.replace, world)
        logger.debug("%s by '%s' applied at block %d", name, player, block)
        return world, result

    @staticmethod
    def to_world_dict(world: World) -> dict[str, object]:
        """Return a JSON-friendly representation of the world."""

        return {
            "accounts": {
                str(player): asdict(account) for player, account in world.accounts.items()
            },
            "fleets": {str(player): asdict(item) for player, item in world.fleets.items()},
        }


def build_repository(
    settings: Settings,
) -> tuple[WorldRepository, Engine | None]:
    """Instantiate the repository selected by ``settings.storage_backend``."""

    if settings.storage_backend == "sql":
        engine = create_db_engine(settings)
        init_db(engine)
        return SqlWorldRepository(engine), engine
    return JsonWorldRepository(settings.data_dir), None


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        rules: RulesConfig = DEFAULT_RULES,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rules = rules
        self.repository, self._engine = build_repository(self.settings)
        self.clock = clock or Clock(self.settings.block_seconds)
        self.worlds = WorldService(self.repository, clock=self.clock, rules=rules)

    def startup(self) -> None:
        if self.worlds.seed():
            logger.info("initialized empty world (%s backend)", self.settings.storage_backend)

    async def shutdown(self) -> None:
        if self._engine is not None:
            self._engine.dispose()


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
