"""Dataclasses describing the game world."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NewType

PlayerID = NewType("PlayerID", str)


@dataclass(slots=True)
class Account:
    """Currency balance and production building of a player."""

    balance: int
    last_accrual_block: int
    building_level: int


@dataclass(slots=True)
class Fleet:
    """The single fleet owned by a player.

    ``position`` is the player whose territory the fleet occupies or is
    heading to.  The fleet may take a new command once ``orbiting_time`` has
    been reached and counts as present at ``position`` until ``landing_time``.
    """

    position: PlayerID
    size: int
    orbiting_time: int
    landing_time: int


@dataclass(slots=True)
class World:
    """Singleton document holding every player's account and fleet."""

    accounts: dict[PlayerID, Account] = field(default_factory=dict)
    fleets: dict[PlayerID, Fleet] = field(default_factory=dict)

    def is_registered(self, player_id: str) -> bool:
        return player_id in self.accounts and player_id in self.fleets
