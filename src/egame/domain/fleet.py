"""Fleet summoning and movement."""

from __future__ import annotations

from .economy import try_spend
from .enums import ViolationKind
from .errors import RuleViolation, require_player
from .models import Fleet, PlayerID, World
from .rules_config import DEFAULT_RULES, RulesConfig


def is_idle(fleet: Fleet, block: int) -> bool:
    """Whether the fleet may be given a new command at ``block``."""

    return fleet.orbiting_time <= block


def is_present(fleet: Fleet, position: PlayerID, block: int) -> bool:
    """Whether the fleet counts as stationed at ``position`` at ``block``."""

    return fleet.position == position and fleet.landing_time >= block


def reset_windows(fleet: Fleet, block: int, rules: RulesConfig = DEFAULT_RULES) -> None:
    fleet.orbiting_time = block + rules.fleet.orbit_delay_blocks
    fleet.landing_time = block + rules.fleet.landing_delay_blocks


def _require_idle(fleet: Fleet, sender: PlayerID, block: int) -> None:
    if not is_idle(fleet, block):
        raise RuleViolation(
            ViolationKind.FLEET_BUSY,
            f"fleet of '{sender}' is busy until block {fleet.orbiting_time}",
        )


def summon_fleet(
    world: World,
    sender: PlayerID,
    size: int,
    block: int,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> bool:
    """Buy ``size`` additional ships for the sender's fleet at home.

    Returns ``False`` when the sender cannot afford the ships, in which case
    the fleet is left untouched.
    """

    require_player(world, sender)
    fleet = world.fleets[sender]
    if fleet.position != sender:
        raise RuleViolation(
            ViolationKind.FLEET_NOT_HOME,
            f"fleet of '{sender}' is stationed at '{fleet.position}'",
        )
    _require_idle(fleet, sender, block)
    if size <= 0:
        raise RuleViolation(ViolationKind.INVALID_AMOUNT, "fleet size must be positive")

    if not try_spend(world, sender, size * rules.economy.ship_price, block):
        return False
    fleet.size += size
    reset_windows(fleet, block, rules)
    return True


def send_fleet(
    world: World,
    sender: PlayerID,
    target: PlayerID,
    block: int,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> None:
    """Move the sender's fleet to ``target``; sending it to oneself recalls it."""

    require_player(world, sender)
    require_player(world, target)
    fleet = world.fleets[sender]
    _require_idle(fleet, sender, block)

    fleet.position = target
    reset_windows(fleet, block, rules)
