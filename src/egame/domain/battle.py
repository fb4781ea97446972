"""Fleet combat and looting rules."""

from __future__ import annotations

from dataclasses import dataclass

from .economy import accrue
from .enums import ViolationKind
from .errors import RuleViolation, require_player
from .fleet import is_present, reset_windows
from .models import PlayerID, World
from .rules_config import DEFAULT_RULES, RulesConfig


@dataclass(slots=True)
class BattleReport:
    """Summary of a resolved attack."""

    attacker: PlayerID
    defender: PlayerID
    defender_present: bool
    attacker_size_before: int
    attacker_size_after: int
    defender_size_before: int
    defender_size_after: int
    looted: int


def resolve_attrition(own_size: int, opponent_size: int) -> int:
    """Survivors of a fleet of ``own_size`` facing ``opponent_size`` ships.

    The larger (or equal) side takes no losses; the smaller side loses one
    ship per ship the opponent has in excess of it, down to zero.
    """

    return max(0, min(own_size, 2 * own_size - opponent_size))


def transfer(
    world: World,
    source: PlayerID,
    destination: PlayerID,
    cap: int,
    block: int,
) -> int:
    """Move up to ``cap`` currency from ``source`` to ``destination``.

    Both balances are accrued first.  Returns the amount moved, which is
    bounded by what the source actually holds.
    """

    available = accrue(world, source, block)
    accrue(world, destination, block)
    amount = min(available, max(cap, 0))
    world.accounts[source].balance -= amount
    world.accounts[destination].balance += amount
    return amount


def battle(
    world: World,
    attacker: PlayerID,
    defender: PlayerID,
    block: int,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> BattleReport:
    """Resolve the attacker's fleet raid on the defender's territory."""

    require_player(world, attacker)
    require_player(world, defender)
    if attacker == defender:
        raise RuleViolation(ViolationKind.INVALID_TARGET, "a player cannot attack themselves")

    attacking = world.fleets[attacker]
    if not is_present(attacking, defender, block):
        raise RuleViolation(
            ViolationKind.FLEET_NOT_PRESENT,
            f"fleet of '{attacker}' is not stationed at '{defender}'",
        )
    defending = world.fleets[defender]
    attacker_before = attacking.size
    defender_before = defending.size

    if not is_present(defending, defender, block):
        looted = transfer(world, defender, attacker, attacking.size, block)
        attacking.position = attacker
        reset_windows(attacking, block, rules)
        return BattleReport(
            attacker=attacker,
            defender=defender,
            defender_present=False,
            attacker_size_before=attacker_before,
            attacker_size_after=attacker_before,
            defender_size_before=defender_before,
            defender_size_after=defender_before,
            looted=looted,
        )

    attacker_after = resolve_attrition(attacker_before, defender_before)
    defender_after = resolve_attrition(defender_before, attacker_before)
    looted = 0
    if defender_after == 0:
        looted = transfer(world, defender, attacker, attacker_after, block)

    for owner, fleet, size in (
        (attacker, attacking, attacker_after),
        (defender, defending, defender_after),
    ):
        fleet.position = owner
        fleet.size = size
        reset_windows(fleet, block, rules)

    return BattleReport(
        attacker=attacker,
        defender=defender,
        defender_present=True,
        attacker_size_before=attacker_before,
        attacker_size_after=attacker_after,
        defender_size_before=defender_before,
        defender_size_after=defender_after,
        looted=looted,
    )
