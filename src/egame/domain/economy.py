"""Balance accrual, spending and building upgrades."""

from __future__ import annotations

from .enums import ViolationKind
from .errors import RuleViolation, require_player
from .models import Account, Fleet, PlayerID, World
from .rules_config import DEFAULT_RULES, RulesConfig


def start(
    world: World,
    sender: PlayerID,
    block: int,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> None:
    """Register ``sender``, resetting any account and fleet they already had."""

    world.accounts[sender] = Account(
        balance=0,
        last_accrual_block=block,
        building_level=rules.economy.starting_building_level,
    )
    world.fleets[sender] = Fleet(position=sender, size=0, orbiting_time=0, landing_time=0)


def accrue(world: World, sender: PlayerID, block: int) -> int:
    """Credit the income earned since the last accrual and return the balance.

    Income is ``building_level`` per elapsed block.  A block earlier than the
    last accrual adds nothing and leaves the marker where it is.
    """

    require_player(world, sender)
    account = world.accounts[sender]
    if block > account.last_accrual_block:
        elapsed = block - account.last_accrual_block
        account.balance += elapsed * account.building_level
        account.last_accrual_block = block
    return account.balance


def try_spend(world: World, sender: PlayerID, price: int, block: int) -> bool:
    """Accrue, then deduct ``price`` if the balance covers it.

    Returns ``False`` on insufficient funds; the balance then only reflects
    the accrual.
    """

    if price < 0:
        raise RuleViolation(ViolationKind.INVALID_AMOUNT, "price cannot be negative")
    balance = accrue(world, sender, block)
    if price > balance:
        return False
    world.accounts[sender].balance = balance - price
    return True


def building_price(level: int, *, rules: RulesConfig = DEFAULT_RULES) -> int:
    """Price of upgrading a building from ``level``: ``floor((6/5) ** level)``."""

    if level < 0:
        raise RuleViolation(ViolationKind.INVALID_AMOUNT, "level cannot be negative")
    economy = rules.economy
    return economy.price_numerator**level // economy.price_denominator**level


def build(
    world: World,
    sender: PlayerID,
    block: int,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> bool:
    """Upgrade the sender's building by one level if they can afford it."""

    require_player(world, sender)
    account = world.accounts[sender]
    price = building_price(account.building_level, rules=rules)
    if not try_spend(world, sender, price, block):
        return False
    account.building_level += 1
    return True
