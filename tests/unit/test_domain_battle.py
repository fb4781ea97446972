"""Unit tests for combat resolution and looting."""

from __future__ import annotations

import copy

import pytest

from egame.domain import battle, economy, fleet
from egame.domain.enums import ViolationKind
from egame.domain.errors import RuleViolation
from egame.domain.models import Account, Fleet, PlayerID, World

ALICE = PlayerID("alice")
BOB = PlayerID("bob")


def _world(
    *,
    attacker_size: int,
    defender_size: int,
    defender_balance: int = 50,
    defender_home: bool = True,
    block: int = 10,
) -> World:
    """Alice's fleet is stationed over Bob's territory as of ``block``."""

    return World(
        accounts={
            ALICE: Account(balance=0, last_accrual_block=block, building_level=20),
            BOB: Account(balance=defender_balance, last_accrual_block=block, building_level=20),
        },
        fleets={
            ALICE: Fleet(
                position=BOB,
                size=attacker_size,
                orbiting_time=block,
                landing_time=block + 10,
            ),
            BOB: Fleet(
                position=BOB if defender_home else ALICE,
                size=defender_size,
                orbiting_time=block,
                landing_time=block + 10,
            ),
        },
    )


def _total_balance(world: World) -> int:
    return sum(account.balance for account in world.accounts.values())


@pytest.mark.parametrize(
    ("own", "opponent", "survivors"),
    [
        (10, 5, 10),
        (5, 5, 5),
        (5, 7, 3),
        (5, 10, 0),
        (5, 0, 5),
        (0, 5, 0),
    ],
)
def test_resolve_attrition(own, opponent, survivors):
    assert battle.resolve_attrition(own, opponent) == survivors


def test_transfer_is_capped_by_source_balance():
    world = _world(attacker_size=0, defender_size=0, defender_balance=30)

    moved = battle.transfer(world, BOB, ALICE, 100, 10)

    assert moved == 30
    assert world.accounts[BOB].balance == 0
    assert world.accounts[ALICE].balance == 30


def test_transfer_accrues_both_accounts_first():
    world = _world(attacker_size=0, defender_size=0, defender_balance=0)

    moved = battle.transfer(world, BOB, ALICE, 25, 12)

    assert moved == 25
    assert world.accounts[BOB].balance == 40 - 25
    assert world.accounts[ALICE].balance == 40 + 25
    assert world.accounts[ALICE].last_accrual_block == 12


def test_stronger_attacker_wipes_defender_and_loots():
    world = _world(attacker_size=10, defender_size=4)

    report = battle.battle(world, ALICE, BOB, 10)

    assert report.defender_present is True
    assert (report.attacker_size_after, report.defender_size_after) == (10, 0)
    assert report.looted == 10
    assert world.accounts[ALICE].balance == 10
    assert world.accounts[BOB].balance == 40
    assert world.fleets[ALICE] == Fleet(position=ALICE, size=10, orbiting_time=20, landing_time=30)
    assert world.fleets[BOB] == Fleet(position=BOB, size=0, orbiting_time=20, landing_time=30)


def test_surviving_defender_is_not_looted():
    world = _world(attacker_size=5, defender_size=7)

    report = battle.battle(world, ALICE, BOB, 10)

    assert (report.attacker_size_after, report.defender_size_after) == (3, 7)
    assert report.looted == 0
    assert world.accounts[BOB].balance == 50
    assert world.fleets[ALICE].position == ALICE
    assert world.fleets[ALICE].size == 3


def test_equal_fleets_take_no_losses():
    world = _world(attacker_size=6, defender_size=6)

    report = battle.battle(world, ALICE, BOB, 10)

    assert (report.attacker_size_after, report.defender_size_after) == (6, 6)
    assert report.looted == 0


def test_absent_defender_is_fully_looted():
    world = _world(attacker_size=20, defender_size=100, defender_home=False)

    report = battle.battle(world, ALICE, BOB, 10)

    assert report.defender_present is False
    assert report.looted == 20
    assert world.fleets[ALICE] == Fleet(position=ALICE, size=20, orbiting_time=20, landing_time=30)
    assert world.fleets[BOB].size == 100
    assert world.fleets[BOB].position == ALICE


def test_expired_defender_counts_as_absent():
    world = _world(attacker_size=20, defender_size=100)
    world.fleets[BOB].landing_time = 5

    report = battle.battle(world, ALICE, BOB, 10)

    assert report.defender_present is False
    assert world.fleets[BOB].size == 100


def test_loot_never_exceeds_defender_balance():
    world = _world(attacker_size=10, defender_size=0, defender_balance=3)
    total = _total_balance(world)

    report = battle.battle(world, ALICE, BOB, 10)

    assert report.looted == 3
    assert world.accounts[BOB].balance == 0
    assert _total_balance(world) == total


def test_battle_conserves_currency():
    world = _world(attacker_size=30, defender_size=10, defender_balance=500)
    before = copy.deepcopy(world)

    report = battle.battle(world, ALICE, BOB, 10)

    gained = world.accounts[ALICE].balance - before.accounts[ALICE].balance
    lost = before.accounts[BOB].balance - world.accounts[BOB].balance
    assert gained == lost == report.looted <= report.attacker_size_after


def test_attacker_must_be_stationed_at_defender():
    world = _world(attacker_size=10, defender_size=0)
    world.fleets[ALICE].position = ALICE
    before = copy.deepcopy(world)

    with pytest.raises(RuleViolation) as excinfo:
        battle.battle(world, ALICE, BOB, 10)

    assert excinfo.value.kind == ViolationKind.FLEET_NOT_PRESENT
    assert world == before


def test_attacker_presence_expires():
    world = _world(attacker_size=10, defender_size=0)

    with pytest.raises(RuleViolation) as excinfo:
        battle.battle(world, ALICE, BOB, 21)

    assert excinfo.value.kind == ViolationKind.FLEET_NOT_PRESENT


def test_player_cannot_attack_themselves():
    world = _world(attacker_size=10, defender_size=0)

    with pytest.raises(RuleViolation) as excinfo:
        battle.battle(world, BOB, BOB, 10)

    assert excinfo.value.kind == ViolationKind.INVALID_TARGET


def test_raid_on_idle_player_from_fresh_start():
    world = World()
    economy.start(world, ALICE, 0)
    economy.start(world, BOB, 0)

    assert fleet.summon_fleet(world, ALICE, 100, 5) is True
    fleet.send_fleet(world, ALICE, BOB, 15)
    report = battle.battle(world, ALICE, BOB, 30)

    assert report.looted == 100
    assert report.attacker_size_after == 100
    assert world.accounts[BOB].balance == 30 * 20 - 100
    assert world.accounts[ALICE].balance == 25 * 20 + 100
    assert world.fleets[ALICE] == Fleet(position=ALICE, size=100, orbiting_time=40, landing_time=50)
