"""Declarative rule constants."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EconomyRules:
    """Income and building pricing constants."""

    starting_building_level: int = 20
    # building price is floor((numerator / denominator) ** level)
    price_numerator: int = 6
    price_denominator: int = 5
    ship_price: int = 1


@dataclass(frozen=True, slots=True)
class FleetRules:
    """Cooldown and presence windows applied after each fleet command."""

    orbit_delay_blocks: int = 10
    landing_delay_blocks: int = 20


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Aggregate of every rule group."""

    economy: EconomyRules = field(default_factory=EconomyRules)
    fleet: FleetRules = field(default_factory=FleetRules)


DEFAULT_RULES = RulesConfig()
