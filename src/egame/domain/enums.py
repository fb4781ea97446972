"""Enumerations shared by the rules engine."""

from __future__ import annotations

from enum import StrEnum


class ViolationKind(StrEnum):
    """Preconditions a rule can refuse to run on."""

    MISSING_SENDER = "missing_sender"
    UNKNOWN_PLAYER = "unknown_player"
    FLEET_NOT_HOME = "fleet_not_home"
    FLEET_BUSY = "fleet_busy"
    FLEET_NOT_PRESENT = "fleet_not_present"
    INVALID_TARGET = "invalid_target"
    INVALID_AMOUNT = "invalid_amount"
