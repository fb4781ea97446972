"""Errors raised by the rules engine."""

from __future__ import annotations

from .enums import ViolationKind
from .models import PlayerID, World


class RuleViolation(ValueError):
    """A rule was invoked while one of its preconditions did not hold."""

    def __init__(self, kind: ViolationKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": str(self.kind), "message": self.message}


def require_sender(sender: str | None) -> PlayerID:
    """Return ``sender`` as a player id or raise ``MISSING_SENDER``."""

    if sender is None or not sender.strip():
        raise RuleViolation(ViolationKind.MISSING_SENDER, "sender is required")
    return PlayerID(sender)


def require_player(world: World, player_id: str) -> None:
    if not world.is_registered(player_id):
        raise RuleViolation(
            ViolationKind.UNKNOWN_PLAYER, f"player '{player_id}' has not started"
        )
