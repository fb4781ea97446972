"""Protocols decoupling the service layer from storage backends."""

from egame.interfaces.repository import WorldRepository

__all__ = ["WorldRepository"]
