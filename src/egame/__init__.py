"""Clock-driven economy and fleet combat game server."""

__version__ = "0.1.0"
