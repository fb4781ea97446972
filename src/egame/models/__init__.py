"""SQLAlchemy models backing the sql storage backend."""

from .base import Base, TimestampMixin
from .world import WorldDocument

__all__ = ["Base", "TimestampMixin", "WorldDocument"]
