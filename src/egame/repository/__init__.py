"""Storage backends for the world document."""

from egame.repository.errors import WorldNotFoundError
from egame.repository.json_store import JsonWorldRepository
from egame.repository.sql_store import SqlWorldRepository

__all__ = ["JsonWorldRepository", "SqlWorldRepository", "WorldNotFoundError"]
