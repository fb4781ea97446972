"""Table holding the serialized world document."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class WorldDocument(Base, TimestampMixin):
    """Single-row table with the JSON-encoded world."""

    __tablename__ = "world_documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
