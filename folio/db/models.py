"""SQLAlchemy ORM models."""

from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Get current UTC timestamp."""
    return datetime.utcnow()


class KVEntry(Base):
    """A single key-value pair.

    Values are opaque JSON documents; the application addresses rows only
    by exact key or by key prefix.
    """

    __tablename__ = "kv_store"

    key = Column(String(255), primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<KVEntry(key={self.key})>"
