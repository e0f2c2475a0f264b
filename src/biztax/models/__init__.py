"""SQLAlchemy ORM models."""

from biztax.models.store import Base, StoreEntry

__all__ = [
    "Base",
    "StoreEntry",
]
