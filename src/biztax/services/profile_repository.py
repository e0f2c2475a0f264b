"""Business profile persistence.

A single profile record lives in a key-value store. There is no schema
versioning: a stored value that no longer parses is reported and ignored.
"""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from biztax.calculators.types import BusinessProfile, InvalidInputError
from biztax.models import StoreEntry

logger = logging.getLogger(__name__)

PROFILE_KEY = "biztax_profile"


class ProfileRepository(Protocol):
    """Storage for the one business profile."""

    async def load(self) -> BusinessProfile | None:
        """Return the stored profile, or None before onboarding."""
        ...

    async def save(self, profile: BusinessProfile) -> None:
        """Replace the stored profile."""
        ...


class InMemoryProfileRepository:
    """Process-local repository, mainly for tests and demos."""

    def __init__(self, profile: BusinessProfile | None = None):
        self._profile = profile

    async def load(self) -> BusinessProfile | None:
        return self._profile

    async def save(self, profile: BusinessProfile) -> None:
        self._profile = profile


class SqlProfileRepository:
    """Keeps the profile as JSON in the kv_store table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], key: str = PROFILE_KEY):
        self.session_factory = session_factory
        self.key = key

    async def load(self) -> BusinessProfile | None:
        async with self.session_factory() as session:
            result = await session.execute(select(StoreEntry).where(StoreEntry.key == self.key))
            entry = result.scalar_one_or_none()

        if entry is None:
            return None

        try:
            return BusinessProfile.from_dict(entry.value)
        except InvalidInputError:
            logger.warning("Stored profile under %r is unreadable; ignoring it", self.key, exc_info=True)
            return None

    async def save(self, profile: BusinessProfile) -> None:
        async with self.session_factory() as session:
            try:
                entry = await session.get(StoreEntry, self.key)
                if entry is None:
                    session.add(StoreEntry(key=self.key, value=profile.to_dict()))
                else:
                    entry.value = profile.to_dict()
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        logger.info("Saved business profile for %s", profile.company_name)
