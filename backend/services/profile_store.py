"""Persistence port used by the profile populator, plus its SQLAlchemy adapter.

The populator checks for an existing row by exact name before inserting. That
check and the insert are not atomic, so two concurrent populations for the
same user can both see "absent". The per-user unique constraints on the
tables are the real guarantee: a unique violation on insert is treated as a
skipped duplicate rather than an error.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.tables import StudentGoal, StudentInterest, StudentProfile, StudentSkill
from services.errors import PersistenceError

logger = logging.getLogger(__name__)

COLLECTIONS = ("skills", "goals", "interests")


class ProfileStore(ABC):
    """Storage operations the profile populator depends on."""

    @abstractmethod
    async def find_profile_fields(self, user_id: int) -> dict[str, Any] | None:
        """Return the user's profile fields, or None if there is no profile."""

    @abstractmethod
    async def update_profile_fields(self, user_id: int, fields: dict[str, Any]) -> None:
        """Apply a partial update to the user's profile."""

    @abstractmethod
    async def exists_by_name(self, collection: str, user_id: int, name: str) -> bool:
        """Exact, case-sensitive name (or goal title) lookup."""

    @abstractmethod
    async def insert(self, collection: str, user_id: int, record: dict[str, Any]) -> bool:
        """Insert a record; returns False if it already existed."""


# collection -> (table, name column, record key -> column)
_TABLES = {
    "skills": (
        StudentSkill,
        StudentSkill.skill_name,
        {"name": "skill_name", "category": "category", "proficiency_level": "proficiency_level"},
    ),
    "goals": (
        StudentGoal,
        StudentGoal.title,
        {
            "title": "title",
            "description": "description",
            "type": "goal_type",
            "category": "category",
            "priority": "priority",
        },
    ),
    "interests": (
        StudentInterest,
        StudentInterest.interest_name,
        {"name": "interest_name", "category": "category", "level": "level_of_interest"},
    ),
}


def _table_for(collection: str):
    try:
        return _TABLES[collection]
    except KeyError:
        raise ValueError(f"Unknown collection: {collection!r} (expected one of {COLLECTIONS})") from None


class SqlProfileStore(ProfileStore):
    """ProfileStore backed by an AsyncSession. The caller owns the transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_profile(self, user_id: int) -> StudentProfile | None:
        result = await self.session.execute(
            select(StudentProfile).where(StudentProfile.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def find_profile_fields(self, user_id: int) -> dict[str, Any] | None:
        try:
            profile = await self._get_profile(user_id)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to load profile for user {user_id}") from e
        if profile is None:
            return None
        return {
            "year_level": profile.year_level,
            "major_program": profile.major_program,
            "updated_at": profile.updated_at,
        }

    async def update_profile_fields(self, user_id: int, fields: dict[str, Any]) -> None:
        """Apply a partial update, creating the profile row on first use."""
        try:
            profile = await self._get_profile(user_id)
            if profile is None:
                profile = StudentProfile(user_id=user_id)
                self.session.add(profile)
            for key in ("year_level", "major_program"):
                if key in fields:
                    setattr(profile, key, fields[key])
            profile.updated_at = datetime.now(timezone.utc)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to update profile for user {user_id}") from e

    async def exists_by_name(self, collection: str, user_id: int, name: str) -> bool:
        table, name_column, _ = _table_for(collection)
        try:
            result = await self.session.execute(
                select(table.id).where(table.user_id == user_id, name_column == name).limit(1)
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to look up {collection} for user {user_id}") from e
        return result.first() is not None

    async def insert(self, collection: str, user_id: int, record: dict[str, Any]) -> bool:
        table, _, columns = _table_for(collection)
        row = table(user_id=user_id, **{column: record[key] for key, column in columns.items()})
        try:
            async with self.session.begin_nested():
                self.session.add(row)
        except IntegrityError:
            logger.warning("Skipped duplicate %s row for user %s (concurrent insert)", collection, user_id)
            return False
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to insert into {collection} for user {user_id}") from e
        return True

    async def list_collection(self, collection: str, user_id: int) -> list[dict[str, Any]]:
        """Return a user's rows for a collection, keyed like the parser's records."""
        table, _, columns = _table_for(collection)
        try:
            result = await self.session.execute(
                select(table).where(table.user_id == user_id).order_by(table.id)
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to list {collection} for user {user_id}") from e
        return [
            {key: getattr(row, column) for key, column in columns.items()}
            for row in result.scalars()
        ]
