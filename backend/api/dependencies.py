"""Shared dependencies for API routes."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from services.profile_store import SqlProfileStore


def get_profile_store(db: AsyncSession = Depends(get_db)) -> SqlProfileStore:
    return SqlProfileStore(db)
