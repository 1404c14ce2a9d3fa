"""Merge parsed resume data into a student's stored profile.

Order is fixed: profile fields, then skills, goals and interests. Each
candidate is inserted only if no row with the exact same name (or goal title)
exists for the user; existing rows are never modified. A persistence error
stops the merge and propagates, leaving already-merged kinds in place.
"""

import logging

from models.schemas import ParseResult, PopulationResult
from services.profile_store import ProfileStore

logger = logging.getLogger(__name__)


async def _merge(store: ProfileStore, collection: str, user_id: int, records: list[tuple[str, dict]]) -> int:
    added = 0
    for name, record in records:
        if await store.exists_by_name(collection, user_id, name):
            logger.debug("User %s already has %s entry %r", user_id, collection, name)
            continue
        if await store.insert(collection, user_id, record):
            added += 1
    return added


async def auto_populate_profile(
    user_id: int, parse_result: ParseResult, store: ProfileStore
) -> PopulationResult:
    """Persist new candidates from parse_result and report what was added."""
    result = PopulationResult()

    fields = parse_result.profile.set_fields()
    if fields:
        await store.update_profile_fields(user_id, fields)
        result.profile_updated = True

    result.skills_added = await _merge(
        store, "skills", user_id,
        [(skill.name, skill.model_dump()) for skill in parse_result.skills],
    )
    result.goals_added = await _merge(
        store, "goals", user_id,
        [(goal.title, goal.model_dump()) for goal in parse_result.goals],
    )
    result.interests_added = await _merge(
        store, "interests", user_id,
        [(interest.name, interest.model_dump()) for interest in parse_result.interests],
    )

    logger.info(
        "Auto-populated user %s: profile_updated=%s skills=%d goals=%d interests=%d",
        user_id, result.profile_updated, result.skills_added,
        result.goals_added, result.interests_added,
    )
    return result
