"""Exercise service — log exercises and query a user's exercise history.

Business Rules:
- The owning user is resolved by username before anything is written
- A missing or blank date means today
- Log queries filter by user, optional date range (inclusive) and limit
- Log rows come back in storage order; no sort is applied

Called by: routers/exercises.py
Depends on: database.py, services/validation.py
"""

import datetime

from loguru import logger

from ..database import ExerciseStore
from ..errors import RequestFailed, StorageError, UserNotFound
from ..models import Exercise, User
from .validation import validate_exercise, validate_log_filter


async def _resolve_user(store: ExerciseStore, username: str) -> User:
    try:
        user = await store.find_user(username)
    except StorageError as e:
        logger.error("Looking up {!r} failed: {}", username, e)
        raise RequestFailed("Error searching for username, try again")
    if user is None:
        raise UserNotFound(username)
    return user


async def add_exercise(
    store: ExerciseStore,
    username: str | None,
    description: str | None,
    duration: str | None,
    date: str | None = None,
) -> Exercise:
    data = validate_exercise(username, description, duration, date)
    user = await _resolve_user(store, data.username)

    try:
        exercise = await store.create_exercise(
            user_id=user.id,
            description=data.description,
            duration=data.duration,
            date=data.date or datetime.date.today(),
        )
    except StorageError as e:
        logger.error("Saving exercise for {} failed: {}", user.id, e)
        raise RequestFailed("Error saving exercise, try again")
    logger.info("Exercise {} logged for user {}", exercise.id, user.id)
    return exercise


async def get_exercise_log(
    store: ExerciseStore,
    username: str | None,
    since: str | None = None,
    until: str | None = None,
    limit: str | None = None,
) -> list[Exercise]:
    """Return a user's exercises, filtered by date range and capped by limit."""
    filters = validate_log_filter(username, since, until, limit)
    user = await _resolve_user(store, filters.username)

    try:
        return await store.find_exercises(
            user.id, since=filters.since, until=filters.until, limit=filters.limit
        )
    except StorageError as e:
        logger.error("Exercise log query for {} failed: {}", user.id, e)
        raise RequestFailed("Error searching for exercises, try again")
