"""User service — create and list users.

Usage:
    from app.services.user_service import create_user, list_users
"""

from loguru import logger

from ..database import ExerciseStore
from ..errors import RequestFailed, StorageError, UniqueConstraintViolation, UsernameTaken
from ..models import User
from .validation import validate_username


async def create_user(store: ExerciseStore, username: str | None) -> User:
    """Validate and insert a user. The unique index is the only duplicate check."""
    username = validate_username(username)
    try:
        user = await store.create_user(username)
    except UniqueConstraintViolation:
        logger.info("Username {!r} already taken", username)
        raise UsernameTaken(username)
    except StorageError as e:
        logger.error("Saving user {!r} failed: {}", username, e)
        raise RequestFailed("Error saving username, try again")
    logger.info("User {} created ({})", user.id, username)
    return user


async def list_users(store: ExerciseStore) -> list[User]:
    try:
        return await store.list_users()
    except StorageError as e:
        logger.error("Listing users failed: {}", e)
        raise RequestFailed("Error getting users, try again")
