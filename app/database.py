"""Database connection and the process-scoped storage handle.

ExerciseStore owns the async engine for the life of the process. It is
created and initialised in the FastAPI lifespan, kept on app.state and
handed to routes through dependencies.get_store. Every call is a coroutine,
so a slow query suspends only the request awaiting it.

Driver exceptions never leave this module: unique-index collisions become
UniqueConstraintViolation, everything else StorageError.
"""

import datetime
from contextlib import asynccontextmanager
from typing import AsyncIterator

from loguru import logger
from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .errors import StorageError, StorageUnavailable, UniqueConstraintViolation
from .models import Base, Exercise, User

_PG_UNIQUE_VIOLATION = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _PG_UNIQUE_VIOLATION:  # asyncpg
        return True
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:  # psycopg2
        return True
    if getattr(orig, "sqlite_errorname", "") in ("SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"):
        return True
    return "UNIQUE constraint failed" in str(orig)


def exercise_log_query(
    user_id: str,
    since: datetime.date | None = None,
    until: datetime.date | None = None,
    limit: int | None = None,
) -> Select:
    """Select a user's exercises, optionally bounded by date and row count.

    ``until`` is inclusive: the bound is ``date < until + 1 day``, and is
    dropped for the last representable date. No ORDER BY is applied, rows
    come back in storage order.
    """
    stmt = select(Exercise).where(Exercise.user_id == user_id)
    if since is not None:
        stmt = stmt.where(Exercise.date >= since)
    if until is not None and until < datetime.date.max:
        stmt = stmt.where(Exercise.date < until + datetime.timedelta(days=1))
    if limit is not None:
        stmt = stmt.limit(limit)
    return stmt


class ExerciseStore:
    """Async persistence for users and exercises."""

    def __init__(self, url: str):
        self.url = url
        self.engine: AsyncEngine | None = None
        self._sessions: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_configured(self) -> bool:
        return self._sessions is not None

    async def init(self) -> None:
        """Create the engine and any missing tables. Never raises."""
        if not self.url:
            logger.error("DATABASE_URL is not set, persistence is disabled")
            return
        try:
            self.engine = create_async_engine(self.url, pool_pre_ping=True)
        except (SQLAlchemyError, ImportError) as e:
            logger.error("Could not create database engine: {}", e)
            return
        self._sessions = async_sessionmaker(self.engine, expire_on_commit=False)
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        except (SQLAlchemyError, OSError) as e:
            # Keep the engine: the server may come up later.
            logger.error("Database schema sync failed: {}", e)
            return
        logger.info("Database connected")

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
        self.engine = None
        self._sessions = None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessions is None:
            raise StorageUnavailable()
        try:
            async with self._sessions() as db:
                try:
                    yield db
                except IntegrityError as e:
                    await db.rollback()
                    if _is_unique_violation(e):
                        raise UniqueConstraintViolation(str(e.orig)) from e
                    raise StorageError(str(e.orig)) from e
                except SQLAlchemyError as e:
                    await db.rollback()
                    raise StorageError(str(e)) from e
        except (OSError, OverflowError) as e:
            # Refused/dropped connections and out-of-range parameters are
            # raised by the driver without a SQLAlchemy wrapper.
            raise StorageError(str(e)) from e

    # ── Users ─────────────────────────────────────────────────────────

    async def create_user(self, username: str) -> User:
        async with self.session() as db:
            user = User(username=username)
            db.add(user)
            await db.commit()
            return user

    async def list_users(self) -> list[User]:
        async with self.session() as db:
            r = await db.execute(select(User))
            return list(r.scalars().all())

    async def find_user(self, username: str) -> User | None:
        async with self.session() as db:
            r = await db.execute(select(User).where(User.username == username))
            return r.scalar_one_or_none()

    # ── Exercises ─────────────────────────────────────────────────────

    async def create_exercise(
        self, user_id: str, description: str, duration: int, date: datetime.date
    ) -> Exercise:
        async with self.session() as db:
            exercise = Exercise(
                user_id=user_id, description=description, duration=duration, date=date
            )
            db.add(exercise)
            await db.commit()
            return exercise

    async def find_exercises(
        self,
        user_id: str,
        since: datetime.date | None = None,
        until: datetime.date | None = None,
        limit: int | None = None,
    ) -> list[Exercise]:
        async with self.session() as db:
            r = await db.execute(exercise_log_query(user_id, since, until, limit))
            return list(r.scalars().all())
