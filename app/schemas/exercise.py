"""
schemas/exercise.py — Pydantic models for user and exercise endpoints

Request forms keep every field optional so "missing" and "blank" can be
reported separately. Numbers posted as JSON are coerced to strings.

Called by: routers/users.py, routers/exercises.py
Depends on: pydantic
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# ── Requests ─────────────────────────────────────────────────────────


class _RawForm(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


class NewUserForm(_RawForm):
    username: str | None = None


class ExerciseForm(_RawForm):
    username: str | None = None
    description: str | None = None
    duration: str | None = None
    date: str | None = None


# ── Responses ────────────────────────────────────────────────────────


class UserOut(BaseModel):
    id: str
    username: str


class ExerciseOut(BaseModel):
    id: str
    userId: str
    description: str
    duration: int
    date: str


class LogEntryOut(BaseModel):
    userId: str
    description: str
    date: str
    duration: int


class HealthOut(BaseModel):
    status: str = "ok"
    version: str
    database: str
