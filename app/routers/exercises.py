"""Exercises API — log an exercise and query a user's exercise log."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..database import ExerciseStore
from ..dependencies import get_store, read_form
from ..errors import ExerciseTrackerError
from ..schemas.exercise import ExerciseForm, ExerciseOut, LogEntryOut
from ..services import exercise_service
from . import failure

router = APIRouter(prefix="/api/exercise", tags=["exercises"])


@router.post("/add", response_model=ExerciseOut)
async def add_exercise(form: dict = Depends(read_form), store: ExerciseStore = Depends(get_store)):
    body = ExerciseForm.model_validate(form)
    try:
        exercise = await exercise_service.add_exercise(
            store, body.username, body.description, body.duration, body.date
        )
    except ExerciseTrackerError as e:
        return failure(e)
    return exercise.to_dict()


@router.get("/log", response_model=list[LogEntryOut])
async def exercise_log(
    username: Optional[str] = None,
    since: Optional[str] = Query(None, alias="from"),
    until: Optional[str] = Query(None, alias="to"),
    limit: Optional[str] = None,
    store: ExerciseStore = Depends(get_store),
):
    """Exercises for ``username``; ``from``/``to`` are inclusive dates."""
    try:
        exercises = await exercise_service.get_exercise_log(store, username, since, until, limit)
    except ExerciseTrackerError as e:
        return failure(e)
    return [x.to_log_entry() for x in exercises]
