"""
routers/ — FastAPI route modules.

Each file contains a thin APIRouter. All business logic
lives in services/. Routers read input, call services,
and turn failures into plain-text bodies.
"""

from fastapi.responses import PlainTextResponse

from ..errors import ExerciseTrackerError


def failure(err: ExerciseTrackerError) -> PlainTextResponse:
    """Handled failures answer 200 with the message as plain text."""
    return PlainTextResponse(err.message, status_code=200)
