"""
dependencies.py — Shared FastAPI Dependencies

Reusable dependency functions for the storage handle and request bodies.
All routers import from here instead of reaching into app.state.

Business Rules:
- get_store returns the process-scoped ExerciseStore created in the lifespan
- read_form accepts JSON, urlencoded and multipart bodies alike
- A JSON body that is not an object counts as an empty form
- Malformed JSON is a 400 handled by the generic responder

Called by: all routers
Depends on: database
"""

import json

from fastapi import HTTPException, Request

from .database import ExerciseStore


def get_store(request: Request) -> ExerciseStore:
    """Dependency: the storage handle owned by the running app."""
    return request.app.state.store


async def read_form(request: Request) -> dict:
    """Dependency: request body as a flat dict of field → value."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise HTTPException(400, "Malformed JSON body")
        return body if isinstance(body, dict) else {}
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}
