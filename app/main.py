"""
Exercise Tracker — users log exercises and query their exercise history.

App wiring only: lifespan, middleware, static pages and the generic error
responder. Routes live in routers/, logic in services/.
"""
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import APP_VERSION
from .config import get_settings
from .database import ExerciseStore
from .logging_config import setup_logging
from .routers import exercises, users
from .schemas.exercise import HealthOut

STATIC_DIR = Path(__file__).parent / "static"


# --- App Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    settings = get_settings()
    store = ExerciseStore(settings.async_database_url)
    await store.init()
    app.state.store = store
    logger.info("Exercise tracker {} ready", APP_VERSION)
    yield
    await store.close()
    logger.info("Storage closed")


# --- FastAPI App ---
app = FastAPI(title="Exercise Tracker", version=APP_VERSION, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.include_router(users.router)
app.include_router(exercises.router)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag each request with a short ID, log it, and echo the ID back."""
    request_id = uuid.uuid4().hex[:8]
    start = time.perf_counter()
    with logger.contextualize(request_id=request_id):
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "{} {} → {} ({:.1f} ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
    response.headers["X-Request-ID"] = request_id
    return response


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR RESPONDER
# ═══════════════════════════════════════════════════════════════════════════════


def _first_error_message(errors) -> str:
    """Message of the first failing field, e.g. ``username: Input should be a valid string``."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query"))
    msg = first.get("msg", "Invalid value")
    return f"{field}: {msg}" if field else msg


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return PlainTextResponse(_first_error_message(exc.errors()), status_code=400)


@app.exception_handler(ValidationError)
async def model_validation_handler(request: Request, exc: ValidationError):
    return PlainTextResponse(_first_error_message(exc.errors()), status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return FileResponse(STATIC_DIR / "404.html", status_code=200)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    status_code = getattr(exc, "status_code", None) or 500
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    return PlainTextResponse(str(exc) or "Internal Server Error", status_code=status_code)


# ═══════════════════════════════════════════════════════════════════════════════
# PAGES
# ═══════════════════════════════════════════════════════════════════════════════


@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health", response_model=HealthOut)
async def health(request: Request):
    store: ExerciseStore = request.app.state.store
    return HealthOut(
        version=APP_VERSION,
        database="connected" if store.is_configured else "unconfigured",
    )
