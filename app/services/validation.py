"""Field validation — hand-written checks run before any storage call.

Each check raises FieldValidationError carrying the sentence returned to the
client. Checks run in a fixed order and the first failure wins.

Business Rules:
- Username: present, non-blank, at most 10 characters
- Description: present, non-blank, at most 100 characters
- Duration: present, non-blank, numeric, at most 1440, whole, at least 1
- Date / From / To: optional, but must parse as a calendar date when given
- Limit: optional, numeric and at least 1 when given; capped at MAX_LOG_LIMIT

Called by: services/user_service.py, services/exercise_service.py
Depends on: utils/normalization.py
"""

import datetime
from dataclasses import dataclass

from ..errors import FieldValidationError
from ..utils.normalization import parse_date, parse_number

MAX_USERNAME_LENGTH = 10
MAX_DESCRIPTION_LENGTH = 100
MAX_DURATION_MINUTES = 1440
# Larger limits are capped; no log holds this many rows.
MAX_LOG_LIMIT = 2**31 - 1


@dataclass(frozen=True)
class ExerciseInput:
    username: str
    description: str
    duration: int
    date: datetime.date | None


@dataclass(frozen=True)
class LogFilter:
    username: str
    since: datetime.date | None = None
    until: datetime.date | None = None
    limit: int | None = None


# ── Single-field checks ──────────────────────────────────────────────


def _label(field: str) -> str:
    return field[:1].upper() + field[1:]


def require_present(**fields: str | None) -> None:
    for field, value in fields.items():
        if value is None:
            raise FieldValidationError(field, f"{_label(field)} is undefined")


def require_not_blank(**fields: str) -> None:
    for field, value in fields.items():
        if not value.strip():
            raise FieldValidationError(field, f"{_label(field)} is blank")


def require_max_length(field: str, value: str, limit: int) -> None:
    if len(value) > limit:
        raise FieldValidationError(
            field, f"{_label(field)} cannot be more than {limit} characters"
        )


def require_date(field: str, value: str | None) -> datetime.date | None:
    """Parse an optional date; None and blank mean "not given"."""
    if value is None or not value.strip():
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise FieldValidationError(field, f"{_label(field)} is not a valid date")
    return parsed


# ── Per-endpoint validators ──────────────────────────────────────────


def validate_username(username: str | None) -> str:
    require_present(username=username)
    require_not_blank(username=username)
    require_max_length("username", username, MAX_USERNAME_LENGTH)
    return username


def validate_exercise(
    username: str | None,
    description: str | None,
    duration: str | None,
    date: str | None,
) -> ExerciseInput:
    # date is optional: omitted and blank both mean today
    require_present(username=username, description=description, duration=duration)
    require_not_blank(username=username, description=description, duration=duration)
    require_max_length("username", username, MAX_USERNAME_LENGTH)
    require_max_length("description", description, MAX_DESCRIPTION_LENGTH)

    minutes = parse_number(duration)
    if minutes is None:
        raise FieldValidationError("duration", "Duration is not a valid number")
    if minutes > MAX_DURATION_MINUTES:
        raise FieldValidationError(
            "duration", f"Duration cannot be more than {MAX_DURATION_MINUTES} minutes"
        )
    if minutes != int(minutes):
        raise FieldValidationError("duration", "Duration must be a whole number of minutes")
    if minutes < 1:
        raise FieldValidationError("duration", "Duration must be at least 1 minute")

    return ExerciseInput(
        username=username,
        description=description,
        duration=int(minutes),
        date=require_date("date", date),
    )


def validate_log_filter(
    username: str | None,
    since: str | None = None,
    until: str | None = None,
    limit: str | None = None,
) -> LogFilter:
    validate_username(username)
    parsed_since = _require_filter_date("from", since)
    parsed_until = _require_filter_date("to", until)

    parsed_limit = None
    if limit is not None:
        number = parse_number(limit)
        if number is None:
            raise FieldValidationError("limit", "Limit is not a valid number")
        if number < 1:
            raise FieldValidationError("limit", "Limit must be greater than 0")
        parsed_limit = int(min(number, MAX_LOG_LIMIT))

    return LogFilter(
        username=username, since=parsed_since, until=parsed_until, limit=parsed_limit
    )


def _require_filter_date(field: str, value: str | None) -> datetime.date | None:
    # Unlike the exercise date, a given-but-blank filter is rejected.
    if value is None:
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise FieldValidationError(field, f"{_label(field)} is not a valid date")
    return parsed
