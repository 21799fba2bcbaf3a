"""Deterministic parsing of raw request strings.

Form and query values arrive as strings:
  - Numbers: "30" → 30.0, " 1e2 " → 100.0, "abc" → None
  - Dates: "2024-03-01" → date(2024, 3, 1), "2024-03-01T10:00:00Z" → date(2024, 3, 1)

Design: return None for anything unparseable; callers decide the message.
"""

import datetime
import math
import re
from typing import Any

# ── Number parsing ────────────────────────────────────────────────────


def parse_number(raw: Any) -> float | None:
    """Parse a numeric string. Returns None for blanks, NaN, infinities and garbage."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw) if math.isfinite(raw) else None

    s = str(raw).strip()
    if not s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


# ── Date parsing ──────────────────────────────────────────────────────

# Accepts YYYY-MM-DD, YYYY/MM/DD and YYYY-M-D
_LOOSE_DATE = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})$")


def parse_date(raw: Any) -> datetime.date | None:
    """Parse a calendar date, dropping any time component. Returns None if invalid."""
    if raw is None:
        return None
    if isinstance(raw, datetime.datetime):
        return raw.date()
    if isinstance(raw, datetime.date):
        return raw

    s = str(raw).strip()
    if not s:
        return None

    m = _LOOSE_DATE.match(s)
    if m:
        try:
            return datetime.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except ValueError:
            return None

    try:
        return datetime.datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        return None
