"""Database models — re-exports all models.

Import from here:  from app.models import User, Exercise
Or from submodules: from app.models.user import User
"""

from .base import Base  # noqa: F401
from .exercise import Exercise  # noqa: F401
from .user import User  # noqa: F401
