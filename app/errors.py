"""
errors.py — Exception types shared by the storage, service and router layers

Business Rules:
- Services raise these; routers turn them into plain-text 200 responses
- Only exceptions outside this tree reach the generic responder in main.py
- Storage code never leaks driver exceptions; it raises StorageError subclasses

Called by: database.py, services/*.py, routers/*.py
Depends on: nothing
"""


class ExerciseTrackerError(Exception):
    """Base class for every error with a user-visible message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FieldValidationError(ExerciseTrackerError):
    """A request field failed a hand-written check."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class UserNotFound(ExerciseTrackerError):
    def __init__(self, username: str):
        super().__init__("Username not found")
        self.username = username


class StorageError(ExerciseTrackerError):
    """Any failure reported by the storage layer."""


class StorageUnavailable(StorageError):
    """No connection string was configured, so nothing can be persisted."""

    def __init__(self):
        super().__init__("Storage is not configured")


class UniqueConstraintViolation(StorageError):
    """An insert collided with a unique index."""

    def __init__(self, detail: str = ""):
        super().__init__("Unique constraint violated")
        self.detail = detail


class UsernameTaken(ExerciseTrackerError):
    def __init__(self, username: str):
        super().__init__("Username already taken")
        self.username = username


class RequestFailed(ExerciseTrackerError):
    """A storage call failed; the message asks the client to try again."""
