"""
services/ — Business logic behind the API routers.

One function per endpoint: validate, call the store, return models.
Failures are raised as ExerciseTrackerError subclasses.
"""
