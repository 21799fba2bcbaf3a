"""Exercise tracker — users, exercises and exercise logs over HTTP."""

APP_VERSION = "1.0.0"
