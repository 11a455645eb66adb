# exercise_tracker/core/errors.py
"""
Typed exceptions for every failure the API answers with.

Each error carries the HTTP status it maps to; the global handlers in
exercise_tracker.api.error_handlers render them as {"error": message}.
"""

from typing import Optional


class ExerciseTrackerError(Exception):
    """Base exception for all exercise tracker errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}


# ---- 400-level ----

class InvalidInputError(ExerciseTrackerError):
    """A request field could not be coerced to the type it needs."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "INVALID_INPUT", 400)
        self.field = field


class UserNotFoundError(ExerciseTrackerError):
    def __init__(self, user_id: str):
        super().__init__("User not found", "USER_NOT_FOUND", 404)
        self.user_id = user_id


# ---- 500-level ----

class OperationFailure(ExerciseTrackerError):
    """Generic endpoint failure; the message is what the client sees."""

    def __init__(self, message: str):
        super().__init__(message, "OPERATION_FAILURE", 500)


class DatabaseError(ExerciseTrackerError):
    """A store operation failed (connection, constraint, driver)."""

    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}", "DATABASE_ERROR", 500,
        )
        self.operation = operation
