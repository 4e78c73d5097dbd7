"""
Domain exceptions raised by the services and translated to HTTP responses
at the request boundary (see ``cringeshield.api``).
"""

from typing import Any, Optional


class ChallengeError(Exception):
    """Base exception for challenge/progress operations."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> Any:
        return self.message


class ValidationError(ChallengeError):
    """Malformed client input (day number, milestone, tier, week, prompt id)."""
    status_code = 400


class NotFoundError(ChallengeError):
    """Raised when a requested resource is not found."""
    status_code = 404


class StateError(ChallengeError):
    """Operation requires prior state that does not exist."""
    status_code = 400


class ConflictError(ChallengeError):
    """Raised when a uniqueness constraint would be violated."""
    status_code = 409


class PermissionDeniedError(ChallengeError):
    status_code = 403


class IneligibleError(ChallengeError):
    """Award preconditions not met yet. An expected outcome, not a bug."""

    status_code = 400

    def __init__(self, message: str, *, completed: int, required: int, extra: Optional[dict] = None):
        super().__init__(message)
        self.completed = completed
        self.required = required
        self.extra = extra or {}

    def to_detail(self) -> Any:
        return {
            "message": self.message,
            "completed": self.completed,
            "required": self.required,
            **self.extra,
        }
