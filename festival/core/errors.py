"""Domain errors raised by the leaderboard engine.

Routers never catch these; ``create_app`` registers one handler that maps
each class onto its HTTP status.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LeaderboardError(Exception):
    """Base class for engine errors carrying a message and structured details."""

    status_code: int = 500
    error_code: str = "leaderboard_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detail": self.message,
            "error": self.error_code,
            "details": self.details,
        }


class ValidationError(LeaderboardError):
    """Malformed input; nothing was written."""

    status_code = 400
    error_code = "validation_error"


class NotFoundError(LeaderboardError):
    """The targeted entry does not exist."""

    status_code = 404
    error_code = "not_found"


class UnknownReferenceError(NotFoundError):
    """A store write referenced a community or sport that does not exist."""

    error_code = "unknown_reference"


class ConflictError(LeaderboardError):
    """The write collides with an existing entry key or placement."""

    status_code = 409
    error_code = "conflict"


__all__ = [
    "ConflictError",
    "LeaderboardError",
    "NotFoundError",
    "UnknownReferenceError",
    "ValidationError",
]
