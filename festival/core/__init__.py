"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASS,
    ADMIN_USER,
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    PODIUM_POINTS,
)
from .database import build_engine, engine, get_session, transaction
from .errors import (
    ConflictError,
    LeaderboardError,
    NotFoundError,
    UnknownReferenceError,
    ValidationError,
)
from .logging import configure_logging, get_logger
from .time import as_naive_utc, utcnow

__all__ = [
    "ADMIN_PASS",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "PODIUM_POINTS",
    "ConflictError",
    "LeaderboardError",
    "NotFoundError",
    "UnknownReferenceError",
    "ValidationError",
    "as_naive_utc",
    "build_engine",
    "configure_logging",
    "engine",
    "get_logger",
    "get_session",
    "transaction",
    "utcnow",
]
