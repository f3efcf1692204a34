"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Tuple

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def _podium_points(raw: str | None) -> Tuple[int, int, int]:
    """Parse ``PODIUM_POINTS`` ("10,7,5") into first/second/third points."""

    parts = _split_csv(raw)
    if not parts:
        return (10, 7, 5)
    if len(parts) != 3:
        raise RuntimeError("PODIUM_POINTS must list exactly three values")
    try:
        points = tuple(int(part) for part in parts)
    except ValueError as exc:
        raise RuntimeError("PODIUM_POINTS values must be integers") from exc
    if any(value < 0 for value in points):
        raise RuntimeError("PODIUM_POINTS values must be non-negative")
    return points  # type: ignore[return-value]


# Storage --------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'app.db'}"
DB_RESET = _env_bool("DB_RESET", False)


# Admin authentication -------------------------------------------------------
ADMIN_USER = os.getenv("ADMIN_USER", "admin")
ADMIN_PASS = os.getenv("ADMIN_PASS", "changeme")


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Scoring convention ---------------------------------------------------------
PODIUM_POINTS = _podium_points(os.getenv("PODIUM_POINTS"))


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


__all__ = [
    "ADMIN_PASS",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_RESET",
    "LOG_LEVEL",
    "PODIUM_POINTS",
]
