"""Lookup tables owned by the registration subsystem.

The leaderboard only reads these; rows are created and removed elsewhere.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


def new_id() -> str:
    return uuid.uuid4().hex


class Community(SQLModel, table=True):
    """A community competing in the festival."""

    id: str = ORMField(default_factory=new_id, primary_key=True)
    name: str = ORMField(index=True)
    active: bool = True
    created_at: datetime = ORMField(default_factory=utcnow)


class Sport(SQLModel, table=True):
    """A sport on the festival programme."""

    id: str = ORMField(default_factory=new_id, primary_key=True)
    name: str = ORMField(index=True)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Community", "Sport", "new_id"]
