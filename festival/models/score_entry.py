"""Database model for leaderboard score entries."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow
from .directory import new_id


class Medal(str, Enum):
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    NONE = "none"


class ScoreEntry(SQLModel, table=True):
    """Points, placement and medal of one community in one sport."""

    __tablename__ = "score_entry"
    __table_args__ = (
        UniqueConstraint("community_id", "sport_id", name="uq_score_entry_community_sport"),
    )

    id: str = ORMField(default_factory=new_id, primary_key=True)
    community_id: str = ORMField(foreign_key="community.id", ondelete="CASCADE", index=True)
    sport_id: str = ORMField(foreign_key="sport.id", ondelete="CASCADE", index=True)
    score: int = ORMField(default=0, index=True)
    position: Optional[int] = None
    medal: Medal = ORMField(default=Medal.NONE)
    notes: Optional[str] = None
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Medal", "ScoreEntry"]
