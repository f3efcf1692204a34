"""Request payloads accepted by the leaderboard services."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict
from sqlmodel import SQLModel

from ..models import Medal


class PodiumSubmission(SQLModel):
    """Desired first, second and third place of one sport (community ids)."""

    model_config = ConfigDict(extra="forbid")

    first: Optional[str] = None
    second: Optional[str] = None
    third: Optional[str] = None


class EntryInput(SQLModel):
    model_config = ConfigDict(extra="forbid")

    community_id: str
    sport_id: str
    score: int
    position: Optional[int] = None
    medal: Optional[Medal] = None
    notes: Optional[str] = None


class EntryPatch(SQLModel):
    """Partial update; only fields present in the payload are applied."""

    model_config = ConfigDict(extra="forbid")

    community_id: Optional[str] = None
    sport_id: Optional[str] = None
    score: Optional[int] = None
    position: Optional[int] = None
    medal: Optional[Medal] = None
    notes: Optional[str] = None


__all__ = ["EntryInput", "EntryPatch", "PodiumSubmission"]
