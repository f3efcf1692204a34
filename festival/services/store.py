"""Persistence for score entries.

``ScoreEntryStore`` works inside whatever transaction its session has open:
writes are flushed, never committed. Committing (or rolling back) is the
caller's job, which lets the coordinator group several writes into one unit.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import Session, select

from ..core.errors import UnknownReferenceError
from ..core.time import utcnow
from ..models import Community, ScoreEntry, Sport

_ORDER = (ScoreEntry.created_at, ScoreEntry.id)


class ScoreEntryStore:
    def __init__(self, session: Session) -> None:
        self.session = session

    # Reads ------------------------------------------------------------------
    def get(self, community_id: str, sport_id: str) -> Optional[ScoreEntry]:
        return self.session.exec(
            select(ScoreEntry).where(
                ScoreEntry.community_id == community_id,
                ScoreEntry.sport_id == sport_id,
            )
        ).first()

    def get_by_id(self, entry_id: str) -> Optional[ScoreEntry]:
        if not entry_id:
            return None
        return self.session.get(ScoreEntry, entry_id)

    def list_by_sport(self, sport_id: str) -> List[ScoreEntry]:
        return list(
            self.session.exec(
                select(ScoreEntry).where(ScoreEntry.sport_id == sport_id).order_by(*_ORDER)
            ).all()
        )

    def list_by_community(self, community_id: str) -> List[ScoreEntry]:
        return list(
            self.session.exec(
                select(ScoreEntry)
                .where(ScoreEntry.community_id == community_id)
                .order_by(*_ORDER)
            ).all()
        )

    def list_all(self) -> List[ScoreEntry]:
        return list(self.session.exec(select(ScoreEntry).order_by(*_ORDER)).all())

    # Writes -----------------------------------------------------------------
    def require_references(self, community_id: str, sport_id: str) -> None:
        """Raise ``UnknownReferenceError`` unless both rows exist."""

        if not community_id or self.session.get(Community, community_id) is None:
            raise UnknownReferenceError(
                "Community not found", {"community_id": community_id}
            )
        if not sport_id or self.session.get(Sport, sport_id) is None:
            raise UnknownReferenceError("Sport not found", {"sport_id": sport_id})

    def put(self, entry: ScoreEntry) -> ScoreEntry:
        """Create or replace the entry stored under entry's (community, sport).

        A replaced row keeps its id and ``created_at``.
        """

        self.require_references(entry.community_id, entry.sport_id)
        existing = self.get(entry.community_id, entry.sport_id)
        now = utcnow()

        if existing is not None and existing is not entry:
            existing.score = entry.score
            existing.position = entry.position
            existing.medal = entry.medal
            existing.notes = entry.notes
            existing.updated_at = now
            target = existing
        else:
            entry.updated_at = now
            target = entry

        self.session.add(target)
        self.session.flush()
        return target

    def delete(self, community_id: str, sport_id: str) -> bool:
        self.require_references(community_id, sport_id)
        existing = self.get(community_id, sport_id)
        if existing is None:
            return False
        self.delete_entry(existing)
        return True

    def delete_entry(self, entry: ScoreEntry) -> None:
        self.session.delete(entry)
        self.session.flush()


__all__ = ["ScoreEntryStore"]
