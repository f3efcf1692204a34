"""Community and sport lookups.

Both directories belong to the registration subsystem; the leaderboard only
asks whether ids exist and what they are called.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Protocol

from sqlmodel import Session, select

from ..models import Community, Sport


class CommunityDirectory(Protocol):
    def get_community(self, community_id: str) -> Optional[Community]: ...

    def community_names(self, community_ids: Iterable[str]) -> Dict[str, str]: ...


class SportDirectory(Protocol):
    def sport_exists(self, sport_id: str) -> bool: ...

    def get_sport(self, sport_id: str) -> Optional[Sport]: ...

    def sport_names(self, sport_ids: Iterable[str]) -> Dict[str, str]: ...


class Directory(CommunityDirectory, SportDirectory, Protocol):
    """Everything the leaderboard asks of its collaborators."""


class SqlDirectory:
    """Both directories backed by the ``community`` and ``sport`` tables."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_community(self, community_id: str) -> Optional[Community]:
        if not community_id:
            return None
        return self.session.get(Community, community_id)

    def community_names(self, community_ids: Iterable[str]) -> Dict[str, str]:
        ids = set(community_ids)
        if not ids:
            return {}
        rows = self.session.exec(select(Community).where(Community.id.in_(ids))).all()
        return {row.id: row.name for row in rows}

    def sport_exists(self, sport_id: str) -> bool:
        return self.get_sport(sport_id) is not None

    def get_sport(self, sport_id: str) -> Optional[Sport]:
        if not sport_id:
            return None
        return self.session.get(Sport, sport_id)

    def sport_names(self, sport_ids: Iterable[str]) -> Dict[str, str]:
        ids = set(sport_ids)
        if not ids:
            return {}
        rows = self.session.exec(select(Sport).where(Sport.id.in_(ids))).all()
        return {row.id: row.name for row in rows}


__all__ = ["CommunityDirectory", "Directory", "SportDirectory", "SqlDirectory"]
