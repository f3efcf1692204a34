"""Read side of the leaderboard: every call recomputes from the store."""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import Session

from ..core.time import as_naive_utc
from ..models import ScoreEntry
from .aggregate import CommunityStanding, rank_overall
from .directory import Directory, SqlDirectory
from .ranking import SportPodium, rank_sport
from .store import ScoreEntryStore


class LeaderboardQueries:
    def __init__(self, session: Session, directory: Optional[Directory] = None) -> None:
        self.store = ScoreEntryStore(session)
        self.directory = directory or SqlDirectory(session)

    def overall(self) -> List[CommunityStanding]:
        # One SELECT, so the totals come from a single snapshot.
        entries = self.store.list_all()
        names = self.directory.community_names(entry.community_id for entry in entries)
        return rank_overall(entries, names)

    def sport_podium(self, sport_id: str) -> SportPodium:
        entries = self.store.list_by_sport(sport_id)
        names = self.directory.community_names(entry.community_id for entry in entries)
        sport = self.directory.get_sport(sport_id)
        return rank_sport(
            entries,
            names,
            sport_id=sport_id,
            sport_name=sport.name if sport else None,
        )

    def community_entries(self, community_id: str) -> List[ScoreEntry]:
        entries = self.store.list_by_community(community_id)
        return sorted(entries, key=lambda entry: -entry.score)

    def all_entries(self) -> List[ScoreEntry]:
        entries = self.store.list_all()
        return sorted(entries, key=lambda entry: as_naive_utc(entry.updated_at), reverse=True)


__all__ = ["LeaderboardQueries"]
