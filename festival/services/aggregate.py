"""Overall community ranking across all sports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping

from ..models import ScoreEntry


@dataclass(frozen=True)
class CommunityStanding:
    community_id: str
    community_name: str
    total_score: int
    entry_count: int
    rank: int


def rank_overall(
    entries: Iterable[ScoreEntry], community_names: Mapping[str, str]
) -> List[CommunityStanding]:
    """Sum each community's scores and rank communities by total.

    Equal totals share a rank and the next total skips ahead (17, 17, 10 ranks
    as 1, 1, 3). Tied communities are listed by name. Communities without
    entries are absent.
    """

    totals: Dict[str, int] = {}
    counts: Dict[str, int] = {}
    for entry in entries:
        totals[entry.community_id] = totals.get(entry.community_id, 0) + entry.score
        counts[entry.community_id] = counts.get(entry.community_id, 0) + 1

    rows = sorted(
        (
            (community_id, community_names.get(community_id, community_id), total)
            for community_id, total in totals.items()
        ),
        key=lambda row: (-row[2], row[1], row[0]),
    )

    standings: List[CommunityStanding] = []
    rank = 0
    previous_total = None
    for index, (community_id, name, total) in enumerate(rows, start=1):
        if total != previous_total:
            # Everyone listed before this row has a strictly greater total.
            rank = index
            previous_total = total
        standings.append(
            CommunityStanding(
                community_id=community_id,
                community_name=name,
                total_score=total,
                entry_count=counts[community_id],
                rank=rank,
            )
        )
    return standings


__all__ = ["CommunityStanding", "rank_overall"]
