"""Helpers turning leaderboard objects into API-friendly dicts."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from ..core.time import as_naive_utc
from ..models import Medal, ScoreEntry
from .aggregate import CommunityStanding
from .ranking import PodiumSlot, RankedEntry, SportPodium


def _iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_naive_utc(value).isoformat() + "Z"


def entry_to_dict(
    entry: ScoreEntry,
    community_name: Optional[str] = None,
    sport_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Serialise a stored score entry."""

    return {
        "id": entry.id,
        "community_id": entry.community_id,
        "community_name": community_name,
        "sport_id": entry.sport_id,
        "sport_name": sport_name,
        "score": entry.score,
        "position": entry.position,
        "medal": Medal(entry.medal).value,
        "notes": entry.notes,
        "created_at": _iso(entry.created_at),
        "updated_at": _iso(entry.updated_at),
    }


def ranked_entry_to_dict(entry: RankedEntry) -> Dict[str, Any]:
    return {
        "id": entry.entry_id,
        "community_id": entry.community_id,
        "community_name": entry.community_name,
        "sport_id": entry.sport_id,
        "score": entry.score,
        "position": entry.position,
        "medal": entry.medal.value,
        "notes": entry.notes,
        "rank": entry.rank,
    }


def slot_to_dict(slot: PodiumSlot) -> Dict[str, Any]:
    return {
        "place": slot.place,
        "label": slot.label,
        "display": slot.display,
        "entry": ranked_entry_to_dict(slot.entry) if slot.entry else None,
    }


def podium_to_dict(podium: SportPodium) -> Dict[str, Any]:
    return {
        "sport_id": podium.sport_id,
        "sport_name": podium.sport_name,
        "podium": [slot_to_dict(slot) for slot in podium.slots],
        "participants": [ranked_entry_to_dict(entry) for entry in podium.residual],
    }


def standing_to_dict(standing: CommunityStanding) -> Dict[str, Any]:
    return {
        "community_id": standing.community_id,
        "community_name": standing.community_name,
        "total_score": standing.total_score,
        "entry_count": standing.entry_count,
        "rank": standing.rank,
    }


__all__ = [
    "entry_to_dict",
    "podium_to_dict",
    "ranked_entry_to_dict",
    "slot_to_dict",
    "standing_to_dict",
]
