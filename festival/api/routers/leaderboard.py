"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response, status

from ...services import (
    EntryInput,
    EntryPatch,
    LeaderboardMutationCoordinator,
    LeaderboardQueries,
    PodiumSubmission,
)
from ...services.serializers import entry_to_dict, podium_to_dict, standing_to_dict
from ..deps import get_coordinator, get_queries, require_admin

router = APIRouter(tags=["leaderboard"])


def _entries_with_names(queries: LeaderboardQueries, entries) -> List[Dict[str, Any]]:
    communities = queries.directory.community_names(entry.community_id for entry in entries)
    sports = queries.directory.sport_names(entry.sport_id for entry in entries)
    return [
        entry_to_dict(
            entry,
            community_name=communities.get(entry.community_id),
            sport_name=sports.get(entry.sport_id),
        )
        for entry in entries
    ]


@router.get("/leaderboard")
def get_overall_leaderboard(queries: LeaderboardQueries = Depends(get_queries)):
    """Overall community ranking, summed across all sports."""

    return [standing_to_dict(standing) for standing in queries.overall()]


@router.get("/leaderboard/sport/{sport_id}")
def get_sport_leaderboard(sport_id: str, queries: LeaderboardQueries = Depends(get_queries)):
    """Podium and participation list for one sport."""

    return podium_to_dict(queries.sport_podium(sport_id))


@router.get("/leaderboard/community/{community_id}")
def get_community_scores(
    community_id: str, queries: LeaderboardQueries = Depends(get_queries)
):
    """All score entries of one community, best score first."""

    return _entries_with_names(queries, queries.community_entries(community_id))


@router.get("/leaderboard/entries")
def list_entries(
    _admin: bool = Depends(require_admin),
    queries: LeaderboardQueries = Depends(get_queries),
):
    """All score entries, most recently updated first."""

    return _entries_with_names(queries, queries.all_entries())


@router.put("/leaderboard/sport/{sport_id}/podium")
def set_sport_podium(
    sport_id: str,
    body: PodiumSubmission,
    _admin: bool = Depends(require_admin),
    coordinator: LeaderboardMutationCoordinator = Depends(get_coordinator),
):
    """Replace the 1st/2nd/3rd places of a sport and return the new podium."""

    return podium_to_dict(coordinator.set_sport_podium(sport_id, body))


@router.post("/leaderboard")
def create_entry(
    body: EntryInput,
    response: Response,
    _admin: bool = Depends(require_admin),
    coordinator: LeaderboardMutationCoordinator = Depends(get_coordinator),
):
    """Create the entry for a community and sport, or replace the existing one."""

    entry, created = coordinator.create_entry(body)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry_to_dict(entry)


@router.patch("/leaderboard/{entry_id}")
def update_entry(
    entry_id: str,
    body: EntryPatch,
    _admin: bool = Depends(require_admin),
    coordinator: LeaderboardMutationCoordinator = Depends(get_coordinator),
):
    """Update selected fields of a score entry."""

    return entry_to_dict(coordinator.update_entry(entry_id, body))


@router.delete("/leaderboard/{entry_id}")
def delete_entry(
    entry_id: str,
    _admin: bool = Depends(require_admin),
    coordinator: LeaderboardMutationCoordinator = Depends(get_coordinator),
):
    """Delete a score entry."""

    coordinator.delete_entry(entry_id)
    return {"ok": True}


__all__ = ["router"]
