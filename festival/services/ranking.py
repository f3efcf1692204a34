"""Per-sport podium ranking.

``rank_sport`` is a pure function of the entries it is given. Slot k of the
podium belongs to the first entry (in insertion order) whose position is k;
everything else is listed after the podium, best score first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Tuple

from ..core.time import as_naive_utc
from ..models import Medal, ScoreEntry
from .placement import ORDINALS, PODIUM_POSITIONS

EMPTY_SLOT = "-"


@dataclass(frozen=True)
class RankedEntry:
    entry_id: str
    community_id: str
    community_name: str
    sport_id: str
    score: int
    position: Optional[int]
    medal: Medal
    rank: int
    notes: Optional[str] = None


@dataclass(frozen=True)
class PodiumSlot:
    place: int
    entry: Optional[RankedEntry] = None

    @property
    def label(self) -> str:
        return ORDINALS[self.place]

    @property
    def display(self) -> str:
        return self.entry.community_name if self.entry else EMPTY_SLOT


@dataclass(frozen=True)
class SportPodium:
    sport_id: Optional[str]
    sport_name: Optional[str]
    slots: Tuple[PodiumSlot, PodiumSlot, PodiumSlot]
    residual: List[RankedEntry] = field(default_factory=list)

    def slot(self, place: int) -> PodiumSlot:
        return self.slots[place - 1]


def insertion_key(entry: ScoreEntry):
    return (as_naive_utc(entry.created_at), entry.id)


def _residual_key(entry: ScoreEntry):
    created, entry_id = insertion_key(entry)
    return (-entry.score, created, entry_id)


def _ranked(entry: ScoreEntry, name: str, rank: int) -> RankedEntry:
    return RankedEntry(
        entry_id=entry.id,
        community_id=entry.community_id,
        community_name=name,
        sport_id=entry.sport_id,
        score=entry.score,
        position=entry.position,
        medal=Medal(entry.medal),
        rank=rank,
        notes=entry.notes,
    )


def rank_sport(
    entries: Iterable[ScoreEntry],
    community_names: Mapping[str, str],
    *,
    sport_id: Optional[str] = None,
    sport_name: Optional[str] = None,
) -> SportPodium:
    """Build the podium and the participation list for one sport."""

    ordered = sorted(entries, key=insertion_key)
    occupants: dict[int, ScoreEntry] = {}
    rest: List[ScoreEntry] = []

    for entry in ordered:
        if entry.position in PODIUM_POSITIONS and entry.position not in occupants:
            occupants[entry.position] = entry
        else:
            rest.append(entry)

    def name_of(entry: ScoreEntry) -> str:
        return community_names.get(entry.community_id, entry.community_id)

    slots = tuple(
        PodiumSlot(
            place=place,
            entry=(
                _ranked(occupants[place], name_of(occupants[place]), place)
                if place in occupants
                else None
            ),
        )
        for place in PODIUM_POSITIONS
    )

    residual = [
        _ranked(entry, name_of(entry), len(PODIUM_POSITIONS) + index)
        for index, entry in enumerate(sorted(rest, key=_residual_key), start=1)
    ]

    return SportPodium(
        sport_id=sport_id,
        sport_name=sport_name,
        slots=slots,  # type: ignore[arg-type]
        residual=residual,
    )


__all__ = [
    "EMPTY_SLOT",
    "PodiumSlot",
    "RankedEntry",
    "SportPodium",
    "insertion_key",
    "rank_sport",
]
