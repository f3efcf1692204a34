"""Service layer: store, rankers and the mutation coordinator."""

from .aggregate import CommunityStanding, rank_overall
from .coordinator import LeaderboardMutationCoordinator
from .directory import SqlDirectory
from .locks import SportLocks, sport_locks
from .placement import Placement, PodiumPoints
from .queries import LeaderboardQueries
from .ranking import PodiumSlot, RankedEntry, SportPodium, rank_sport
from .schemas import EntryInput, EntryPatch, PodiumSubmission
from .store import ScoreEntryStore

__all__ = [
    "CommunityStanding",
    "EntryInput",
    "EntryPatch",
    "LeaderboardMutationCoordinator",
    "LeaderboardQueries",
    "Placement",
    "PodiumPoints",
    "PodiumSlot",
    "PodiumSubmission",
    "RankedEntry",
    "ScoreEntryStore",
    "SportLocks",
    "SportPodium",
    "SqlDirectory",
    "rank_overall",
    "rank_sport",
    "sport_locks",
]
