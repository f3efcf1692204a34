"""Write side of the leaderboard.

Every mutation runs under the lock of the sport(s) it touches and inside one
database transaction, so a reader either sees the podium as it was before
the call or as it is after it, never a mix. A rejected call leaves the store
untouched.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from sqlmodel import Session

from ..core.database import transaction
from ..core.errors import (
    ConflictError,
    NotFoundError,
    UnknownReferenceError,
    ValidationError,
)
from ..core.logging import get_logger
from ..models import ScoreEntry
from .directory import Directory, SqlDirectory
from .locks import SportLocks, sport_locks
from .placement import (
    Placement,
    PodiumPoints,
    check_medal,
    check_position,
    check_score,
    medal_for_position,
)
from .queries import LeaderboardQueries
from .ranking import SportPodium
from .schemas import EntryInput, EntryPatch, PodiumSubmission
from .store import ScoreEntryStore

logger = get_logger(__name__)


def _clean_id(value: Optional[str], field: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{field}' must be a non-empty id", {field: value})
    return value.strip()


def podium_slots(submission: PodiumSubmission) -> Dict[int, str]:
    """Map positions to community ids, rejecting a community named twice."""

    slots: Dict[int, str] = {}
    for position, field in ((1, "first"), (2, "second"), (3, "third")):
        community_id = _clean_id(getattr(submission, field), field)
        if community_id is None:
            continue
        if community_id in slots.values():
            raise ValidationError(
                "A community cannot hold two placements in the same sport",
                {"community_id": community_id},
            )
        slots[position] = community_id
    return slots


class LeaderboardMutationCoordinator:
    def __init__(
        self,
        session: Session,
        directory: Optional[Directory] = None,
        locks: Optional[SportLocks] = None,
        points: Optional[PodiumPoints] = None,
    ) -> None:
        self.session = session
        self.directory = directory or SqlDirectory(session)
        self.store = ScoreEntryStore(session)
        self.locks = locks or sport_locks
        self.points = points or PodiumPoints.from_config()

    # Podium -----------------------------------------------------------------
    def set_sport_podium(self, sport_id: str, submission: PodiumSubmission) -> SportPodium:
        """Replace the placed entries of ``sport_id`` with the submitted podium.

        Placed entries of communities missing from the submission are deleted;
        participation entries (no position) are left alone.
        """

        sport_id = _clean_id(sport_id, "sport_id")
        slots = podium_slots(submission)
        if not self.directory.sport_exists(sport_id):
            raise ValidationError("Sport not found", {"sport_id": sport_id})

        with self.locks.hold(sport_id):
            self.session.expire_all()
            with transaction(self.session):
                if not self.directory.sport_exists(sport_id):
                    raise ValidationError("Sport not found", {"sport_id": sport_id})
                for community_id in slots.values():
                    if self.directory.get_community(community_id) is None:
                        raise ValidationError(
                            "Community not found", {"community_id": community_id}
                        )

                keep = set(slots.values())
                removed = 0
                for entry in self.store.list_by_sport(sport_id):
                    if entry.position is not None and entry.community_id not in keep:
                        self.store.delete_entry(entry)
                        removed += 1

                for position, community_id in sorted(slots.items()):
                    placement = Placement.for_position(position)
                    self.store.put(
                        ScoreEntry(
                            community_id=community_id,
                            sport_id=sport_id,
                            score=placement.points(self.points),
                            position=placement.position,
                            medal=placement.medal,
                            notes=None,
                        )
                    )

        logger.info(
            "Podium set for sport %s: %s (%d placed entries removed)",
            sport_id,
            {position: slots[position] for position in sorted(slots)},
            removed,
        )
        return LeaderboardQueries(self.session, self.directory).sport_podium(sport_id)

    # Raw entries ------------------------------------------------------------
    def create_entry(self, data: EntryInput) -> Tuple[ScoreEntry, bool]:
        """Create or replace the entry for (community, sport).

        Returns the stored entry and whether a new row was created.
        """

        community_id = _clean_id(data.community_id, "community_id")
        sport_id = _clean_id(data.sport_id, "sport_id")
        score = check_score(data.score)
        position = check_position(data.position)
        medal = check_medal(position, data.medal)
        self._require_sport(sport_id)

        with self.locks.hold(sport_id):
            self.session.expire_all()
            with transaction(self.session):
                self.store.require_references(community_id, sport_id)
                self._ensure_position_free(sport_id, position, community_id=community_id)
                created = self.store.get(community_id, sport_id) is None
                entry = self.store.put(
                    ScoreEntry(
                        community_id=community_id,
                        sport_id=sport_id,
                        score=score,
                        position=position,
                        medal=medal,
                        notes=data.notes,
                    )
                )

        logger.info(
            "%s score entry %s (community=%s sport=%s score=%d)",
            "Created" if created else "Replaced",
            entry.id,
            community_id,
            sport_id,
            score,
        )
        return entry, created

    def update_entry(self, entry_id: str, patch: EntryPatch) -> ScoreEntry:
        changes = patch.model_dump(exclude_unset=True)
        for field in ("community_id", "sport_id", "score"):
            if field in changes and changes[field] is None:
                raise ValidationError(f"'{field}' cannot be null", {field: None})

        current = self._require_entry(entry_id)
        source_sport = current.sport_id
        target_sport = _clean_id(changes.get("sport_id", source_sport), "sport_id")
        if target_sport != source_sport:
            self._require_sport(target_sport)

        with self.locks.hold(source_sport, target_sport):
            self.session.expire_all()
            with transaction(self.session):
                entry = self._require_entry(entry_id)
                if entry.sport_id != source_sport:
                    raise ConflictError(
                        "Entry was moved to another sport concurrently",
                        {"entry_id": entry_id},
                    )

                community_id = _clean_id(
                    changes.get("community_id", entry.community_id), "community_id"
                )
                score = check_score(changes.get("score", entry.score))
                position = check_position(changes.get("position", entry.position))
                if changes.get("medal") is not None:
                    medal = check_medal(position, changes["medal"])
                elif "position" in changes:
                    medal = medal_for_position(position)
                else:
                    medal = check_medal(position, entry.medal)
                notes = changes.get("notes", entry.notes)

                if (community_id, target_sport) != (entry.community_id, entry.sport_id):
                    self.store.require_references(community_id, target_sport)
                    if self.store.get(community_id, target_sport) is not None:
                        raise ConflictError(
                            "Entry already exists for this community and sport",
                            {"community_id": community_id, "sport_id": target_sport},
                        )
                self._ensure_position_free(target_sport, position, entry_id=entry.id)

                entry.community_id = community_id
                entry.sport_id = target_sport
                entry.score = score
                entry.position = position
                entry.medal = medal
                entry.notes = notes
                entry = self.store.put(entry)

        logger.info("Updated score entry %s (%s)", entry_id, ", ".join(sorted(changes)))
        return entry

    def delete_entry(self, entry_id: str) -> None:
        sport_id = self._require_entry(entry_id).sport_id

        with self.locks.hold(sport_id):
            self.session.expire_all()
            with transaction(self.session):
                entry = self._require_entry(entry_id)
                self.store.delete_entry(entry)

        logger.info("Deleted score entry %s", entry_id)

    # Helpers ----------------------------------------------------------------
    def _require_sport(self, sport_id: str) -> None:
        # Checked before taking the lock so unknown ids never get one.
        if not self.directory.sport_exists(sport_id):
            raise UnknownReferenceError("Sport not found", {"sport_id": sport_id})

    def _require_entry(self, entry_id: str) -> ScoreEntry:
        entry = self.store.get_by_id(entry_id)
        if entry is None:
            logger.warning("Score entry %s not found", entry_id)
            raise NotFoundError("Leaderboard entry not found", {"entry_id": entry_id})
        return entry

    def _ensure_position_free(
        self,
        sport_id: str,
        position: Optional[int],
        *,
        community_id: Optional[str] = None,
        entry_id: Optional[str] = None,
    ) -> None:
        """Reject a second entry holding ``position`` in the same sport."""

        if position is None:
            return
        for other in self.store.list_by_sport(sport_id):
            if other.position != position:
                continue
            if other.community_id == community_id or other.id == entry_id:
                continue
            logger.warning(
                "Position %d in sport %s already held by community %s",
                position,
                sport_id,
                other.community_id,
            )
            raise ConflictError(
                f"Position {position} is already taken in this sport",
                {"sport_id": sport_id, "position": position, "community_id": other.community_id},
            )


__all__ = ["LeaderboardMutationCoordinator", "podium_slots"]
