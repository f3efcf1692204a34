"""
Tests for the per-sport podium ranker.
"""

from festival.models import Medal
from festival.services.ranking import EMPTY_SLOT, rank_sport

NAMES = {
    "nairobi": "Nairobi",
    "westlands": "Westlands",
    "parklands": "Parklands",
    "kibera": "Kibera",
}


class TestPodiumSlots:
    """Podium slots come from explicit positions."""

    def test_full_podium(self, entry_factory):
        entries = [
            entry_factory("westlands", "football", 7, 2, Medal.SILVER, minute=1),
            entry_factory("nairobi", "football", 10, 1, Medal.GOLD, minute=0),
            entry_factory("parklands", "football", 5, 3, Medal.BRONZE, minute=2),
        ]
        podium = rank_sport(entries, NAMES, sport_id="football", sport_name="Football")

        assert [slot.display for slot in podium.slots] == ["Nairobi", "Westlands", "Parklands"]
        assert [slot.entry.rank for slot in podium.slots] == [1, 2, 3]
        assert podium.residual == []
        assert podium.sport_name == "Football"

    def test_empty_sport(self):
        podium = rank_sport([], NAMES)

        assert [slot.entry for slot in podium.slots] == [None, None, None]
        assert [slot.display for slot in podium.slots] == [EMPTY_SLOT] * 3
        assert podium.residual == []

    def test_sparse_podium_renders_dashes(self, entry_factory):
        entries = [entry_factory("kibera", "football", 5, 3, Medal.BRONZE)]
        podium = rank_sport(entries, NAMES)

        assert podium.slot(1).entry is None
        assert podium.slot(2).entry is None
        assert podium.slot(1).display == "-"
        assert podium.slot(3).display == "Kibera"
        assert podium.slot(3).label == "3rd"

    def test_duplicate_position_first_encountered_wins(self, entry_factory):
        entries = [
            entry_factory("westlands", "football", 10, 1, Medal.GOLD, minute=5),
            entry_factory("nairobi", "football", 10, 1, Medal.GOLD, minute=1),
        ]
        podium = rank_sport(entries, NAMES)

        assert podium.slot(1).entry.community_id == "nairobi"
        assert [entry.community_id for entry in podium.residual] == ["westlands"]
        assert podium.residual[0].rank == 4


class TestParticipants:
    """Entries without a podium position are listed after the podium."""

    def test_ordered_by_score_then_creation(self, entry_factory):
        entries = [
            entry_factory("kibera", "football", 2, minute=3),
            entry_factory("parklands", "football", 4, minute=2),
            entry_factory("westlands", "football", 2, minute=1),
            entry_factory("nairobi", "football", 10, 1, Medal.GOLD, minute=0),
        ]
        podium = rank_sport(entries, NAMES)

        assert [entry.community_id for entry in podium.residual] == [
            "parklands",
            "westlands",
            "kibera",
        ]
        assert [entry.rank for entry in podium.residual] == [4, 5, 6]

    def test_position_beyond_podium_is_participant(self, entry_factory):
        entries = [entry_factory("kibera", "football", 1, 4)]
        podium = rank_sport(entries, NAMES)

        assert all(slot.entry is None for slot in podium.slots)
        assert podium.residual[0].position == 4

    def test_unknown_community_name_falls_back_to_id(self, entry_factory):
        podium = rank_sport([entry_factory("ghost", "football", 3)], {})

        assert podium.residual[0].community_name == "ghost"

    def test_pure_and_repeatable(self, entry_factory):
        entries = [
            entry_factory("nairobi", "football", 10, 1, Medal.GOLD),
            entry_factory("kibera", "football", 3, minute=1),
        ]
        assert rank_sport(entries, NAMES) == rank_sport(list(reversed(entries)), NAMES)
