"""
Tests for the overall community ranking.
"""

from festival.models import Medal
from festival.services.aggregate import rank_overall

NAMES = {
    "nairobi": "Nairobi",
    "westlands": "Westlands",
    "parklands": "Parklands",
    "kibera": "Kibera",
}


class TestTotals:
    def test_festival_scenario(self, entry_factory):
        entries = [
            entry_factory("nairobi", "football", 10, 1, Medal.GOLD),
            entry_factory("westlands", "football", 7, 2, Medal.SILVER),
            entry_factory("nairobi", "basketball", 7, 2, Medal.SILVER),
            entry_factory("parklands", "basketball", 10, 1, Medal.GOLD),
        ]
        standings = rank_overall(entries, NAMES)

        assert [(s.community_name, s.total_score, s.rank, s.entry_count) for s in standings] == [
            ("Nairobi", 17, 1, 2),
            ("Parklands", 10, 2, 1),
            ("Westlands", 7, 3, 1),
        ]

    def test_total_matches_sum_of_entries(self, entry_factory):
        entries = [
            entry_factory("kibera", "football", 3),
            entry_factory("kibera", "basketball", 0),
            entry_factory("kibera", "athletics", 5, 3, Medal.BRONZE),
        ]
        (standing,) = rank_overall(entries, NAMES)

        assert standing.total_score == 8
        # Zero-score participation still counts as a sport entered.
        assert standing.entry_count == 3

    def test_no_entries_no_rows(self):
        assert rank_overall([], NAMES) == []


class TestTies:
    """Standard competition ranking: 1, 1, 3."""

    def test_shared_rank_then_skip(self, entry_factory):
        entries = [
            entry_factory("westlands", "football", 17),
            entry_factory("nairobi", "football", 17),
            entry_factory("parklands", "football", 10),
        ]
        standings = rank_overall(entries, NAMES)

        assert [s.rank for s in standings] == [1, 1, 3]
        # Tied rows are listed by community name.
        assert [s.community_name for s in standings[:2]] == ["Nairobi", "Westlands"]

    def test_tie_below_the_top(self, entry_factory):
        entries = [
            entry_factory("nairobi", "football", 20),
            entry_factory("westlands", "football", 5),
            entry_factory("parklands", "football", 5),
            entry_factory("kibera", "football", 5),
            entry_factory("kibera", "basketball", 0),
        ]
        standings = rank_overall(entries, NAMES)

        assert [(s.community_name, s.rank) for s in standings] == [
            ("Nairobi", 1),
            ("Kibera", 2),
            ("Parklands", 2),
            ("Westlands", 2),
        ]

    def test_rank_counts_strictly_greater_totals(self, entry_factory):
        entries = [
            entry_factory(cid, "football", score)
            for cid, score in (("nairobi", 9), ("westlands", 9), ("parklands", 9), ("kibera", 1))
        ]
        standings = rank_overall(entries, NAMES)

        for standing in standings:
            greater = sum(1 for other in standings if other.total_score > standing.total_score)
            assert standing.rank == 1 + greater
