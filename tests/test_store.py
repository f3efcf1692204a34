"""
Tests for ScoreEntryStore against SQLite.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from festival.core.errors import NotFoundError, UnknownReferenceError
from festival.models import Community, Medal, ScoreEntry
from festival.services import ScoreEntryStore


@pytest.fixture
def store(session, seed):
    return ScoreEntryStore(session)


class TestPut:
    def test_creates_entry(self, store, session):
        entry = store.put(ScoreEntry(community_id="nairobi", sport_id="football", score=10))
        session.commit()

        assert store.get("nairobi", "football").id == entry.id
        assert store.list_by_sport("football") == [entry]

    def test_upsert_keeps_id_and_created_at(self, store, session):
        first = store.put(ScoreEntry(community_id="nairobi", sport_id="football", score=3))
        session.commit()
        original_id, original_created = first.id, first.created_at

        replaced = store.put(
            ScoreEntry(
                community_id="nairobi",
                sport_id="football",
                score=10,
                position=1,
                medal=Medal.GOLD,
            )
        )
        session.commit()

        assert replaced.id == original_id
        assert replaced.created_at == original_created
        assert replaced.score == 10
        assert len(store.list_all()) == 1

    def test_unknown_community(self, store):
        with pytest.raises(UnknownReferenceError):
            store.put(ScoreEntry(community_id="atlantis", sport_id="football", score=1))

    def test_unknown_sport_is_not_found_class(self, store):
        with pytest.raises(NotFoundError):
            store.put(ScoreEntry(community_id="nairobi", sport_id="chess", score=1))

    def test_unique_constraint_backs_the_key(self, session, seed):
        session.add(ScoreEntry(community_id="nairobi", sport_id="football", score=1))
        session.add(ScoreEntry(community_id="nairobi", sport_id="football", score=2))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()


class TestReads:
    def test_unknown_ids_read_empty(self, store):
        assert store.get("atlantis", "football") is None
        assert store.list_by_sport("chess") == []
        assert store.list_by_community("atlantis") == []
        assert store.get_by_id("missing") is None

    def test_list_by_community(self, store, session):
        store.put(ScoreEntry(community_id="kibera", sport_id="football", score=1))
        store.put(ScoreEntry(community_id="kibera", sport_id="basketball", score=2))
        store.put(ScoreEntry(community_id="nairobi", sport_id="basketball", score=2))
        session.commit()

        assert {e.sport_id for e in store.list_by_community("kibera")} == {
            "football",
            "basketball",
        }


class TestDelete:
    def test_delete_by_key(self, store, session):
        store.put(ScoreEntry(community_id="kibera", sport_id="football", score=1))
        session.commit()

        assert store.delete("kibera", "football") is True
        session.commit()
        assert store.get("kibera", "football") is None
        assert store.delete("kibera", "football") is False

    def test_delete_unknown_reference(self, store):
        with pytest.raises(UnknownReferenceError):
            store.delete("atlantis", "football")

    def test_community_deletion_cascades(self, store, session):
        store.put(ScoreEntry(community_id="kibera", sport_id="football", score=1))
        session.commit()

        session.delete(session.get(Community, "kibera"))
        session.commit()

        assert store.list_all() == []
