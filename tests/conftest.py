"""Shared fixtures: in-memory SQLite database seeded with communities and sports."""

from __future__ import annotations

import os
from datetime import datetime, timedelta
from types import SimpleNamespace

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from festival.core.database import enable_sqlite_foreign_keys
from festival.models import Community, Medal, ScoreEntry, Sport
from festival.services import LeaderboardMutationCoordinator, PodiumPoints, SportLocks

ADMIN = ("admin", "changeme")


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def seed(session):
    """Four communities and three sports; ids are readable slugs."""

    communities = {
        slug: Community(id=slug, name=name)
        for slug, name in (
            ("nairobi", "Nairobi"),
            ("westlands", "Westlands"),
            ("parklands", "Parklands"),
            ("kibera", "Kibera"),
        )
    }
    sports = {
        slug: Sport(id=slug, name=name)
        for slug, name in (
            ("football", "Football"),
            ("basketball", "Basketball"),
            ("athletics", "Athletics"),
        )
    }
    session.add_all([*communities.values(), *sports.values()])
    session.commit()
    return SimpleNamespace(communities=communities, sports=sports)


@pytest.fixture
def coordinator(session, seed):
    return LeaderboardMutationCoordinator(session, locks=SportLocks(), points=PodiumPoints())


def make_entry(
    community_id: str,
    sport_id: str,
    score: int,
    position: int | None = None,
    medal: Medal = Medal.NONE,
    minute: int = 0,
    entry_id: str | None = None,
) -> ScoreEntry:
    """Build a detached entry with a controlled creation time."""

    created = datetime(2025, 11, 1, 9, 0) + timedelta(minutes=minute)
    return ScoreEntry(
        id=entry_id or f"{community_id}-{sport_id}",
        community_id=community_id,
        sport_id=sport_id,
        score=score,
        position=position,
        medal=medal,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def entry_factory():
    return make_entry
