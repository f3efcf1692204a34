"""Database configuration and session helpers."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from .config import DATA_DIR, DATABASE_URL


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """Turn on SQLite foreign key enforcement for every new connection.

    Score entries rely on ``ON DELETE CASCADE`` to follow community and sport
    deletions; SQLite ignores foreign keys unless asked per connection.
    """

    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, _record):  # pragma: no cover - driver hook
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    built = create_engine(url, connect_args=connect_args)
    enable_sqlite_foreign_keys(built)
    return built


if DATABASE_URL.startswith("sqlite:///"):
    DATA_DIR.mkdir(parents=True, exist_ok=True)

engine = build_engine(DATABASE_URL)


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit the work done inside the block, or roll all of it back."""

    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise


__all__ = [
    "build_engine",
    "enable_sqlite_foreign_keys",
    "engine",
    "get_session",
    "transaction",
]
