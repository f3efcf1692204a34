"""Shared FastAPI dependencies."""

from __future__ import annotations

import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlmodel import Session

from ..core import ADMIN_PASS, ADMIN_USER, get_session
from ..services import LeaderboardMutationCoordinator, LeaderboardQueries

security = HTTPBasic()


def require_admin(credentials: HTTPBasicCredentials = Depends(security)) -> bool:
    ok_user = secrets.compare_digest(credentials.username, ADMIN_USER)
    ok_pass = secrets.compare_digest(credentials.password, ADMIN_PASS)
    if not (ok_user and ok_pass):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return True


def get_queries(session: Session = Depends(get_session)) -> LeaderboardQueries:
    return LeaderboardQueries(session)


def get_coordinator(session: Session = Depends(get_session)) -> LeaderboardMutationCoordinator:
    return LeaderboardMutationCoordinator(session)


__all__ = ["get_coordinator", "get_queries", "require_admin", "security"]
