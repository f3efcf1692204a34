"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core import LeaderboardError, get_logger
from .routers import ALL_ROUTERS

logger = get_logger(__name__)


async def _leaderboard_error_handler(request: Request, exc: LeaderboardError) -> JSONResponse:
    logger.info(
        "%s %s rejected with %s: %s", request.method, request.url.path, exc.error_code, exc.message
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and the domain error handler."""

    app.add_exception_handler(LeaderboardError, _leaderboard_error_handler)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_routes"]
