"""Bearer token authentication for request handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool

from error_reports.domain.models import Actor  # noqa: TC001

if TYPE_CHECKING:
    from error_reports.containers import AppContainer


async def require_actor(
    request: Request, authorization: str | None = Header(default=None)
) -> Actor:
    """Resolve the request's bearer token to an actor."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    container: AppContainer = request.app.state.container
    actor = await run_in_threadpool(container.user_service.authenticate, token)
    if actor is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return actor
