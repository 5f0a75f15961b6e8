"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.constants import AUTH_COOKIE_NAME
from app.core.context import AppContext
from app.core.errors import Unauthenticated
from app.core.logging import get_logger
from app.core.security import IdentityClaim, verify_access_token

logger = get_logger(__name__)

cookie_scheme = APIKeyCookie(name=AUTH_COOKIE_NAME, auto_error=False)


def get_context(request: Request) -> AppContext:
    """Return the AppContext built by the application lifespan."""
    return request.app.state.context


def get_db(context: AppContext = Depends(get_context)) -> AsyncIOMotorDatabase:
    """Return the Motor database handle."""
    return context.db


async def get_current_claim(
    request: Request,
    token: str | None = Depends(cookie_scheme),
    context: AppContext = Depends(get_context),
) -> IdentityClaim:
    """Verify the ``token`` cookie and attach the claim to ``request.state.user``."""
    if not token:
        logger.warning("Rejected request without token", path=request.url.path)
        raise Unauthenticated("Unauthorized access")

    try:
        claim = verify_access_token(token, settings=context.settings)
    except Unauthenticated as exc:
        logger.warning(
            "Rejected request with bad token",
            path=request.url.path,
            reason=type(exc).__name__,
        )
        raise Unauthenticated("Unauthorized access") from exc

    request.state.user = claim
    return claim
