"""Authentication endpoints: issue and revoke the identity cookie."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.api.deps import get_context
from app.api.schemas.auth import LoginRequest, SuccessResponse
from app.core.context import AppContext
from app.core.logging import get_logger
from app.core.security import clear_auth_cookie, create_access_token, set_auth_cookie

router = APIRouter(tags=["Auth"])
logger = get_logger(__name__)


@router.post("/jwt-access", response_model=SuccessResponse)
async def issue_token(
    payload: LoginRequest,
    response: Response,
    context: AppContext = Depends(get_context),
) -> SuccessResponse:
    """Sign the posted identity and set it as the ``token`` cookie."""
    token = create_access_token(payload.model_dump(), settings=context.settings)
    set_auth_cookie(response, token, settings=context.settings)
    logger.info("Token issued", email=payload.email)
    return SuccessResponse()


@router.post("/log-out", response_model=SuccessResponse)
async def log_out(
    response: Response,
    context: AppContext = Depends(get_context),
) -> SuccessResponse:
    """Clear the ``token`` cookie. There is no server-side revocation."""
    clear_auth_cookie(response, settings=context.settings)
    logger.info("Token cleared")
    return SuccessResponse()
