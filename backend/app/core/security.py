"""
Identity token service — issues, verifies and revokes the signed identity
claim carried in the ``token`` cookie.

Tokens are HS256 JWTs holding the login payload plus ``iat``/``exp``.
Revocation is client-side only: the cookie is cleared, there is no
server-side blacklist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt as pyjwt
from fastapi import Response

from app.core.config import Settings
from app.core.constants import AUTH_COOKIE_NAME
from app.core.errors import Forbidden, InvalidSignature, TokenExpired
from app.core.logging import get_logger

logger = get_logger(__name__)

_RESERVED_CLAIMS = ("iat", "exp")


@dataclass(frozen=True)
class IdentityClaim:
    """Decoded, verified identity attached to a request by the access guard."""

    email: str
    issued_at: datetime
    expires_at: datetime
    payload: dict[str, Any] = field(default_factory=dict)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    payload: dict[str, Any],
    *,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """Sign ``payload`` with an expiry of JWT_ACCESS_TOKEN_EXPIRE_MINUTES."""
    issued_at = now or _utcnow()
    expires_at = issued_at + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    claims = {k: v for k, v in payload.items() if k not in _RESERVED_CLAIMS}
    claims["iat"] = int(issued_at.timestamp())
    claims["exp"] = int(expires_at.timestamp())
    return pyjwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(
    token: str,
    *,
    settings: Settings,
    now: datetime | None = None,
) -> IdentityClaim:
    """
    Decode and validate a token issued by ``create_access_token``.

    Raises:
        InvalidSignature: wrong secret, malformed token, or missing claims.
        TokenExpired: signature is valid but ``exp`` has passed.
    """
    try:
        payload = pyjwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={
                "require": ["email", "iat", "exp"],
                "verify_exp": False,
                "verify_iat": False,
            },
        )
        issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc)
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
    except (pyjwt.InvalidTokenError, TypeError, ValueError) as exc:
        raise InvalidSignature("Invalid token", details={"reason": str(exc)}) from exc

    # exp is compared against ``now`` here, not inside PyJWT.
    if (now or _utcnow()) >= expires_at:
        raise TokenExpired("Token expired")

    return IdentityClaim(
        email=str(payload["email"]),
        issued_at=issued_at,
        expires_at=expires_at,
        payload={k: v for k, v in payload.items() if k not in _RESERVED_CLAIMS},
    )


def _cookie_profile(settings: Settings) -> dict[str, Any]:
    """Cross-site + secure in production, strict same-site cookie in development."""
    if settings.is_production:
        return {"httponly": True, "secure": True, "samesite": "none"}
    return {"httponly": True, "secure": False, "samesite": "strict"}


def set_auth_cookie(response: Response, token: str, *, settings: Settings) -> None:
    """Attach the issued token to the response as the ``token`` cookie."""
    response.set_cookie(
        AUTH_COOKIE_NAME,
        token,
        max_age=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        **_cookie_profile(settings),
    )


def clear_auth_cookie(response: Response, *, settings: Settings) -> None:
    """Instruct the client to drop the ``token`` cookie."""
    response.delete_cookie(AUTH_COOKIE_NAME, **_cookie_profile(settings))


def ensure_identity(claim: IdentityClaim, email: str) -> None:
    """Raise Forbidden unless the verified claim belongs to ``email``."""
    if claim.email != email:
        logger.warning("Ownership check failed", claim_email=claim.email, requested_email=email)
        raise Forbidden("Forbidden access")
