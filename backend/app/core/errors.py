"""
Domain-specific exception hierarchy for the API.

Every error raised by the data-access layer or the access guard inherits
from AppError, which carries the HTTP status it is rendered with.  The
single handler registered in ``app.main`` turns any AppError into a
``{"message": ...}`` JSON body.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, **self.details}


class Unauthenticated(AppError):
    """No identity claim, or one that cannot be verified."""

    status_code = 401


class InvalidSignature(Unauthenticated):
    """Token was not signed with the server secret, or is malformed."""
    pass


class TokenExpired(Unauthenticated):
    """Token signature is valid but its expiry has passed."""
    pass


class Forbidden(AppError):
    """Claim identity does not own the requested resource."""

    status_code = 403


class NotFound(AppError):
    """No document matches the given id."""

    status_code = 404


class InvalidInput(AppError):
    """Malformed request data, such as an id that is not an ObjectId."""

    status_code = 400


class InvalidStatus(InvalidInput):
    """Bid status outside the BidStatus enum."""
    pass


class StoreFailure(AppError):
    """The underlying MongoDB operation failed."""

    status_code = 500
