"""Authentication request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Identity payload signed into the token. Extra keys are kept in the claim."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=3, max_length=320)


class SuccessResponse(BaseModel):
    """Returned by login and logout."""

    success: bool = True
