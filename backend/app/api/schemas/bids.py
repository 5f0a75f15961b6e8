"""Bid request schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BidCreate(BaseModel):
    """Payload for POST /add-bid. Status is always set to Pending on insert."""

    model_config = ConfigDict(extra="allow")

    courseId: str
    email: str = Field(..., min_length=3, max_length=320)
    posterEmail: str = Field(..., min_length=3, max_length=320)


class BidStatusUpdate(BaseModel):
    """Payload for PATCH /bid-status/{id}.

    Kept as a plain string so unknown values reach the repository and
    fail with InvalidStatus (400) instead of a 422.
    """

    status: str
