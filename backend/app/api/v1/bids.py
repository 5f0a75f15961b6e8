"""Bid endpoints: poster and bidder listings, submission and status."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.deps import get_current_claim, get_db
from app.api.schemas.bids import BidCreate, BidStatusUpdate
from app.api.schemas.results import InsertResponse, UpdateResponse
from app.core.security import IdentityClaim
from app.repositories import bids as bid_repository

router = APIRouter(tags=["Bids"])


@router.get("/bids")
async def list_bid_requests(
    posterEmail: str = Query(...),
    db: AsyncIOMotorDatabase = Depends(get_db),
    claim: IdentityClaim = Depends(get_current_claim),
) -> list[dict[str, Any]]:
    """Bids received on the caller's own courses."""
    return await bid_repository.list_bids_by_poster(db, posterEmail, claim)


@router.get("/my-bids/{email}")
async def list_my_bids(
    email: str,
    db: AsyncIOMotorDatabase = Depends(get_db),
    claim: IdentityClaim = Depends(get_current_claim),
) -> list[dict[str, Any]]:
    """Bids the caller has placed."""
    return await bid_repository.list_bids_by_bidder(db, email, claim)


@router.post("/add-bid", response_model=InsertResponse)
async def add_bid(payload: BidCreate, db: AsyncIOMotorDatabase = Depends(get_db)) -> InsertResponse:
    """Place a bid and increment the course's bidCount."""
    inserted_id = await bid_repository.create_bid(db, payload.model_dump())
    return InsertResponse(insertedId=inserted_id)


@router.patch("/bid-status/{bid_id}", response_model=UpdateResponse)
async def update_bid_status(
    bid_id: str,
    payload: BidStatusUpdate,
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> UpdateResponse:
    previous = await bid_repository.set_bid_status(db, bid_id, payload.status)
    return UpdateResponse.from_previous(previous, {"status": payload.status})
