"""
Bid repository — data-access operations for the ``bids`` collection.

Bids are read from two vantage points: the poster of the course
(``posterEmail``) and the bidder (``email``).  Each listing requires
the caller's claim to match the email being queried.

Creating a bid also maintains the course's ``bidCount`` aggregate.
"""

from __future__ import annotations

from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.core.constants import BIDS_COLLECTION, COURSES_COLLECTION, BidStatus
from app.core.errors import InvalidStatus, NotFound
from app.core.logging import get_logger
from app.core.security import IdentityClaim, ensure_identity
from app.db.mongo import parse_object_id, sanitize_doc, sanitize_many, store_operation
from app.repositories import courses as course_repository

logger = get_logger(__name__)


def _bids(db: AsyncIOMotorDatabase):
    return db[BIDS_COLLECTION]


def parse_status(value: Any) -> BidStatus:
    """Map a raw status to BidStatus, raising InvalidStatus otherwise."""
    try:
        return BidStatus(value)
    except ValueError:
        raise InvalidStatus(
            "Invalid bid status",
            details={"status": value, "allowed": [s.value for s in BidStatus]},
        ) from None


@store_operation("bids.list_by_poster")
async def list_bids_by_poster(
    db: AsyncIOMotorDatabase,
    poster_email: str,
    claim: IdentityClaim,
) -> list[dict[str, Any]]:
    """Bids placed on courses posted by ``poster_email``."""
    ensure_identity(claim, poster_email)
    cursor = _bids(db).find({"posterEmail": poster_email})
    return sanitize_many([doc async for doc in cursor])


@store_operation("bids.list_by_bidder")
async def list_bids_by_bidder(
    db: AsyncIOMotorDatabase,
    email: str,
    claim: IdentityClaim,
) -> list[dict[str, Any]]:
    """Bids placed by ``email``."""
    ensure_identity(claim, email)
    cursor = _bids(db).find({"email": email})
    return sanitize_many([doc async for doc in cursor])


@store_operation("bids.create")
async def create_bid(db: AsyncIOMotorDatabase, data: dict[str, Any]) -> str:
    """
    Insert a bid in PENDING status and bump the course's bidCount.

    The course must exist when the bid is placed.  Insert and increment
    are two single-document writes, not a transaction: if the process
    dies between them the count stays one short.
    """
    course_id = str(data.get("courseId", ""))
    course_oid = parse_object_id(course_id, field="courseId")

    if await db[COURSES_COLLECTION].find_one({"_id": course_oid}, projection={"_id": True}) is None:
        raise NotFound("Course not found", details={"courseId": course_id})

    doc = {k: v for k, v in data.items() if k != "_id"}
    doc["courseId"] = course_id
    doc["status"] = BidStatus.PENDING.value

    result = await _bids(db).insert_one(doc)
    await course_repository.increment_bid_count(db, course_id)

    logger.info("Bid created", bid_id=str(result.inserted_id), course_id=course_id)
    return str(result.inserted_id)


@store_operation("bids.set_status")
async def set_bid_status(
    db: AsyncIOMotorDatabase,
    bid_id: str,
    status: Any,
) -> dict[str, Any] | None:
    """
    ``$set`` the status of one bid; no other field is touched.

    Returns ``{"_id", "status"}`` of the bid as it was before the update,
    or None when no bid matched.  Any status may follow any other; moving
    a bid out of a terminal status is allowed but logged.
    """
    new_status = parse_status(status)
    oid = parse_object_id(bid_id)

    previous = await _bids(db).find_one_and_update(
        {"_id": oid},
        {"$set": {"status": new_status.value}},
        projection={"status": True},
        return_document=ReturnDocument.BEFORE,
    )
    if previous is None:
        logger.info("Bid status update matched nothing", bid_id=bid_id)
        return None

    old = previous.get("status")
    if _is_terminal(old) and old != new_status.value:
        logger.warning("Bid left terminal status", bid_id=bid_id, old=old, new=new_status.value)

    logger.info("Bid status updated", bid_id=bid_id, status=new_status.value)
    return sanitize_doc(previous)


def _is_terminal(value: Any) -> bool:
    return value in {s.value for s in BidStatus} and BidStatus(value).is_terminal
