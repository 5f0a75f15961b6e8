"""
Course repository — data-access operations for the ``courses`` collection.

Repository rules:
- Pure data-access logic only
- Every function receives the Motor database explicitly
- Ownership-scoped reads take the caller's verified IdentityClaim
"""

from __future__ import annotations

import re
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.results import UpdateResult

from app.core.constants import COURSES_COLLECTION, SortOrder
from app.core.errors import InvalidInput, NotFound
from app.core.logging import get_logger
from app.core.security import IdentityClaim, ensure_identity
from app.db.mongo import parse_object_id, sanitize_doc, sanitize_many, store_operation

logger = get_logger(__name__)


def _courses(db: AsyncIOMotorDatabase):
    return db[COURSES_COLLECTION]


def build_search_query(
    category: str | None = None,
    search: str | None = None,
) -> dict[str, Any]:
    """
    Compose the course search filter.

    ``search`` replaces the category filter rather than narrowing it:
    when both are given only the title match applies.
    """
    query: dict[str, Any] = {}
    if category:
        query = {"category": category}
    if search:
        query = {"course_title": {"$regex": re.escape(search), "$options": "i"}}
    return query


@store_operation("courses.list_all")
async def list_courses(db: AsyncIOMotorDatabase) -> list[dict[str, Any]]:
    """Unfiltered scan of every course."""
    return sanitize_many([doc async for doc in _courses(db).find()])


@store_operation("courses.get")
async def get_course_by_id(db: AsyncIOMotorDatabase, course_id: str) -> dict[str, Any]:
    """Fetch a course by ObjectId string. Raises NotFound when missing."""
    doc = await _courses(db).find_one({"_id": parse_object_id(course_id)})
    if doc is None:
        raise NotFound("Course not found", details={"id": course_id})
    return sanitize_doc(doc)


@store_operation("courses.list_by_owner")
async def list_courses_by_owner(
    db: AsyncIOMotorDatabase,
    email: str,
    claim: IdentityClaim,
) -> list[dict[str, Any]]:
    """Courses posted by ``email``; the caller must be ``email``."""
    ensure_identity(claim, email)
    cursor = _courses(db).find({"poster.email": email})
    return sanitize_many([doc async for doc in cursor])


@store_operation("courses.search")
async def search_courses(
    db: AsyncIOMotorDatabase,
    *,
    category: str | None = None,
    search: str | None = None,
    sort: str | None = None,
) -> list[dict[str, Any]]:
    """Filter by category or title, ordered by deadline."""
    order = SortOrder.parse(sort)
    query = build_search_query(category, search)
    cursor = _courses(db).find(query, sort=[("deadline", order.direction)])
    return sanitize_many([doc async for doc in cursor])


@store_operation("courses.create")
async def create_course(db: AsyncIOMotorDatabase, data: dict[str, Any]) -> str:
    """Insert a course and return its new id."""
    doc = {k: v for k, v in data.items() if k != "_id"}
    doc.setdefault("bidCount", 0)
    result = await _courses(db).insert_one(doc)
    logger.info("Course created", course_id=str(result.inserted_id))
    return str(result.inserted_id)


@store_operation("courses.delete")
async def delete_course(db: AsyncIOMotorDatabase, course_id: str) -> int:
    """Delete by id. Returns the deleted count (0 when nothing matched)."""
    result = await _courses(db).delete_one({"_id": parse_object_id(course_id)})
    logger.info("Course delete", course_id=course_id, deleted=result.deleted_count)
    return result.deleted_count


@store_operation("courses.update")
async def update_course(
    db: AsyncIOMotorDatabase,
    course_id: str,
    data: dict[str, Any],
    *,
    upsert: bool = True,
) -> UpdateResult:
    """
    ``$set`` the given fields on a course.

    With ``upsert`` (the default) an unknown id creates a new course
    holding ``data`` under that id.
    """
    oid = parse_object_id(course_id)
    fields = {k: v for k, v in data.items() if k != "_id"}
    if not fields:
        raise InvalidInput("No fields to update")

    result = await _courses(db).update_one({"_id": oid}, {"$set": fields}, upsert=upsert)
    logger.info(
        "Course update",
        course_id=course_id,
        matched=result.matched_count,
        modified=result.modified_count,
        upserted=result.upserted_id is not None,
    )
    return result


@store_operation("courses.increment_bid_count")
async def increment_bid_count(db: AsyncIOMotorDatabase, course_id: str) -> None:
    """
    Atomically add one to ``bidCount`` (a missing field counts as 0).

    A single ``$inc`` so concurrent bids never overwrite each other's
    increment.
    """
    await _courses(db).update_one({"_id": parse_object_id(course_id)}, {"$inc": {"bidCount": 1}})
