"""Course endpoints: listing, search, owner listing and CRUD."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.deps import get_current_claim, get_db
from app.api.schemas.courses import CourseCreate, CourseUpdate
from app.api.schemas.results import DeleteResponse, InsertResponse, UpdateResponse
from app.core.security import IdentityClaim
from app.repositories import courses as course_repository

router = APIRouter(tags=["Courses"])


@router.get("/courses")
async def list_courses(db: AsyncIOMotorDatabase = Depends(get_db)) -> list[dict[str, Any]]:
    """Every course, unfiltered."""
    return await course_repository.list_courses(db)


@router.get("/course/{course_id}")
async def get_course(course_id: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> dict[str, Any]:
    """Single course by id (404 when missing)."""
    return await course_repository.get_course_by_id(db, course_id)


@router.get("/courses/{email}")
async def list_my_courses(
    email: str,
    db: AsyncIOMotorDatabase = Depends(get_db),
    claim: IdentityClaim = Depends(get_current_claim),
) -> list[dict[str, Any]]:
    """Courses posted by ``email``; only that user may ask."""
    return await course_repository.list_courses_by_owner(db, email, claim)


@router.get("/all-courses")
async def search_courses(
    filter: str | None = Query(None, description="Category to match exactly"),
    search: str | None = Query(None, description="Case-insensitive title substring; overrides filter"),
    sort: str | None = Query(None, description='"asc" for earliest deadline first, else latest first'),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> list[dict[str, Any]]:
    """Filtered, deadline-ordered course list."""
    return await course_repository.search_courses(db, category=filter, search=search, sort=sort)


@router.post("/add-course", response_model=InsertResponse)
async def add_course(payload: CourseCreate, db: AsyncIOMotorDatabase = Depends(get_db)) -> InsertResponse:
    inserted_id = await course_repository.create_course(db, payload.model_dump())
    return InsertResponse(insertedId=inserted_id)


@router.delete("/course/{course_id}", response_model=DeleteResponse)
async def delete_course(course_id: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> DeleteResponse:
    deleted = await course_repository.delete_course(db, course_id)
    return DeleteResponse(deletedCount=deleted)


@router.put("/update-course/{course_id}", response_model=UpdateResponse)
async def update_course(
    course_id: str,
    payload: CourseUpdate,
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> UpdateResponse:
    """Replace the sent fields; creates the course when the id is unknown."""
    result = await course_repository.update_course(
        db,
        course_id,
        payload.model_dump(exclude_unset=True),
        upsert=True,
    )
    return UpdateResponse.from_result(result)
