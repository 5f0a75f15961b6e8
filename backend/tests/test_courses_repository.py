"""Tests for the course repository against an in-memory Motor store."""

from __future__ import annotations

import pytest
from bson import ObjectId

from app.core.errors import Forbidden, InvalidInput, NotFound
from app.repositories import courses as course_repository
from app.repositories.courses import build_search_query

from factories import POSTER_EMAIL, course_doc


class TestBuildSearchQuery:
    def test_no_params_matches_everything(self) -> None:
        assert build_search_query() == {}

    def test_category_only(self) -> None:
        assert build_search_query("Graphics Design") == {"category": "Graphics Design"}

    def test_search_replaces_category(self) -> None:
        query = build_search_query("math", "intro")
        assert query == {"course_title": {"$regex": "intro", "$options": "i"}}

    def test_search_is_literal_substring(self) -> None:
        query = build_search_query(search="c++ (basics)")
        assert query["course_title"]["$regex"] == r"c\+\+\ \(basics\)"


class TestListAndGet:
    @pytest.mark.asyncio
    async def test_list_all(self, db) -> None:
        await course_repository.create_course(db, course_doc(title="A"))
        await course_repository.create_course(db, course_doc(title="B"))

        courses = await course_repository.list_courses(db)
        assert sorted(c["course_title"] for c in courses) == ["A", "B"]
        assert all(isinstance(c["_id"], str) for c in courses)

    @pytest.mark.asyncio
    async def test_get_by_id(self, db) -> None:
        course_id = await course_repository.create_course(db, course_doc(title="A"))
        course = await course_repository.get_course_by_id(db, course_id)
        assert course["_id"] == course_id
        assert course["bidCount"] == 0

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, db) -> None:
        with pytest.raises(NotFound):
            await course_repository.get_course_by_id(db, str(ObjectId()))

    @pytest.mark.asyncio
    async def test_get_malformed_id_raises_invalid_input(self, db) -> None:
        with pytest.raises(InvalidInput):
            await course_repository.get_course_by_id(db, "not-an-object-id")


class TestListByOwner:
    @pytest.mark.asyncio
    async def test_returns_only_owned_courses(self, db, poster_claim) -> None:
        await course_repository.create_course(db, course_doc(title="Mine"))
        await course_repository.create_course(
            db, course_doc(title="Theirs", poster_email="other@example.com")
        )

        courses = await course_repository.list_courses_by_owner(db, POSTER_EMAIL, poster_claim)
        assert [c["course_title"] for c in courses] == ["Mine"]
        assert all(c["poster"]["email"] == POSTER_EMAIL for c in courses)

    @pytest.mark.asyncio
    async def test_other_identity_is_forbidden(self, db, bidder_claim) -> None:
        await course_repository.create_course(db, course_doc(title="Mine"))
        with pytest.raises(Forbidden):
            await course_repository.list_courses_by_owner(db, POSTER_EMAIL, bidder_claim)


class TestSearch:
    @pytest.fixture
    def seeded(self, db):
        async def _seed() -> None:
            for doc in (
                course_doc(title="Intro to Algebra", category="math", deadline="2026-05-01"),
                course_doc(title="Advanced Calculus", category="math", deadline="2026-03-01"),
                course_doc(title="INTRO to Painting", category="art", deadline="2026-04-01"),
            ):
                await course_repository.create_course(db, doc)

        return _seed

    @pytest.mark.asyncio
    async def test_filter_by_category(self, db, seeded) -> None:
        await seeded()
        courses = await course_repository.search_courses(db, category="math")
        assert {c["course_title"] for c in courses} == {"Intro to Algebra", "Advanced Calculus"}

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, db, seeded) -> None:
        await seeded()
        courses = await course_repository.search_courses(db, search="intro")
        assert {c["course_title"] for c in courses} == {"Intro to Algebra", "INTRO to Painting"}

    @pytest.mark.asyncio
    async def test_search_dominates_filter(self, db, seeded) -> None:
        await seeded()
        both = await course_repository.search_courses(db, category="math", search="intro")
        search_only = await course_repository.search_courses(db, search="intro")
        assert [c["_id"] for c in both] == [c["_id"] for c in search_only]
        assert any(c["category"] == "art" for c in both)

    @pytest.mark.asyncio
    async def test_sort_ascending(self, db, seeded) -> None:
        await seeded()
        courses = await course_repository.search_courses(db, sort="asc")
        assert [c["deadline"] for c in courses] == ["2026-03-01", "2026-04-01", "2026-05-01"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sort", ["desc", None, "newest", "ASC"])
    async def test_anything_else_sorts_descending(self, db, seeded, sort) -> None:
        await seeded()
        courses = await course_repository.search_courses(db, sort=sort)
        assert [c["deadline"] for c in courses] == ["2026-05-01", "2026-04-01", "2026-03-01"]


class TestWrites:
    @pytest.mark.asyncio
    async def test_create_defaults_bid_count(self, db) -> None:
        course_id = await course_repository.create_course(db, course_doc())
        stored = await db["courses"].find_one({"_id": ObjectId(course_id)})
        assert stored["bidCount"] == 0

    @pytest.mark.asyncio
    async def test_delete_existing(self, db) -> None:
        course_id = await course_repository.create_course(db, course_doc())
        assert await course_repository.delete_course(db, course_id) == 1
        assert await db["courses"].count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_delete_missing_returns_zero(self, db) -> None:
        assert await course_repository.delete_course(db, str(ObjectId())) == 0

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, db) -> None:
        with pytest.raises(InvalidInput):
            await course_repository.delete_course(db, "123")

    @pytest.mark.asyncio
    async def test_update_sets_only_given_fields(self, db) -> None:
        course_id = await course_repository.create_course(db, course_doc(bidCount=3))
        result = await course_repository.update_course(db, course_id, {"deadline": "2027-01-01"})

        assert result.matched_count == 1
        stored = await course_repository.get_course_by_id(db, course_id)
        assert stored["deadline"] == "2027-01-01"
        assert stored["bidCount"] == 3
        assert stored["course_title"] == "Intro to Python"

    @pytest.mark.asyncio
    async def test_update_missing_id_upserts(self, db) -> None:
        new_id = str(ObjectId())
        data = course_doc(title="Created by update")

        result = await course_repository.update_course(db, new_id, data)

        assert result.matched_count == 0
        assert str(result.upserted_id) == new_id
        stored = await course_repository.get_course_by_id(db, new_id)
        assert {k: v for k, v in stored.items() if k != "_id"} == data

    @pytest.mark.asyncio
    async def test_update_without_upsert_is_noop(self, db) -> None:
        result = await course_repository.update_course(
            db, str(ObjectId()), course_doc(), upsert=False
        )
        assert result.upserted_id is None
        assert await db["courses"].count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_update_with_empty_body(self, db) -> None:
        course_id = await course_repository.create_course(db, course_doc())
        with pytest.raises(InvalidInput):
            await course_repository.update_course(db, course_id, {})
