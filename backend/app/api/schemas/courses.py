"""Course request schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Poster(BaseModel):
    """The user who published a course. ``email`` is the ownership key."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=3, max_length=320)
    name: str | None = None


class CourseCreate(BaseModel):
    """Payload for POST /add-course."""

    model_config = ConfigDict(extra="allow")

    course_title: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    deadline: str
    bidCount: int = Field(0, ge=0)
    poster: Poster


class CourseUpdate(BaseModel):
    """Payload for PUT /update-course/{id}; only the fields sent are $set."""

    model_config = ConfigDict(extra="allow")

    course_title: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1)
    deadline: str | None = None
    bidCount: int | None = Field(None, ge=0)
    poster: Poster | None = None
