"""API schema package."""

from app.api.schemas.auth import LoginRequest, SuccessResponse
from app.api.schemas.bids import BidCreate, BidStatusUpdate
from app.api.schemas.courses import CourseCreate, CourseUpdate, Poster
from app.api.schemas.results import DeleteResponse, InsertResponse, UpdateResponse

__all__ = [
    "LoginRequest",
    "SuccessResponse",
    "CourseCreate",
    "CourseUpdate",
    "Poster",
    "BidCreate",
    "BidStatusUpdate",
    "InsertResponse",
    "DeleteResponse",
    "UpdateResponse",
]
