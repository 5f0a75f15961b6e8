"""Shared constants and enums used across the application."""

from enum import StrEnum

AUTH_COOKIE_NAME = "token"

COURSES_COLLECTION = "courses"
BIDS_COLLECTION = "bids"


class BidStatus(StrEnum):
    """Lifecycle status of a bid. New bids start as PENDING."""

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    REJECTED = "Rejected"
    COMPLETE = "Complete"

    @property
    def is_terminal(self) -> bool:
        return self in (BidStatus.REJECTED, BidStatus.COMPLETE)


class SortOrder(StrEnum):
    """Deadline ordering accepted by the course search."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        """Anything other than "asc" sorts descending."""
        return cls.ASC if value == cls.ASC.value else cls.DESC

    @property
    def direction(self) -> int:
        return 1 if self is SortOrder.ASC else -1
