"""Write-result schemas mirroring the MongoDB driver acknowledgements."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class InsertResponse(BaseModel):
    acknowledged: bool = True
    insertedId: str


class DeleteResponse(BaseModel):
    acknowledged: bool = True
    deletedCount: int


class UpdateResponse(BaseModel):
    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: str | None = None

    @classmethod
    def from_result(cls, result: Any) -> "UpdateResponse":
        """Build from a driver UpdateResult."""
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=0 if upserted_id is None else 1,
            upsertedId=None if upserted_id is None else str(upserted_id),
        )

    @classmethod
    def from_previous(cls, previous: dict[str, Any] | None, changed: dict[str, Any]) -> "UpdateResponse":
        """Build from the pre-update document of a find-and-modify (None = no match)."""
        if previous is None:
            return cls(matchedCount=0, modifiedCount=0, upsertedCount=0)
        modified = any(previous.get(k) != v for k, v in changed.items())
        return cls(matchedCount=1, modifiedCount=int(modified), upsertedCount=0)
