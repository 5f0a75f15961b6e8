"""
Motor client factory and document helpers shared by the repositories.
"""

from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from app.core.config import Settings
from app.core.errors import InvalidInput, StoreFailure
from app.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Build a client pinned to the stable server API (v1, strict)."""
    return AsyncIOMotorClient(
        settings.MONGO_URL,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


async def ping(client: AsyncIOMotorClient) -> None:
    """Round-trip to the deployment; raises if it is unreachable."""
    await client.admin.command("ping")


def parse_object_id(value: Any, *, field: str = "id") -> ObjectId:
    """Convert a path/body id to ObjectId, failing with InvalidInput."""
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would mint a fresh id
    if not isinstance(value, str):
        raise InvalidInput(f"Invalid {field}", details={field: str(value)})
    try:
        return ObjectId(value)
    except InvalidId as exc:
        raise InvalidInput(f"Invalid {field}", details={field: str(value)}) from exc


def sanitize_doc(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    """Render ObjectId values as strings so documents are JSON-safe."""
    if doc is None:
        return None
    return {k: str(v) if isinstance(v, ObjectId) else v for k, v in doc.items()}


def sanitize_many(docs: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    return [sanitize_doc(d) for d in docs]


def store_operation(name: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Wrap a repository coroutine so driver errors surface as StoreFailure.

    No retry is attempted; the failure is logged and re-raised.
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except PyMongoError as exc:
                logger.error("Store operation failed", operation=name, error=str(exc))
                raise StoreFailure("Store operation failed", details={"operation": name}) from exc
        return wrapper
    return decorator
