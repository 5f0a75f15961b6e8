"""
AppContext — process-scoped handles built once at startup.

Holds the settings (signing secret, cookie profile) and the database
handle.  The lifespan in ``app.main`` stores it on ``app.state`` and the
``get_context`` dependency hands it to every route; repositories and the
access guard never reach for module globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.core.config import Settings


@dataclass(frozen=True)
class AppContext:
    """Read-only after construction."""

    settings: Settings
    db: AsyncIOMotorDatabase
    client: AsyncIOMotorClient | None = None

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
