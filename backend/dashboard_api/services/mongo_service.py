"""MongoDB async service backed by Motor.

Provides a thin wrapper around ``AsyncIOMotorDatabase`` with the bulk
operations seeding needs: concurrent clear and insert-many.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class MongoService:
    """Async MongoDB operations via Motor.

    Parameters
    ----------
    db:
        A ``motor.motor_asyncio.AsyncIOMotorDatabase`` instance owned by the
        caller. The service never opens or closes connections itself.
    """

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._db = db

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete_many(self, collection: str, query: dict[str, Any]) -> int:
        """Delete all matching documents.  Returns count of removed docs."""
        result = await self._db[collection].delete_many(query)
        return result.deleted_count

    async def clear_collections(self, collections: Iterable[str]) -> dict[str, int]:
        """Empty every collection in *collections* concurrently.

        Returns a mapping of collection name to removed document count.
        """
        names = list(collections)
        removed = await asyncio.gather(
            *(self.delete_many(name, {}) for name in names)
        )
        for name, count in zip(names, removed):
            logger.debug("Cleared %d docs from %s", count, name)
        return dict(zip(names, removed))

    # ------------------------------------------------------------------
    # Insert
    # ------------------------------------------------------------------

    async def insert_many(self, collection: str, docs: list[dict[str, Any]]) -> int:
        """Insert *docs* into *collection* and return how many were written.

        An empty batch is a no-op; the driver rejects ``insert_many([])``.
        """
        if not docs:
            return 0
        result = await self._db[collection].insert_many(docs)
        inserted = len(result.inserted_ids)
        logger.debug("Inserted %d docs into %s", inserted, collection)
        return inserted
