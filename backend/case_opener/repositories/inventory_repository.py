from __future__ import annotations

from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from ..config import settings
from ..models.inventory import InventoryEntry, InventoryEntryCreate, InventoryItem
from ..models.skin import Skin


class InventoryRepository:
    """Data-access layer for the skins users have opened."""

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self._collection = database[settings.inventory_collection]
        self._skins = database[settings.skin_collection]

    async def ensure_indexes(self) -> None:
        await self._collection.create_index(
            [("user_id", 1), ("acquired_at", DESCENDING)],
            name="inventory_user_idx",
        )

    async def add_entry(self, payload: InventoryEntryCreate) -> InventoryEntry:
        """Store a newly opened skin for a user."""

        document = payload.model_dump()
        result = await self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        return InventoryEntry.from_mongo(document)

    async def list_items(self, user_id: str) -> List[InventoryItem]:
        """Return a user's skins, most recently opened first.

        Entries whose skin is no longer in the catalog are skipped.
        """

        cursor = self._collection.find({"user_id": user_id}).sort("acquired_at", DESCENDING)
        entries = [InventoryEntry.from_mongo(doc) async for doc in cursor]
        if not entries:
            return []

        skin_ids = list({entry.skin_id for entry in entries})
        skins = {
            doc["_id"]: Skin.from_mongo(doc)
            async for doc in self._skins.find({"_id": {"$in": skin_ids}})
        }
        return [
            InventoryItem.from_entry(entry, skins[entry.skin_id])
            for entry in entries
            if entry.skin_id in skins
        ]

    async def clear(self, user_id: str) -> int:
        """Delete every inventory entry of a user and return how many went."""

        result = await self._collection.delete_many({"user_id": user_id})
        return result.deleted_count
