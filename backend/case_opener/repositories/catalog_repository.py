from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..config import settings
from ..data.catalog_definitions import CRATE_DEFINITIONS, SKIN_DEFINITIONS
from ..models.crate import Crate
from ..models.skin import Skin

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Data-access layer for skin and crate documents."""

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self._skins = database[settings.skin_collection]
        self._crates = database[settings.crate_collection]

    async def ensure_indexes(self) -> None:
        """Create indexes required by the collections."""

        await self._crates.create_index("name", name="crate_name_idx", unique=True)
        await self._skins.create_index("rarity", name="skin_rarity_idx")

    async def seed_if_empty(
        self,
        *,
        skins: Iterable[dict] | None = None,
        crates: Iterable[dict] | None = None,
    ) -> None:
        """Insert the bundled catalog if no crates are stored yet."""

        if await self._crates.estimated_document_count() > 0:
            return

        skin_docs = [
            Skin(**entry).to_mongo()
            for entry in (skins if skins is not None else SKIN_DEFINITIONS)
        ]
        crate_docs = []
        for entry in crates if crates is not None else CRATE_DEFINITIONS:
            doc = dict(entry)
            doc["_id"] = doc.pop("id")
            crate_docs.append(doc)

        if skin_docs:
            await self._skins.insert_many(skin_docs)
        if crate_docs:
            await self._crates.insert_many(crate_docs)
        logger.info(
            "Seeded catalog with %d skins and %d crates", len(skin_docs), len(crate_docs)
        )

    async def _load_skins(self, skin_ids: Iterable[str]) -> Dict[str, Skin]:
        ids = list(set(skin_ids))
        if not ids:
            return {}
        cursor = self._skins.find({"_id": {"$in": ids}})
        return {doc["_id"]: Skin.from_mongo(doc) async for doc in cursor}

    async def _populate(self, documents: List[Dict[str, Any]]) -> List[Crate]:
        skin_ids = [
            skin_id
            for doc in documents
            for skin_id in [*doc.get("contains", []), *doc.get("special_items", [])]
        ]
        skins = await self._load_skins(skin_ids)
        return [Crate.from_mongo(doc, skins) for doc in documents]

    async def list_crates(self) -> List[Crate]:
        """Return all crates sorted by name with their skins resolved."""

        documents = await self._crates.find().sort("name", 1).to_list(length=None)
        return await self._populate(documents)

    async def get_crate(self, crate_id: str) -> Optional[Crate]:
        """Retrieve a crate by identifier, falling back to its name."""

        document = await self._crates.find_one({"_id": crate_id})
        if document is None:
            document = await self._crates.find_one({"name": crate_id})
        if document is None:
            return None
        crates = await self._populate([document])
        return crates[0]
