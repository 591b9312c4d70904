from __future__ import annotations

import uuid
from typing import Dict, Iterable, List, Optional

from ..data.catalog_definitions import CRATE_DEFINITIONS, SKIN_DEFINITIONS
from ..models.crate import Crate
from ..models.inventory import InventoryEntry, InventoryEntryCreate, InventoryItem
from ..models.skin import Skin
from .protocols import CatalogRepositoryProtocol, InventoryRepositoryProtocol


class InMemoryCatalogRepository(CatalogRepositoryProtocol):
    """In-memory fallback catalog used when MongoDB is unavailable."""

    def __init__(self) -> None:
        self._skins: Dict[str, Skin] = {}
        self._crates: Dict[str, dict] = {}

    async def ensure_indexes(self) -> None:
        """No-op for the in-memory implementation."""

    async def seed_if_empty(
        self,
        *,
        skins: Iterable[dict] | None = None,
        crates: Iterable[dict] | None = None,
    ) -> None:
        if self._crates:
            return

        for entry in skins if skins is not None else SKIN_DEFINITIONS:
            skin = Skin(**entry)
            self._skins[skin.id] = skin
        for entry in crates if crates is not None else CRATE_DEFINITIONS:
            self._crates[entry["id"]] = dict(entry)

    def get_skin(self, skin_id: str) -> Optional[Skin]:
        return self._skins.get(skin_id)

    async def list_crates(self) -> List[Crate]:
        crates = [Crate.from_mongo(doc, self._skins) for doc in self._crates.values()]
        return sorted(crates, key=lambda crate: crate.name)

    async def get_crate(self, crate_id: str) -> Optional[Crate]:
        document = self._crates.get(crate_id)
        if document is None:
            document = next(
                (doc for doc in self._crates.values() if doc["name"] == crate_id), None
            )
        if document is None:
            return None
        return Crate.from_mongo(document, self._skins)


class InMemoryInventoryRepository(InventoryRepositoryProtocol):
    """In-memory inventory store paired with an in-memory catalog."""

    def __init__(self, catalog: InMemoryCatalogRepository) -> None:
        self._catalog = catalog
        self._entries: List[InventoryEntry] = []

    async def ensure_indexes(self) -> None:
        """No-op for the in-memory implementation."""

    async def add_entry(self, payload: InventoryEntryCreate) -> InventoryEntry:
        entry = InventoryEntry(id=uuid.uuid4().hex, **payload.model_dump())
        self._entries.append(entry)
        return entry

    async def list_items(self, user_id: str) -> List[InventoryItem]:
        entries = sorted(
            (entry for entry in self._entries if entry.user_id == user_id),
            key=lambda entry: entry.acquired_at,
            reverse=True,
        )
        items = []
        for entry in entries:
            skin = self._catalog.get_skin(entry.skin_id)
            if skin is not None:
                items.append(InventoryItem.from_entry(entry, skin))
        return items

    async def clear(self, user_id: str) -> int:
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.user_id != user_id]
        return before - len(self._entries)
