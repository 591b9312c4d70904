from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from ..models.crate import Crate
from ..models.inventory import InventoryEntry, InventoryEntryCreate, InventoryItem


class CatalogRepositoryProtocol(Protocol):
    """Protocol implemented by skin and crate data stores."""

    async def ensure_indexes(self) -> None: ...

    async def seed_if_empty(
        self,
        *,
        skins: Iterable[dict] | None = None,
        crates: Iterable[dict] | None = None,
    ) -> None: ...

    async def list_crates(self) -> List[Crate]: ...

    async def get_crate(self, crate_id: str) -> Optional[Crate]: ...


class InventoryRepositoryProtocol(Protocol):
    """Protocol implemented by per-user inventory stores."""

    async def ensure_indexes(self) -> None: ...

    async def add_entry(self, payload: InventoryEntryCreate) -> InventoryEntry: ...

    async def list_items(self, user_id: str) -> List[InventoryItem]: ...

    async def clear(self, user_id: str) -> int: ...
