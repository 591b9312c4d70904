from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .skin import Skin


class InventoryEntryCreate(BaseModel):
    """Payload recorded when a user opens a crate."""

    user_id: str
    skin_id: str
    acquired_at: datetime
    cost: float
    wear: float
    price: float


class InventoryEntry(InventoryEntryCreate):
    """Inventory entry as stored, including its identifier."""

    id: str = Field(alias="_id")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_mongo(cls, document: Dict[str, Any]) -> "InventoryEntry":
        payload = dict(document)
        payload["_id"] = str(payload.pop("_id", payload.get("id")))
        return cls(**payload)


class InventoryItem(Skin):
    """Skin fields merged with the details of how it was acquired."""

    inventory_id: str
    acquired_at: datetime
    cost: float
    wear: float
    price: float

    @classmethod
    def from_entry(cls, entry: InventoryEntry, skin: Skin) -> "InventoryItem":
        return cls(
            **skin.model_dump(),
            inventory_id=entry.id,
            acquired_at=entry.acquired_at,
            cost=entry.cost,
            wear=entry.wear,
            price=entry.price,
        )
