from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from .skin import Skin


class CrateBase(BaseModel):
    """Shared attributes for crate payloads."""

    name: str
    price: Optional[float] = Field(default=None, ge=0)
    image_url: str = ""


class Crate(CrateBase):
    """A crate with its skin references resolved."""

    id: str
    contains: List[Skin] = Field(default_factory=list)
    special_items: List[Skin] = Field(default_factory=list)

    @classmethod
    def from_mongo(
        cls, document: Dict[str, Any], skins: Mapping[str, Skin]
    ) -> "Crate":
        """Build a crate from its stored document, resolving skin ids.

        Ids without a matching skin are dropped, keeping the stored order.
        """

        payload = dict(document)
        payload["id"] = payload.pop("_id", payload.get("id"))
        payload["contains"] = [
            skins[skin_id] for skin_id in payload.get("contains", []) if skin_id in skins
        ]
        payload["special_items"] = [
            skins[skin_id]
            for skin_id in payload.get("special_items", [])
            if skin_id in skins
        ]
        return cls(**payload)
