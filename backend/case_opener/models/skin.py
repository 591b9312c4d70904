from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Ascending order; white and lightblue only ever appear as reel fillers.
RARITIES = ("white", "lightblue", "blue", "purple", "pink", "red", "gold")
RARITY_PATTERN = r"^(white|lightblue|blue|purple|pink|red|gold)$"


class Skin(BaseModel):
    """A cosmetic item that can be dropped from a crate."""

    id: str = Field(..., description="Catalog identifier of the skin")
    name: str
    weapon: str = ""
    skin_name: str = "Vanilla"
    rarity: str = Field(..., pattern=RARITY_PATTERN)
    image_url: str = ""
    phase: Optional[str] = None
    is_special: bool = False
    min_float: float = Field(default=0.0, ge=0.0, le=1.0)
    max_float: float = Field(default=1.0, ge=0.0, le=1.0)
    prices: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        description="Market price keyed by condition code (FN, MW, FT, WW, BS)",
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def check_float_range(self) -> "Skin":
        if self.min_float > self.max_float:
            raise ValueError(
                f"min_float ({self.min_float}) exceeds max_float ({self.max_float})"
            )
        return self

    @classmethod
    def from_mongo(cls, document: Dict[str, Any]) -> "Skin":
        """Convert a MongoDB document to a skin model."""

        payload = dict(document)
        payload["id"] = payload.pop("_id", payload.get("id"))
        return cls(**payload)

    def to_mongo(self) -> Dict[str, Any]:
        document = self.model_dump()
        document["_id"] = document.pop("id")
        return document
