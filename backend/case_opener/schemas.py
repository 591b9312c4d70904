from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .models.skin import Skin


class RarityTable(BaseModel):
    """Drop odds per roll tier, in percent."""

    gold: float = Field(..., ge=0)
    red: float = Field(..., ge=0)
    pink: float = Field(..., ge=0)
    purple: float = Field(..., ge=0)
    blue: float = Field(..., ge=0)

    def as_weights(self) -> Dict[str, float]:
        return self.model_dump()


class OpenRequest(BaseModel):
    crate_id: str = Field(..., min_length=1, description="Crate identifier or name")
    user_id: Optional[str] = Field(
        default=None, description="Owner of the opened skin; defaults to the test user"
    )
    probabilities: Optional[RarityTable] = Field(
        default=None, description="Custom drop odds; the official odds apply when omitted"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed. The same seed always produces the same opening.",
    )


class WonItem(Skin):
    tier: str
    wear: float
    condition: str
    price: float


class OpenResponse(BaseModel):
    won_item: WonItem
    cost: float
    spin_items: List[Skin]
    winner_index: int


class ClearInventoryRequest(BaseModel):
    user_id: str


class ClearInventoryResponse(BaseModel):
    success: bool = True
    message: str
    deleted: int = 0
