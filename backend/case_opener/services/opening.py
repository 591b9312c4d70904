from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Mapping, Optional

from ..config import Settings, settings as default_settings
from ..models.crate import Crate
from ..models.inventory import InventoryEntryCreate
from ..models.skin import Skin
from .reel import build_reel, filler_bands
from .rewards import Award, roll_award


@dataclass(frozen=True)
class OpeningResult:
    award: Award
    cost: float
    reel: List[Skin]
    winner_index: int


def get_rng(seed: Optional[int] = None) -> random.Random:
    """Return a generator; the same seed replays the same openings."""

    return random.Random(seed)


def opening_cost(crate: Crate, config: Settings = default_settings) -> float:
    """Amount charged for opening ``crate``, including the key when enabled."""

    price = crate.price if crate.price is not None else config.default_crate_price
    if config.charge_key_fee:
        price += config.key_price
    return price


def open_crate(
    crate: Crate,
    rarity_table: Mapping[str, float],
    rng: random.Random,
    config: Settings = default_settings,
) -> OpeningResult:
    """Roll an award from ``crate`` and build the reel that reveals it."""

    award = roll_award(crate.contains, crate.special_items, rarity_table, rng)
    reel = build_reel(
        crate.contains,
        award,
        rng,
        length=config.reel_length,
        winner_index=config.reel_winner_index,
        bands=filler_bands(config.reel_thresholds),
    )
    return OpeningResult(
        award=award,
        cost=opening_cost(crate, config),
        reel=reel,
        winner_index=config.reel_winner_index,
    )


def inventory_entry_for(user_id: str, result: OpeningResult) -> InventoryEntryCreate:
    return InventoryEntryCreate(
        user_id=user_id,
        skin_id=result.award.skin.id,
        acquired_at=datetime.now(timezone.utc),
        cost=result.cost,
        wear=result.award.wear,
        price=result.award.price,
    )
