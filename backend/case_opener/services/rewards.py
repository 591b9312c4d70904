from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from ..models.skin import Skin

logger = logging.getLogger(__name__)

# Scanned rarest first; the last entry also catches rolls past the table total.
ROLL_TIERS = ("gold", "red", "pink", "purple", "blue")
FALLBACK_TIER = ROLL_TIERS[-1]

# Upper-exclusive wear limits, checked in order.
CONDITION_THRESHOLDS = (
    (0.07, "FN"),
    (0.15, "MW"),
    (0.38, "FT"),
    (0.45, "WW"),
)
WORST_CONDITION = "BS"

CONDITION_LABELS = {
    "FN": "Factory New",
    "MW": "Minimal Wear",
    "FT": "Field-Tested",
    "WW": "Well-Worn",
    "BS": "Battle-Scarred",
}


@dataclass(frozen=True)
class Award:
    """Skin won from a crate together with its rolled wear and value."""

    skin: Skin
    tier: str
    wear: float
    condition: str
    price: float


def tier_weights(rarity_table: Mapping[str, float]) -> Tuple[Tuple[str, float], ...]:
    """Return ``(tier, weight)`` pairs in scan order; missing tiers weigh 0."""

    return tuple((tier, float(rarity_table.get(tier, 0))) for tier in ROLL_TIERS)


def select_tier(roll: float, rarity_table: Mapping[str, float]) -> str:
    """Map a roll in ``[0, 100)`` to a rarity tier.

    A roll landing exactly on a cumulative boundary belongs to the tier after
    it. Rolls beyond the table total resolve to the lowest tier.
    """

    cumulative = 0.0
    for tier, weight in tier_weights(rarity_table):
        cumulative += weight
        if roll < cumulative:
            return tier
    return FALLBACK_TIER


def demote_gold(tier: str, special_pool: Sequence[Skin]) -> str:
    """Downgrade a gold roll to red when the crate has no special items."""

    if tier == "gold" and not special_pool:
        logger.debug("Gold rolled without special items; awarding red instead")
        return "red"
    return tier


def tier_pool(pool: Sequence[Skin], tier: str) -> Sequence[Skin]:
    """Items of ``pool`` in ``tier``, or the whole pool when none match."""

    matching = [skin for skin in pool if skin.rarity == tier]
    return matching or pool


def resolve(
    pool: Sequence[Skin],
    special_pool: Sequence[Skin],
    rarity_table: Mapping[str, float],
    rng: random.Random,
) -> Tuple[Skin, str]:
    """Pick the awarded skin and the tier it was rolled from."""

    if not pool:
        raise ValueError("Crate contains no items to award")

    tier = demote_gold(select_tier(rng.random() * 100, rarity_table), special_pool)
    award_pool = special_pool if tier == "gold" else tier_pool(pool, tier)
    return rng.choice(award_pool), tier


def derive_wear(skin: Skin, rng: random.Random) -> float:
    return skin.min_float + rng.random() * (skin.max_float - skin.min_float)


def condition_code(wear: float) -> str:
    for limit, code in CONDITION_THRESHOLDS:
        if wear < limit:
            return code
    return WORST_CONDITION


def condition_label(wear: float) -> str:
    return CONDITION_LABELS[condition_code(wear)]


def price_for_wear(wear: float, prices: Optional[Mapping[str, Optional[float]]]) -> float:
    """Market price of a skin at ``wear``; unknown conditions are worth 0."""

    if not prices:
        return 0.0
    return float(prices.get(condition_code(wear)) or 0)


def roll_award(
    pool: Sequence[Skin],
    special_pool: Sequence[Skin],
    rarity_table: Mapping[str, float],
    rng: random.Random,
) -> Award:
    """Resolve a skin from the pools and attach its wear and price."""

    skin, tier = resolve(pool, special_pool, rarity_table, rng)
    wear = derive_wear(skin, rng)
    return Award(
        skin=skin,
        tier=tier,
        wear=wear,
        condition=condition_code(wear),
        price=price_for_wear(wear, skin.prices),
    )
