from __future__ import annotations

import random
from typing import FrozenSet, List, Sequence, Tuple

from ..models.skin import Skin
from .rewards import Award

FillerBand = Tuple[float, FrozenSet[str]]

COMMON = frozenset({"white", "lightblue", "blue"})
UNCOMMON = frozenset({"purple"})
RARE = frozenset({"pink"})
LEGENDARY = frozenset({"red"})

DEFAULT_THRESHOLDS = (0.85, 0.95, 0.99)

MYSTERY_SKIN = Skin(
    id="mystery",
    name="★ Rare Special Item",
    weapon="Special",
    skin_name="Item",
    rarity="gold",
    image_url="https://pbs.twimg.com/media/GL_87gsXQAA6NRs.png",
    is_special=True,
    min_float=0.0,
    max_float=0.0,
)


def filler_bands(thresholds: Sequence[float] = DEFAULT_THRESHOLDS) -> Tuple[FillerBand, ...]:
    """Pair the common, uncommon and rare cut points with their rarities.

    Draws at or above the last cut point land in the legendary band.
    """

    if len(thresholds) != 3:
        raise ValueError(f"Expected 3 reel thresholds, got {len(thresholds)}")
    common, uncommon, rare = thresholds
    return (
        (common, COMMON),
        (uncommon, UNCOMMON),
        (rare, RARE),
        (1.0, LEGENDARY),
    )


def sample(
    pool: Sequence[Skin],
    rng: random.Random,
    bands: Sequence[FillerBand] | None = None,
) -> Skin:
    """Draw one non-winning skin for the spin reel.

    Gold skins never show up as fillers. If the chosen band has no skins the
    draw falls back to every non-gold skin in the pool.
    """

    fallback = [skin for skin in pool if skin.rarity != "gold"]
    if not fallback:
        raise ValueError("Crate has no non-gold items to fill the reel")

    bands = bands or filler_bands()
    draw = rng.random()
    rarities = next(
        (band_rarities for limit, band_rarities in bands if draw < limit),
        bands[-1][1],
    )

    candidates = [skin for skin in fallback if skin.rarity in rarities]
    return rng.choice(candidates or fallback)


def build_reel(
    pool: Sequence[Skin],
    award: Award,
    rng: random.Random,
    *,
    length: int = 56,
    winner_index: int = 50,
    bands: Sequence[FillerBand] | None = None,
) -> List[Skin]:
    """Assemble the spin reel with the awarded skin at ``winner_index``.

    Special and gold awards are shown as :data:`MYSTERY_SKIN` until the spin
    is over.
    """

    if not 0 <= winner_index < length:
        raise ValueError(
            f"Winner index {winner_index} is outside a reel of {length} slots"
        )

    winner = award.skin
    if winner.is_special or winner.rarity == "gold":
        winner = MYSTERY_SKIN

    return [
        winner if position == winner_index else sample(pool, rng, bands)
        for position in range(length)
    ]
