from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..config import Settings, get_settings
from ..repositories.protocols import (
    CatalogRepositoryProtocol,
    InventoryRepositoryProtocol,
)
from ..schemas import OpenRequest, OpenResponse, WonItem
from ..services.opening import get_rng, inventory_entry_for, open_crate
from ..state import (
    get_catalog_repository_dependency,
    get_inventory_repository_dependency,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["opening"])


@router.post("/open", response_model=OpenResponse)
async def open_crate_endpoint(
    payload: OpenRequest,
    catalog: CatalogRepositoryProtocol = Depends(get_catalog_repository_dependency),
    inventory: InventoryRepositoryProtocol = Depends(get_inventory_repository_dependency),
    config: Settings = Depends(get_settings),
) -> OpenResponse:
    """Open a crate, store the won skin and return the reel that reveals it."""

    crate = await catalog.get_crate(payload.crate_id)
    if crate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Crate '{payload.crate_id}' not found",
        )
    # The reel needs at least one non-gold skin to draw fillers from.
    if not any(skin.rarity != "gold" for skin in crate.contains):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Crate '{crate.name}' has no items to open",
        )

    rarity_table = (
        payload.probabilities.as_weights()
        if payload.probabilities is not None
        else config.default_rarity_table
    )
    result = open_crate(crate, rarity_table, get_rng(payload.seed), config)

    user_id = payload.user_id or config.default_user_id
    await inventory.add_entry(inventory_entry_for(user_id, result))
    logger.info(
        "Saved %s for user %s (tier %s, cost %.2f)",
        result.award.skin.name,
        user_id,
        result.award.tier,
        result.cost,
    )

    award = result.award
    return OpenResponse(
        won_item=WonItem(
            **award.skin.model_dump(),
            tier=award.tier,
            wear=award.wear,
            condition=award.condition,
            price=award.price,
        ),
        cost=result.cost,
        spin_items=result.reel,
        winner_index=result.winner_index,
    )
