from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..models.inventory import InventoryItem
from ..repositories.protocols import InventoryRepositoryProtocol
from ..schemas import ClearInventoryRequest, ClearInventoryResponse
from ..state import get_inventory_repository_dependency

router = APIRouter(prefix="/inventory", tags=["inventory"])


def ensure_user_id(user_id: str | None) -> str:
    if not user_id or not user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing userId",
        )
    return user_id


@router.get("", response_model=list[InventoryItem])
async def list_inventory(
    user_id: str | None = Query(default=None),
    repository: InventoryRepositoryProtocol = Depends(get_inventory_repository_dependency),
) -> list[InventoryItem]:
    """Return a user's opened skins, newest first."""

    return await repository.list_items(ensure_user_id(user_id))


@router.delete("", response_model=ClearInventoryResponse)
async def clear_inventory(
    payload: ClearInventoryRequest,
    repository: InventoryRepositoryProtocol = Depends(get_inventory_repository_dependency),
) -> ClearInventoryResponse:
    """Remove every skin a user has opened."""

    deleted = await repository.clear(ensure_user_id(payload.user_id))
    return ClearInventoryResponse(message="Inventory cleared", deleted=deleted)
