from fastapi import APIRouter, Depends, HTTPException, status

from ..models.crate import Crate
from ..repositories.protocols import CatalogRepositoryProtocol
from ..state import get_catalog_repository_dependency

router = APIRouter(prefix="/crates", tags=["crates"])


@router.get("", response_model=list[Crate])
async def list_crates(
    repository: CatalogRepositoryProtocol = Depends(get_catalog_repository_dependency),
) -> list[Crate]:
    """Return all crates with their skins."""

    return await repository.list_crates()


@router.get("/{crate_id}", response_model=Crate)
async def get_crate(
    crate_id: str,
    repository: CatalogRepositoryProtocol = Depends(get_catalog_repository_dependency),
) -> Crate:
    """Return a single crate, looked up by identifier or name."""

    crate = await repository.get_crate(crate_id)
    if crate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Crate '{crate_id}' not found",
        )
    return crate
