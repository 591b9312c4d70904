from __future__ import annotations

from typing import Callable

from .repositories.protocols import (
    CatalogRepositoryProtocol,
    InventoryRepositoryProtocol,
)

_catalog_repository_provider: Callable[[], CatalogRepositoryProtocol] | None = None
_inventory_repository_provider: Callable[[], InventoryRepositoryProtocol] | None = None


def set_catalog_repository_provider(
    provider: Callable[[], CatalogRepositoryProtocol]
) -> None:
    """Register a callable that returns the active catalog repository."""

    global _catalog_repository_provider
    _catalog_repository_provider = provider


def set_inventory_repository_provider(
    provider: Callable[[], InventoryRepositoryProtocol]
) -> None:
    """Register a callable that returns the active inventory repository."""

    global _inventory_repository_provider
    _inventory_repository_provider = provider


def get_catalog_repository_dependency() -> CatalogRepositoryProtocol:
    """FastAPI dependency returning the configured catalog repository."""

    if _catalog_repository_provider is None:
        raise RuntimeError("Catalog repository provider has not been configured")
    return _catalog_repository_provider()


def get_inventory_repository_dependency() -> InventoryRepositoryProtocol:
    """FastAPI dependency returning the configured inventory repository."""

    if _inventory_repository_provider is None:
        raise RuntimeError("Inventory repository provider has not been configured")
    return _inventory_repository_provider()
