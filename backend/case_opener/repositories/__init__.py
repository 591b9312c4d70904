"""Repository classes responsible for data persistence."""

from .catalog_repository import CatalogRepository
from .in_memory import InMemoryCatalogRepository, InMemoryInventoryRepository
from .inventory_repository import InventoryRepository
from .protocols import CatalogRepositoryProtocol, InventoryRepositoryProtocol

__all__ = [
    "CatalogRepository",
    "CatalogRepositoryProtocol",
    "InMemoryCatalogRepository",
    "InMemoryInventoryRepository",
    "InventoryRepository",
    "InventoryRepositoryProtocol",
]
