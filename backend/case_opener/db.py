import logging
from typing import Tuple

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from .config import Settings, settings
from .repositories import CatalogRepository, InventoryRepository

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None


async def connect_to_mongo(config: Settings = settings) -> AsyncIOMotorDatabase | None:
    """Open the catalog database, or return ``None`` when it cannot be reached."""

    global _client

    if _client is None:
        _client = AsyncIOMotorClient(
            config.mongodb_uri,
            serverSelectionTimeoutMS=5000,
            appname="case-opener",
        )
    database = _client[config.mongodb_db_name]
    try:
        await database.command("ping")
    except (ServerSelectionTimeoutError, PyMongoError) as exc:
        logger.warning("MongoDB at %s is unreachable: %s", config.mongodb_uri, exc)
        await close_mongo_connection()
        return None

    logger.info("Connected to MongoDB database '%s'", config.mongodb_db_name)
    return database


async def prepare_repositories(
    database: AsyncIOMotorDatabase,
) -> Tuple[CatalogRepository, InventoryRepository]:
    """Index the catalog and inventory collections and seed an empty catalog."""

    catalog = CatalogRepository(database)
    inventory = InventoryRepository(database)
    await catalog.ensure_indexes()
    await inventory.ensure_indexes()
    await catalog.seed_if_empty()
    return catalog, inventory


async def close_mongo_connection() -> None:
    global _client

    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB connection closed")
