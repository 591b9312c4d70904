import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import close_mongo_connection, connect_to_mongo, prepare_repositories
from .repositories import InMemoryCatalogRepository, InMemoryInventoryRepository
from .routers import api_router
from .state import set_catalog_repository_provider, set_inventory_repository_provider

logger = logging.getLogger(__name__)


async def use_in_memory_repositories() -> None:
    """Serve the bundled catalog and keep inventories in process memory."""

    catalog = InMemoryCatalogRepository()
    inventory = InMemoryInventoryRepository(catalog)
    await catalog.seed_if_empty()
    set_catalog_repository_provider(lambda: catalog)
    set_inventory_repository_provider(lambda: inventory)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    database = await connect_to_mongo()
    connected = database is not None
    if connected:
        try:
            catalog, inventory = await prepare_repositories(database)
            set_catalog_repository_provider(lambda: catalog)
            set_inventory_repository_provider(lambda: inventory)
        except Exception:  # pragma: no cover - defensive logging
            logger.exception("Failed to prepare MongoDB collections")
            await close_mongo_connection()
            connected = False

    if not connected:
        logger.warning(
            "MongoDB connection is not available; using the in-memory catalog"
        )
        await use_in_memory_repositories()

    yield

    await close_mongo_connection()


app = FastAPI(
    title="Case Opener API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/", tags=["health"])
async def healthcheck() -> dict[str, str]:
    """Simple health-check endpoint."""

    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("case_opener.main:app", host="0.0.0.0", port=5000, reload=True)
