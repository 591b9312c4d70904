"""FastAPI routers that expose HTTP endpoints."""

from fastapi import APIRouter

from . import crates, inventory, opening

api_router = APIRouter()
api_router.include_router(crates.router)
api_router.include_router(opening.router)
api_router.include_router(inventory.router)

__all__ = ["api_router", "crates", "inventory", "opening"]
