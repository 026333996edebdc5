"""API routers for the position report service."""

from fastapi import APIRouter

from . import ships
from .routes import health_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(ships.router, tags=["ships"])

__all__ = ["api_router"]
