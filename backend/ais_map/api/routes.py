"""Liveness route definitions."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

health_router = APIRouter()


@health_router.get("/hello", response_class=PlainTextResponse, summary="Liveness probe")
async def hello() -> str:
    """Answer without touching the database."""

    return "world!"
