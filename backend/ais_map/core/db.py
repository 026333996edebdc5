"""MongoDB client and collection handles for stored position reports."""

from __future__ import annotations

from typing import Any

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from .config import AppSettings


def create_client(settings: AppSettings) -> AsyncMongoClient[dict[str, Any]]:
    """Build an async client from the configured connection URL.

    The client connects lazily; call :func:`ping` to fail fast on a bad URL or
    an unreachable server.
    """

    return AsyncMongoClient(str(settings.mongodb_url), tz_aware=True)


def get_collection(
    client: AsyncMongoClient[dict[str, Any]], settings: AppSettings
) -> AsyncCollection[dict[str, Any]]:
    """Return the position report collection."""

    return client[settings.mongodb_database][settings.mongodb_collection]


async def ping(client: AsyncMongoClient[dict[str, Any]]) -> None:
    """Round-trip to the server, raising on connection failure."""

    await client.admin.command("ping")
