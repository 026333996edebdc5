"""Shared fixtures and stubs for the position report tests."""

from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# ais_map.main builds a module-level app, which needs a connection URL.
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")

from ais_map.core.config import AppSettings  # noqa: E402
from ais_map.main import create_app  # noqa: E402


class StubCursor:
    """Async cursor over canned documents, optionally failing part-way through."""

    def __init__(self, documents: list[dict[str, Any]], *, error: Exception | None = None) -> None:
        self._documents = list(documents)
        self._error = error
        self.closed = False

    async def __aenter__(self) -> "StubCursor":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.closed = True

    def __aiter__(self) -> "StubCursor":
        return self

    async def __anext__(self) -> dict[str, Any]:
        if self._documents:
            return self._documents.pop(0)
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration


class StubCollection:
    """Records the queries it receives and answers with canned documents."""

    def __init__(
        self,
        *,
        find_result: dict[str, Any] | None = None,
        aggregate_result: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
        cursor_error: Exception | None = None,
    ) -> None:
        self.find_result = find_result
        self.aggregate_result = aggregate_result or []
        self.error = error
        self.cursor_error = cursor_error
        self.find_calls: list[dict[str, Any]] = []
        self.aggregate_calls: list[list[dict[str, Any]]] = []
        self.cursors: list[StubCursor] = []

    async def find_one(self, filter: dict[str, Any], **kwargs: Any) -> dict[str, Any] | None:
        self.find_calls.append({"filter": filter, **kwargs})
        if self.error is not None:
            raise self.error
        return self.find_result

    async def aggregate(self, pipeline: list[dict[str, Any]]) -> StubCursor:
        self.aggregate_calls.append(pipeline)
        if self.error is not None:
            raise self.error
        cursor = StubCursor(self.aggregate_result, error=self.cursor_error)
        self.cursors.append(cursor)
        return cursor


def make_report(mmsi: int, time_utc: Any, **metadata: Any) -> dict[str, Any]:
    """Build a stored report document shaped like an AISStream position message."""

    return {
        "Message": {
            "PositionReport": {
                "UserID": mmsi,
                "Cog": 308,
                "Sog": 0.1,
                "Latitude": 66.02695,
                "Longitude": 12.253821666666665,
                "NavigationalStatus": 15,
            }
        },
        "MessageType": "PositionReport",
        "MetaData": {
            "MMSI": mmsi,
            "ShipName": "AUGUSTSON",
            "latitude": 66.02695,
            "longitude": 12.253821666666665,
            "time_utc": time_utc,
            **metadata,
        },
    }


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, mongodb_url="mongodb://localhost:27017")


@pytest.fixture
def app(settings: AppSettings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    # Used without a context manager, so the lifespan (and its database ping) never runs.
    return TestClient(app)
