"""Queries over the position report collection."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from pymongo import DESCENDING
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from ais_map.core.logging import get_logger
from ais_map.models.position_report import PositionReport

logger = get_logger(__name__)

FLEET_SNAPSHOT_LIMIT = 10

MMSI_FIELD = "MetaData.MMSI"
TIME_FIELD = "MetaData.time_utc"


class ReportQueryError(Exception):
    """Raised when the report store cannot be queried or a document cannot be decoded."""


DECODE_ERRORS = (PyMongoError, ValidationError, PydanticSerializationError)


def decode_report(document: dict[str, Any]) -> PositionReport:
    """Validate a stored document and make sure it renders as JSON.

    Passthrough fields may hold BSON-only values (``ObjectId``, ``Decimal128``)
    that cannot be rendered; those fail here instead of in the response.
    """

    report = PositionReport.model_validate(document)
    report.model_dump(mode="json", by_alias=True)
    return report


def build_latest_reports_pipeline(limit: int = FLEET_SNAPSHOT_LIMIT) -> list[dict[str, Any]]:
    """Aggregation keeping the newest report of each vessel, capped to ``limit`` vessels."""

    return [
        {"$sort": {TIME_FIELD: DESCENDING}},
        {"$group": {"_id": f"${MMSI_FIELD}", "document": {"$first": "$$ROOT"}}},
        {"$replaceRoot": {"newRoot": "$document"}},
        {"$limit": limit},
        {"$project": {"_id": 0}},
    ]


class ReportRepository:
    """Read-only access to stored position reports."""

    def __init__(self, collection: AsyncCollection[dict[str, Any]]) -> None:
        self._collection = collection

    async def get_report(self, mmsi: int) -> PositionReport | None:
        """Return the latest report for ``mmsi``, or ``None`` when the vessel is unknown."""

        try:
            document = await self._collection.find_one(
                {MMSI_FIELD: mmsi},
                projection={"_id": 0},
                sort=[(TIME_FIELD, DESCENDING)],
            )
            if document is None:
                return None
            return decode_report(document)
        except DECODE_ERRORS as exc:
            logger.error("report.query_failed", operation="get_report", mmsi=mmsi, error=str(exc))
            raise ReportQueryError(str(exc)) from exc

    async def get_latest_reports(self, limit: int = FLEET_SNAPSHOT_LIMIT) -> list[PositionReport]:
        """Return the newest report per vessel for at most ``limit`` vessels.

        A single undecodable document fails the whole call.
        """

        reports: list[PositionReport] = []
        try:
            async with await self._collection.aggregate(build_latest_reports_pipeline(limit)) as cursor:
                async for document in cursor:
                    reports.append(decode_report(document))
        except DECODE_ERRORS as exc:
            logger.error("report.query_failed", operation="get_latest_reports", error=str(exc))
            raise ReportQueryError(str(exc)) from exc

        return reports
