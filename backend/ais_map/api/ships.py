"""Vessel position report endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from ais_map.api import deps
from ais_map.core.logging import get_logger
from ais_map.models.position_report import MMSI_MAX, PositionReport
from ais_map.services.reports import ReportRepository

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/ship/{mmsi}",
    response_model=PositionReport | None,
    summary="Latest position report for one vessel.",
)
async def fetch_ship(
    mmsi: Annotated[int, Path(ge=0, le=MMSI_MAX, description="Vessel MMSI.")],
    repository: ReportRepository = Depends(deps.get_report_repository),
) -> PositionReport | None:
    """Return the vessel's report, or ``null`` when nothing is stored for it."""

    logger.info("ship.fetch", mmsi=mmsi)
    return await repository.get_report(mmsi)


@router.get(
    "/ships",
    response_model=list[PositionReport],
    summary="Most recent report per vessel across the fleet.",
)
async def fetch_unique_ships(
    repository: ReportRepository = Depends(deps.get_report_repository),
) -> list[PositionReport]:
    logger.info("ships.fetch")
    reports = await repository.get_latest_reports()
    logger.info("ships.fetched", count=len(reports))
    return reports
