"""Pydantic schemas for stored AIS position reports."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

MMSI_MAX = 2**32 - 1


class ReportMetadata(BaseModel):
    """Envelope metadata attached to every report by the ingestion process."""

    model_config = ConfigDict(extra="allow")

    mmsi: int = Field(..., alias="MMSI", ge=0, le=MMSI_MAX, description="Vessel identifier.")
    time_utc: datetime | str = Field(..., description="UTC timestamp of the report, as stored.")


class PositionReport(BaseModel):
    """One vessel position report.

    Only ``MetaData.MMSI`` and ``MetaData.time_utc`` are checked; every other
    field is carried through untouched.
    """

    model_config = ConfigDict(extra="allow")

    metadata: ReportMetadata = Field(..., alias="MetaData")
