"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from ais_map.services.reports import ReportRepository


def get_report_repository(request: Request) -> ReportRepository:
    """Wrap the process-wide collection handle opened during startup."""

    return ReportRepository(request.app.state.reports_collection)
