"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api import api_router
from .core import db
from .core.config import AppSettings, get_settings
from .core.logging import get_logger, setup_logging
from .services.reports import ReportQueryError

logger = get_logger(__name__)

HOST = "0.0.0.0"
PORT = 3000


def _build_lifespan(settings: AppSettings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Open the shared report collection for the lifetime of the process."""

        setup_logging(settings.log_level)

        logger.info(
            "application.startup",
            environment=settings.environment,
            version=settings.version,
            database=settings.mongodb_database,
            collection=settings.mongodb_collection,
        )

        client = db.create_client(settings)
        try:
            if settings.mongodb_ping_on_startup:
                await db.ping(client)
            app.state.reports_collection = db.get_collection(client, settings)
            yield
        finally:
            await client.close()
            logger.info("application.shutdown")

    return lifespan


async def report_query_error_handler(request: Request, exc: ReportQueryError) -> PlainTextResponse:
    """Render store and decode failures as a plain-text 500."""

    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Construct the FastAPI application instance."""

    settings = settings or get_settings()

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=_build_lifespan(settings),
    )

    if settings.cors_allowed_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allowed_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    application.add_exception_handler(ReportQueryError, report_query_error_handler)
    application.include_router(api_router)

    return application


def run() -> None:
    """Serve the API on all interfaces, port 3000."""

    uvicorn.run(app, host=HOST, port=PORT)


app = create_app()
