"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, service catalog,
telemetry. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from intake.core.config import get_settings
from intake.infrastructure.catalog import JsonServiceCatalogRepository
from intake.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, catalog (fails fast on an invalid catalog file),
    telemetry (if enabled). Shutdown flushes telemetry.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    app.state.catalog_repo = JsonServiceCatalogRepository.from_file(
        settings.catalog_path or None
    )

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
