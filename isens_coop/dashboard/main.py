from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..common.config import Settings, get_settings
from ..core.replay import AsyncioTicker, ReplayState, TickSource
from .controller import DashboardController
from .endpoints import (
    activity_router,
    consumption_router,
    health_router,
    mortality_router,
    telemetry_router,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    controller: Optional[DashboardController] = None,
    ticker: Optional[TickSource] = None,
) -> FastAPI:
    """Build the dashboard app.

    The lifespan handler attaches the tick source, loads the archive (unless
    the controller already has one) and tears the replay down on shutdown
    so no tick acts on disposed state.
    """
    settings = settings or get_settings()
    controller = controller or DashboardController.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        active_ticker: TickSource = ticker or AsyncioTicker(period_seconds=settings.tick_seconds)
        controller.start(active_ticker)

        if controller.replay_state is ReplayState.EMPTY:
            if controller.load_from_file(settings.archive_path):
                logger.info("[DASHBOARD] Archive loaded from %s", settings.archive_path)

        try:
            yield
        finally:
            controller.close()
            if isinstance(active_ticker, AsyncioTicker):
                await active_ticker.aclose()
            logger.info("[DASHBOARD] Shutdown complete")

    app = FastAPI(title="iSENS-COOP Telemetry Service", version=__version__, lifespan=lifespan)
    app.state.controller = controller
    app.state.settings = settings

    app.include_router(health_router)
    app.include_router(telemetry_router)
    app.include_router(activity_router)
    app.include_router(consumption_router)
    app.include_router(mortality_router)
    return app


app = create_app()
