"""CLI entry point for the telemetry dashboard service."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import Optional, Sequence

import uvicorn

from .common.config import get_settings
from .core.replay import ManualTicker
from .dashboard.controller import DashboardController

logger = logging.getLogger(__name__)


def _simulate(controller: DashboardController, ticks: int) -> int:
    ticker = ManualTicker()
    controller.start(ticker)
    try:
        for _ in range(ticks):
            if not ticker.fire():
                break
            assessment = controller.assessment_view()
            logger.info(
                "tick=%d time=%s window=%d score=%d status=%s reasons=%s",
                ticker.fired,
                controller.engine.last_update,
                len(controller.window_view()),
                assessment.rounded_score,
                assessment.status.value,
                assessment.reason_text,
            )
    finally:
        controller.close()
    return ticker.fired


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = get_settings()

    p = argparse.ArgumentParser(description="iSENS-COOP telemetry replay dashboard")
    p.add_argument("--archive", default=settings.archive_path, help="telemetry archive (.json or .csv)")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.add_argument("--tick-seconds", type=float, default=settings.tick_seconds)
    p.add_argument("--log-level", default=settings.log_level)
    p.add_argument(
        "--simulate",
        type=int,
        metavar="N",
        default=None,
        help="replay N ticks offline and log each assessment instead of serving",
    )
    args = p.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    if args.tick_seconds <= 0:
        p.error("--tick-seconds must be > 0")

    settings = replace(
        settings,
        archive_path=args.archive,
        host=args.host,
        port=args.port,
        tick_seconds=args.tick_seconds,
        log_level=args.log_level.upper(),
    )

    if args.simulate is not None:
        controller = DashboardController.from_settings(settings)
        if not controller.load_from_file(settings.archive_path):
            logger.warning("No samples available, nothing to simulate")
            return
        fired = _simulate(controller, max(0, args.simulate))
        logger.info("Simulation finished after %d ticks", fired)
        return

    from .dashboard.main import create_app

    logger.info("Serving on %s:%d (archive=%s, tick=%.1fs)", settings.host, settings.port, settings.archive_path, settings.tick_seconds)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
