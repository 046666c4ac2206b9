"""Health, system status and metrics endpoints."""

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from ..controller import DashboardController
from ..deps import get_controller
from ..schemas import SystemOut

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness probe. Always ok while the process runs."""
    return {"status": "ok"}


@router.get("/system", response_model=SystemOut)
def system(controller: DashboardController = Depends(get_controller)):
    """Last update label and Online / Starting… status."""
    h = controller.system_health()
    return SystemOut(
        last_update=h.last_update,
        status=h.status,
        archive_size=h.archive_size,
        window_size=h.window_size,
        replay_state=h.replay_state,
        replay=h.replay,
    )


@router.get("/metrics")
def metrics():
    """Prometheus exposition."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
