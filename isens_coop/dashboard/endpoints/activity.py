"""Activity score endpoint."""

from fastapi import APIRouter, Depends

from ..controller import DashboardController
from ..deps import get_controller
from ..schemas import ActivityOut

router = APIRouter(tags=["activity"])


@router.get("/activity", response_model=ActivityOut)
def activity(controller: DashboardController = Depends(get_controller)):
    """Recomputed on every request (one random draw per call)."""
    return ActivityOut.from_assessment(controller.assessment_view())
