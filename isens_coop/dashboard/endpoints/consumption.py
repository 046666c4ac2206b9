"""Feed & water consumption endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..controller import DashboardController
from ..deps import get_controller
from ..schemas import (
    ComparisonRowOut,
    ConsumptionEntryOut,
    ConsumptionIn,
    ConsumptionOut,
    UpsertResult,
)

router = APIRouter(prefix="/consumption", tags=["consumption"])


@router.get("", response_model=ConsumptionOut)
def list_consumption(controller: DashboardController = Depends(get_controller)):
    return ConsumptionOut(
        next_day=controller.next_day,
        entries=[ConsumptionEntryOut.from_entry(e) for e in controller.consumption_view()],
    )


@router.post("", response_model=UpsertResult)
def upsert_consumption(payload: ConsumptionIn, controller: DashboardController = Depends(get_controller)):
    """Insert-or-update by day. Invalid values are a no-op (accepted=false)."""
    accepted = controller.upsert_consumption(payload.day, payload.feed_kg, payload.water_l)
    return UpsertResult(accepted=accepted, next_day=controller.next_day)


@router.get("/comparison", response_model=List[ComparisonRowOut])
def comparison(controller: DashboardController = Depends(get_controller)):
    """Actual vs standard curve, ascending by day."""
    return [ComparisonRowOut.from_row(r) for r in controller.comparison_view()]
