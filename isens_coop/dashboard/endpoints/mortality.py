"""Mortality logging endpoints."""

from fastapi import APIRouter, Depends

from ..controller import DashboardController
from ..deps import get_controller
from ..schemas import MortalityEntryOut, MortalityIn, MortalityOut, MortalityResult

router = APIRouter(prefix="/mortality", tags=["mortality"])


@router.get("", response_model=MortalityOut)
def list_mortality(controller: DashboardController = Depends(get_controller)):
    return MortalityOut(
        total=controller.mortality_total(),
        entries=[MortalityEntryOut.from_entry(e) for e in controller.mortality_view()],
    )


@router.post("", response_model=MortalityResult)
def add_mortality(payload: MortalityIn, controller: DashboardController = Depends(get_controller)):
    accepted = controller.add_mortality(payload.date, payload.count, payload.notes)
    return MortalityResult(accepted=accepted, entries=len(controller.mortality_view()))
