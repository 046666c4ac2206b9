"""Telemetry views: recent window, status cards, archive and correlations."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..controller import DashboardController
from ..deps import get_controller
from ..schemas import ArchiveOut, CardOut, CardsOut, CorrelationOut, SampleOut, WindowOut

router = APIRouter(prefix="/telemetry", tags=["telemetry"])


@router.get("/window", response_model=WindowOut)
def recent_window(controller: DashboardController = Depends(get_controller)):
    """Recent window, oldest first. Empty while loading."""
    return WindowOut(
        is_loading=controller.is_loading,
        last_update=controller.engine.last_update,
        samples=[SampleOut.from_sample(s) for s in controller.window_view()],
    )


@router.get("/cards", response_model=CardsOut)
def status_cards(controller: DashboardController = Depends(get_controller)):
    sample = controller.latest_sample()
    return CardsOut(
        is_loading=controller.is_loading,
        time=sample.time,
        cards=[CardOut.from_card(c) for c in controller.cards_view()],
    )


@router.get("/archive", response_model=ArchiveOut)
def archive(controller: DashboardController = Depends(get_controller)):
    samples = controller.archive_view()
    return ArchiveOut(size=len(samples), samples=[SampleOut.from_sample(s) for s in samples])


@router.get("/correlations", response_model=List[CorrelationOut])
def correlations(controller: DashboardController = Depends(get_controller)):
    return [CorrelationOut.from_series(s) for s in controller.correlation_view()]
