"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from .controller import DashboardController


def get_controller(request: Request) -> DashboardController:
    """Controller owned by the running app (set in ``create_app``)."""
    return request.app.state.controller
