"""Dashboard host - FastAPI app, controller y schemas."""

from .controller import DashboardController, SystemHealth

__all__ = ["DashboardController", "SystemHealth"]
