"""Módulo de endpoints HTTP.

Contiene los endpoints del dashboard organizados por función.
"""

from .health import router as health_router
from .telemetry import router as telemetry_router
from .activity import router as activity_router
from .consumption import router as consumption_router
from .mortality import router as mortality_router

__all__ = [
    "health_router",
    "telemetry_router",
    "activity_router",
    "consumption_router",
    "mortality_router",
]
