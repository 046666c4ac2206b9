"""Consumption layer - Consumo vs curva estándar y mortalidad."""

from .comparator import (
    DEFAULT_CONSUMPTION,
    ConsumptionLog,
    compare,
    standard_curve,
    standard_feed_kg,
    standard_water_l,
)
from .mortality import MortalityLog

__all__ = [
    "DEFAULT_CONSUMPTION",
    "ConsumptionLog",
    "compare",
    "standard_curve",
    "standard_feed_kg",
    "standard_water_l",
    "MortalityLog",
]
