"""Domain layer - Modelos de dominio."""

from .telemetry import FIELD_LABELS, PLACEHOLDER_SAMPLE, TelemetrySample
from .consumption import ComparisonRow, ConsumptionEntry, MortalityEntry, StandardPoint

__all__ = [
    "FIELD_LABELS",
    "PLACEHOLDER_SAMPLE",
    "TelemetrySample",
    "ComparisonRow",
    "ConsumptionEntry",
    "MortalityEntry",
    "StandardPoint",
]
