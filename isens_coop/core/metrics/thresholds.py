"""Umbrales fijos por métrica para las tarjetas de estado.

Este camino de alerta es independiente de las razones de anomalía:
- Cada métrica compara su valor contra su límite → flag ``above_limit``.
- El nivel (tier) que colorea la tarjeta depende de la métrica.
- Humedad tiene límite (85) pero su tier es SIEMPRE normal, incluso por
  encima del límite, y nunca aporta una razón de anomalía.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ..domain.telemetry import TelemetrySample


class AlertTier(str, Enum):
    """Nivel de alerta de una tarjeta."""
    NORMAL = "normal"
    CRITICAL = "critical"
    ELEVATED = "elevated"
    CAUTION = "caution"

    @property
    def color(self) -> str:
        return _TIER_COLORS[self]


_TIER_COLORS = {
    AlertTier.NORMAL: "green",
    AlertTier.CRITICAL: "red",
    AlertTier.ELEVATED: "orange",
    AlertTier.CAUTION: "yellow",
}


@dataclass(frozen=True)
class MetricThreshold:
    """Umbral de una métrica y el tier que aplica al superarlo."""

    key: str
    label: str
    unit: str
    limit: float
    breach_tier: AlertTier


THRESHOLDS: tuple[MetricThreshold, ...] = (
    MetricThreshold("temp", "Temperature", "°C", 32, AlertTier.CRITICAL),
    MetricThreshold("humidity", "Humidity", "%", 85, AlertTier.NORMAL),
    MetricThreshold("co2", "CO₂", "ppm", 1200, AlertTier.CRITICAL),
    MetricThreshold("nh3", "NH₃", "ppm", 5, AlertTier.ELEVATED),
    MetricThreshold("pm25", "PM2.5", "µg/m³", 35, AlertTier.CAUTION),
)


@dataclass(frozen=True)
class MetricCard:
    """Estado actual de una métrica para la vista de tarjetas."""

    key: str
    label: str
    unit: str
    value: float
    limit: float
    tier: AlertTier
    above_limit: bool

    @property
    def color(self) -> str:
        return self.tier.color


def evaluate_metric(threshold: MetricThreshold, value: float) -> MetricCard:
    above = value > threshold.limit
    tier = threshold.breach_tier if above else AlertTier.NORMAL
    return MetricCard(
        key=threshold.key,
        label=threshold.label,
        unit=threshold.unit,
        value=value,
        limit=threshold.limit,
        tier=tier,
        above_limit=above,
    )


def evaluate_cards(sample: TelemetrySample) -> List[MetricCard]:
    """Una tarjeta por métrica, en el orden de la tabla de umbrales."""
    return [evaluate_metric(th, getattr(sample, th.key)) for th in THRESHOLDS]
