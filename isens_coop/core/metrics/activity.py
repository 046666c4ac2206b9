"""Score de actividad sintético y razones de anomalía.

El score NO sale de visión artificial: es una heurística sobre la última
muestra más un ruido aleatorio inyectado. La fuente de aleatoriedad es
explícita para poder reproducir los resultados en tests.

Algoritmo:
- temp_penalty     = clamp(|temp - 28| * 3, 0, 40)
- humidity_penalty = clamp(|humidity - 65| * 0.8, 0, 25)
- noise            = random * 10
- score            = clamp(90 - temp_penalty - humidity_penalty + noise, 5, 95)

Las razones se evalúan en orden fijo de prioridad, independientemente del
score salvo la última ("Low movement").
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..domain.telemetry import TelemetrySample
from ..numeric import clamp, round_half_up, safe_float

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]

DEFAULT_SCORE = 50.0
INSUFFICIENT_DATA = "Insufficient data"
NORMAL_REASON = "Normal"

OPTIMAL_TEMP = 28.0
OPTIMAL_HUMIDITY = 65.0
LOW_MOVEMENT_SCORE = 35.0
MODERATE_SCORE = 60.0


class ActivityStatus(str, Enum):
    """Lectura cualitativa del score."""
    ABNORMAL_LOW = "Abnormal (Low)"
    MODERATE = "Moderate"
    NORMAL = "Normal"


@dataclass(frozen=True)
class AnomalyAssessment:
    """Evaluación derivada; se recalcula en cada lectura, nunca se guarda."""

    activity_score: float
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def reason_text(self) -> str:
        return ", ".join(self.reasons)

    @property
    def rounded_score(self) -> int:
        return round_half_up(self.activity_score)

    @property
    def status(self) -> ActivityStatus:
        return classify_activity(self.activity_score)


def classify_activity(score: float) -> ActivityStatus:
    if score < LOW_MOVEMENT_SCORE:
        return ActivityStatus.ABNORMAL_LOW
    if score < MODERATE_SCORE:
        return ActivityStatus.MODERATE
    return ActivityStatus.NORMAL


def compute_activity_score(sample: TelemetrySample, random_value: float) -> float:
    """Score de actividad acotado a [5, 95]."""
    temp_penalty = clamp(abs(sample.temp - OPTIMAL_TEMP) * 3, 0, 40)
    humidity_penalty = clamp(abs(sample.humidity - OPTIMAL_HUMIDITY) * 0.8, 0, 25)
    noise = random_value * 10
    return clamp(90 - temp_penalty - humidity_penalty + noise, 5, 95)


def anomaly_reasons(sample: TelemetrySample, activity_score: float) -> List[str]:
    """Razones en orden fijo; ``["Normal"]`` si ninguna condición dispara."""
    reasons: List[str] = []
    if sample.temp > 32:
        reasons.append("High temperature")
    if sample.co2 > 1200:
        reasons.append("High CO₂")
    if sample.nh3 > 5:
        reasons.append("High NH₃")
    if sample.pm25 > 35:
        reasons.append("High PM2.5")
    if activity_score < LOW_MOVEMENT_SCORE:
        reasons.append("Low movement")
    return reasons or [NORMAL_REASON]


def _sanitize_random(random_value) -> float:
    # Fuera de [0, 1) se acota; no numérico cuenta como 0.
    value = safe_float(random_value, 0.0)
    return clamp(value, 0.0, 1.0)


def assess_activity(sample: Optional[TelemetrySample], random_value: float) -> AnomalyAssessment:
    """Función pura (muestra, aleatorio en [0,1)) → AnomalyAssessment.

    Sin muestra devuelve el default fijo (50, "Insufficient data").
    """
    if sample is None:
        return AnomalyAssessment(activity_score=DEFAULT_SCORE, reasons=(INSUFFICIENT_DATA,))

    score = compute_activity_score(sample, _sanitize_random(random_value))
    return AnomalyAssessment(activity_score=score, reasons=tuple(anomaly_reasons(sample, score)))


class ActivityAnalyzer:
    """Envuelve ``assess_activity`` con una fuente de aleatoriedad inyectada.

    Una sola extracción aleatoria por evaluación: score y razones salen del
    mismo valor.
    """

    def __init__(self, random_source: Optional[RandomSource] = None) -> None:
        self._random: RandomSource = random_source or random.random

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "ActivityAnalyzer":
        if seed is None:
            return cls()
        return cls(random.Random(seed).random)

    def assess(self, sample: Optional[TelemetrySample]) -> AnomalyAssessment:
        if sample is None:
            return assess_activity(None, 0.0)
        try:
            draw = self._random()
        except Exception as e:
            logger.exception("[ACTIVITY] Random source failed, using 0: %s", e)
            draw = 0.0
        return assess_activity(sample, draw)
