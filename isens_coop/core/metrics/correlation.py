"""Correlation insight over the full (unwindowed) archive.

Three fixed pairs are exposed as scatter series together with a Pearson
coefficient: temperature vs CO₂, temperature vs NH₃ and humidity vs PM2.5.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..domain.telemetry import TelemetrySample

CORRELATION_PAIRS: Tuple[Tuple[str, str, str], ...] = (
    ("Temp vs CO₂", "temp", "co2"),
    ("Temp vs NH₃", "temp", "nh3"),
    ("Humidity vs PM2.5", "humidity", "pm25"),
)


@dataclass(frozen=True)
class CorrelationSeries:
    """Scatter points for one metric pair plus its Pearson r."""

    title: str
    x_key: str
    y_key: str
    points: Tuple[Tuple[float, float], ...]
    pearson_r: Optional[float]


def pearson(xs: Sequence[float], ys: Sequence[float]) -> Optional[float]:
    """Pearson coefficient, or None with fewer than 2 points or zero variance."""
    if len(xs) != len(ys) or len(xs) < 2:
        return None

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if np.std(x) == 0 or np.std(y) == 0:
        return None

    r = float(np.corrcoef(x, y)[0, 1])
    if not np.isfinite(r):
        return None
    return r


def correlation_series(
    archive: Sequence[TelemetrySample],
    x_key: str,
    y_key: str,
    title: str = "",
) -> CorrelationSeries:
    xs = [getattr(s, x_key) for s in archive]
    ys = [getattr(s, y_key) for s in archive]
    return CorrelationSeries(
        title=title or f"{x_key} vs {y_key}",
        x_key=x_key,
        y_key=y_key,
        points=tuple(zip(xs, ys)),
        pearson_r=pearson(xs, ys),
    )


def correlation_insight(archive: Sequence[TelemetrySample]) -> List[CorrelationSeries]:
    """All fixed pairs, in display order."""
    return [correlation_series(archive, x, y, title) for title, x, y in CORRELATION_PAIRS]
