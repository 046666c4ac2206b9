"""Registro de consumo diario y comparación contra la curva estándar.

- ``ConsumptionLog.upsert`` inserta o actualiza por número de día.
- ``standard_curve`` es determinista: solo depende del día.
- ``compare`` arma la vista observado vs modelo, ordenada por día; se
  recalcula en cada lectura, no hay cache.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..domain.consumption import ComparisonRow, ConsumptionEntry, StandardPoint
from ..monitoring.metrics import FORM_SUBMISSIONS
from ..numeric import safe_float

logger = logging.getLogger(__name__)

STD_FEED_BASE = 0.05
STD_FEED_INC = 0.015
STD_FEED_EXPONENT = 1.15
STD_WATER_RATIO = 2.2
STD_DECIMALS = 3

DEFAULT_CONSUMPTION: tuple[ConsumptionEntry, ...] = (
    ConsumptionEntry(day=1, feed_kg=0.06, water_l=0.13),
    ConsumptionEntry(day=2, feed_kg=0.07, water_l=0.15),
    ConsumptionEntry(day=3, feed_kg=0.08, water_l=0.18),
    ConsumptionEntry(day=4, feed_kg=0.10, water_l=0.21),
    ConsumptionEntry(day=5, feed_kg=0.12, water_l=0.25),
)


def standard_feed_kg(day: int) -> float:
    """Alimento estándar (kg) = base + inc * day^1.15, a 3 decimales."""
    return round(STD_FEED_BASE + STD_FEED_INC * day ** STD_FEED_EXPONENT, STD_DECIMALS)


def standard_water_l(day: int) -> float:
    """Agua estándar (L) = alimento estándar * 2.2, a 3 decimales."""
    return round(standard_feed_kg(day) * STD_WATER_RATIO, STD_DECIMALS)


def standard_curve(day: int) -> StandardPoint:
    return StandardPoint(day=day, feed_kg=standard_feed_kg(day), water_l=standard_water_l(day))


def _coerce_day(day) -> Optional[int]:
    if isinstance(day, bool):
        return None
    value = safe_float(day, None)
    if value is None or not value.is_integer():
        return None
    return int(value)


def _coerce_amount(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    amount = safe_float(value, None)
    if amount is None or amount < 0:
        return None
    return amount


class ConsumptionLog:
    """Mapa día → entrada de consumo; la unicidad del día la garantiza upsert.

    Se siembra con los días 1–5 y nunca decrece.
    """

    def __init__(self, seed: Optional[Iterable[ConsumptionEntry]] = None) -> None:
        self._entries: Dict[int, ConsumptionEntry] = {}
        for entry in DEFAULT_CONSUMPTION if seed is None else seed:
            self._entries[entry.day] = entry
        self._next_day = len(self._entries) + 1

    @property
    def next_day(self) -> int:
        """Sugerencia de día para el siguiente registro."""
        return self._next_day

    def upsert(self, day, feed_kg, water_l) -> bool:
        """Inserta o reemplaza el consumo de ``day``.

        Devuelve False (sin efecto) si el día no es un entero positivo o si
        alguna cantidad no es un número finito >= 0. Nunca lanza.
        """
        day_value = _coerce_day(day)
        feed = _coerce_amount(feed_kg)
        water = _coerce_amount(water_l)

        if day_value is None or day_value <= 0 or feed is None or water is None:
            logger.info(
                "[CONSUMPTION] Rejected entry day=%r feed_kg=%r water_l=%r",
                day, feed_kg, water_l,
            )
            FORM_SUBMISSIONS.labels(form="consumption", status="rejected").inc()
            return False

        updated = day_value in self._entries
        self._entries[day_value] = ConsumptionEntry(day=day_value, feed_kg=feed, water_l=water)
        self._next_day += 1

        FORM_SUBMISSIONS.labels(form="consumption", status="accepted").inc()
        logger.info(
            "[CONSUMPTION] %s day=%d feed_kg=%s water_l=%s",
            "Updated" if updated else "Added", day_value, feed, water,
        )
        return True

    def get(self, day: int) -> Optional[ConsumptionEntry]:
        return self._entries.get(day)

    def entries(self) -> List[ConsumptionEntry]:
        """Entradas ordenadas por día ascendente."""
        return sorted(self._entries.values(), key=lambda e: e.day)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, day: object) -> bool:
        return day in self._entries


def compare(log: ConsumptionLog) -> List[ComparisonRow]:
    """Une cada día registrado con su valor de curva estándar."""
    rows: List[ComparisonRow] = []
    for entry in log.entries():
        std = standard_curve(entry.day)
        rows.append(
            ComparisonRow(
                day=entry.day,
                feed_kg=entry.feed_kg,
                water_l=entry.water_l,
                std_feed_kg=std.feed_kg,
                std_water_l=std.water_l,
            )
        )
    return rows
