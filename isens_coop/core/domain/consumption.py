"""Modelos de consumo (alimento/agua) y mortalidad."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ConsumptionEntry:
    """Consumo registrado manualmente para un día del lote."""

    day: int
    feed_kg: float
    water_l: float


@dataclass(frozen=True)
class StandardPoint:
    """Valor de la curva estándar para un día."""

    day: int
    feed_kg: float
    water_l: float


@dataclass(frozen=True)
class ComparisonRow:
    """Consumo observado vs curva estándar para un día."""

    day: int
    feed_kg: float
    water_l: float
    std_feed_kg: float
    std_water_l: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class MortalityEntry:
    """Registro manual de mortalidad (puede haber varios por fecha)."""

    date: date
    count: int
    notes: Optional[str] = None
