"""Funciones canónicas de precisión numérica.

Política:
- Coerción tolerante: cualquier valor no numérico se degrada a un default,
  nunca se lanza excepción hacia el core.
- Redondeo: SOLO en frontera (vista) o donde el modelo lo define
  (curva estándar a 3 decimales).
"""

from __future__ import annotations

import math
from typing import Optional


def safe_float(value, default: Optional[float] = 0.0) -> Optional[float]:
    """Convierte un valor a float con validación de NaN/Infinity.

    Args:
        value: Valor a convertir (puede ser None, str, Decimal, etc.)
        default: Valor por defecto si es inválido

    Returns:
        Float válido o default si el valor es None, NaN, Infinity o no numérico
    """
    if value is None:
        return default
    if isinstance(value, str) and not value.strip():
        return default
    try:
        f = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(f):
        return default
    return f


def round_half_up(value: float) -> int:
    """Redondeo entero "half up" (2.5 -> 3), el que espera la vista."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    """Acota ``value`` al intervalo [lo, hi]."""
    return min(max(value, lo), hi)
