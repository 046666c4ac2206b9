from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional, Tuple

from ..domain.consumption import MortalityEntry
from ..monitoring.metrics import FORM_SUBMISSIONS
from ..numeric import safe_float

logger = logging.getLogger(__name__)


def _coerce_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def _coerce_count(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    count = safe_float(value, None)
    if count is None or count < 0 or not count.is_integer():
        return None
    return int(count)


class MortalityLog:
    """Registro append-only de mortalidad.

    No hay unicidad por fecha: varias entradas para el mismo día se
    acumulan de forma independiente.
    """

    def __init__(self) -> None:
        self._entries: List[MortalityEntry] = []

    def add(self, entry_date, count, notes: Optional[str] = None) -> bool:
        """Añade una entrada. Devuelve False (sin efecto) si es inválida."""
        parsed_date = _coerce_date(entry_date)
        parsed_count = _coerce_count(count)
        if parsed_date is None or parsed_count is None:
            logger.info("[MORTALITY] Rejected entry date=%r count=%r", entry_date, count)
            FORM_SUBMISSIONS.labels(form="mortality", status="rejected").inc()
            return False

        clean_notes = notes.strip() if isinstance(notes, str) else None
        self._entries.append(
            MortalityEntry(date=parsed_date, count=parsed_count, notes=clean_notes or None)
        )
        FORM_SUBMISSIONS.labels(form="mortality", status="accepted").inc()
        logger.info("[MORTALITY] Added date=%s count=%d", parsed_date.isoformat(), parsed_count)
        return True

    def entries(self) -> Tuple[MortalityEntry, ...]:
        """Entradas en orden de registro."""
        return tuple(self._entries)

    def total(self) -> int:
        return sum(e.count for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)
