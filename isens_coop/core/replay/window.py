from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Tuple

from ..domain.telemetry import TelemetrySample

DEFAULT_WINDOW_CAPACITY = 6


class RecentWindow:
    """Buffer deslizante en memoria de las últimas muestras simuladas.

    - Orden de inserción = orden de llegada (la más antigua primero).
    - La longitud nunca supera ``capacity``.
    - Al superar la capacidad se descarta SIEMPRE la muestra más antigua.
    """

    def __init__(self, capacity: int = DEFAULT_WINDOW_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = int(capacity)
        self._buffer: Deque[TelemetrySample] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, sample: TelemetrySample) -> Optional[TelemetrySample]:
        """Añade una muestra y devuelve la desalojada (o None)."""
        self._buffer.append(sample)
        if len(self._buffer) > self._capacity:
            return self._buffer.popleft()
        return None

    @property
    def latest(self) -> Optional[TelemetrySample]:
        return self._buffer[-1] if self._buffer else None

    @property
    def is_full(self) -> bool:
        return len(self._buffer) >= self._capacity

    def snapshot(self) -> Tuple[TelemetrySample, ...]:
        """Copia inmutable de la ventana (la más antigua primero)."""
        return tuple(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)
