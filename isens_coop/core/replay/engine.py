"""Motor de replay: convierte un archivo estático en un stream simulado.

Máquina de estados:
- EMPTY      → sin archivo cargado; no hay ticks.
- REPLAYING  → archivo presente, cursor activo; un tick por periodo.
- CLOSED     → motor desmontado; los ticks tardíos se ignoran.

EMPTY → REPLAYING ocurre como mucho una vez, cuando el archivo llega
no vacío. Un archivo vacío deja el motor en EMPTY indefinidamente
(estado "cargando", no un error).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..domain.telemetry import PLACEHOLDER_SAMPLE, TelemetrySample
from ..monitoring.metrics import REPLAY_TICKS, REPLAY_WINDOW_SIZE
from ..monitoring.stats import ReplayStats
from .scheduler import TickSource
from .window import DEFAULT_WINDOW_CAPACITY, RecentWindow

logger = logging.getLogger(__name__)


class ReplayState(Enum):
    """Estado del motor de replay."""
    EMPTY = "empty"
    REPLAYING = "replaying"
    CLOSED = "closed"


@dataclass(frozen=True)
class TickResult:
    """Resultado de aplicar un tick."""

    sample: TelemetrySample
    cursor: int
    evicted: Optional[TelemetrySample] = None


class ReplayWindowEngine:
    """Avanza un cursor cíclico sobre el archivo y alimenta la ventana reciente.

    En cada tick (solo en REPLAYING):
    1. Lee la muestra en la posición del cursor.
    2. Registra su timestamp como "última actualización".
    3. Avanza el cursor (módulo la longitud del archivo).
    4. Añade la muestra a la ventana, desalojando la más antigua si se llena.
    """

    def __init__(self, capacity: int = DEFAULT_WINDOW_CAPACITY) -> None:
        self._archive: Tuple[TelemetrySample, ...] = ()
        self._window = RecentWindow(capacity)
        self._cursor = 0
        self._last_update = ""
        self._state = ReplayState.EMPTY
        self._ticker: Optional[TickSource] = None
        self._stats = ReplayStats()

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------

    @property
    def state(self) -> ReplayState:
        return self._state

    def load(self, archive: Sequence[TelemetrySample]) -> bool:
        """Entrega el archivo al motor. Devuelve True si pasó a REPLAYING.

        Solo la primera entrega no vacía tiene efecto; el archivo queda
        inmutable durante toda la vida del motor.
        """
        if self._state is not ReplayState.EMPTY:
            logger.info("[REPLAY] Archive already delivered (state=%s), ignoring", self._state.value)
            return False

        samples = tuple(archive or ())
        if not samples:
            logger.warning("[REPLAY] Empty archive, staying in loading state")
            return False

        self._archive = samples
        self._cursor = 0
        self._state = ReplayState.REPLAYING
        self._stats.mark_started()
        logger.info("[REPLAY] Replaying %d samples (window=%d)", len(samples), self._window.capacity)

        if self._ticker is not None:
            self._ticker.start(self.tick)
        return True

    def attach(self, ticker: TickSource) -> None:
        """Conecta una fuente de ticks.

        Si el archivo aún no llegó, el ticker se arranca en la transición
        EMPTY → REPLAYING; así nunca hay ticks sin datos.
        """
        if self._state is ReplayState.CLOSED:
            return
        if self._ticker is not None and self._ticker is not ticker:
            self._ticker.cancel()
        self._ticker = ticker
        if self._state is ReplayState.REPLAYING:
            ticker.start(self.tick)

    def close(self) -> None:
        """Desmonta el motor: cancela el ticker y congela el estado."""
        if self._state is ReplayState.CLOSED:
            return
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None
        self._state = ReplayState.CLOSED
        logger.info("[REPLAY] Closed. %s", self._stats)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self) -> Optional[TickResult]:
        """Aplica un tick. No hace nada fuera de REPLAYING."""
        if self._state is not ReplayState.REPLAYING:
            return None

        sample = self._archive[self._cursor]
        self._last_update = sample.time

        next_cursor = (self._cursor + 1) % len(self._archive)
        wrapped = next_cursor == 0
        self._cursor = next_cursor

        evicted = self._window.append(sample)

        self._stats.record_tick(wrapped=wrapped, evicted=evicted is not None)
        REPLAY_TICKS.inc()
        REPLAY_WINDOW_SIZE.set(len(self._window))
        logger.debug("[REPLAY] tick time=%s cursor=%d window=%d", sample.time, next_cursor, len(self._window))

        return TickResult(sample=sample, cursor=next_cursor, evicted=evicted)

    # ------------------------------------------------------------------
    # Vistas de solo lectura
    # ------------------------------------------------------------------

    @property
    def archive(self) -> Tuple[TelemetrySample, ...]:
        return self._archive

    @property
    def window(self) -> Tuple[TelemetrySample, ...]:
        return self._window.snapshot()

    @property
    def latest(self) -> Optional[TelemetrySample]:
        return self._window.latest

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def last_update(self) -> str:
        return self._last_update

    @property
    def is_loading(self) -> bool:
        return len(self._window) == 0

    @property
    def stats(self) -> ReplayStats:
        return self._stats

    def latest_or_fallback(self) -> TelemetrySample:
        """Última muestra de la ventana, o la primera del archivo, o relleno."""
        latest = self._window.latest
        if latest is not None:
            return latest
        if self._archive:
            return self._archive[0]
        return PLACEHOLDER_SAMPLE
