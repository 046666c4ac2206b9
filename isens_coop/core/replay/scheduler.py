"""Fuentes de tick para el motor de replay.

El motor no sabe quién lo despierta: en producción un ``AsyncioTicker``
(timer periódico en el event loop del host) y en tests/simulación un
``ManualTicker`` que se avanza a mano. Ambos cumplen "dispara
periódicamente hasta que se cancela".
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]


class TickSource(Protocol):
    """Interfaz de timer periódico cancelable."""

    @property
    def running(self) -> bool:
        ...

    def start(self, callback: TickCallback) -> None:
        """Empieza a invocar ``callback`` en cada tick."""
        ...

    def cancel(self) -> None:
        """Deja de programar ticks. Tras cancelar no se invoca el callback."""
        ...


class AsyncioTicker:
    """Timer periódico sobre asyncio.

    Uso:
        ticker = AsyncioTicker(period_seconds=2.0)
        ticker.start(engine.tick)   # dentro de un event loop activo
        ...
        ticker.cancel()
    """

    def __init__(self, period_seconds: float = 2.0) -> None:
        if period_seconds <= 0:
            raise ValueError("period_seconds must be > 0")
        self._period = float(period_seconds)
        self._callback: Optional[TickCallback] = None
        self._task: Optional[asyncio.Task] = None
        self._running = False

    @property
    def period_seconds(self) -> float:
        return self._period

    @property
    def running(self) -> bool:
        return self._running

    def start(self, callback: TickCallback) -> None:
        """Programa el loop en el event loop actual (requiere loop activo)."""
        if self._running:
            return

        loop = asyncio.get_running_loop()
        self._callback = callback
        self._running = True
        self._task = loop.create_task(self._run_loop())
        logger.info("[TICKER] Started (period=%.2fs)", self._period)

    def cancel(self) -> None:
        if not self._running and self._task is None:
            return
        self._running = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
        logger.info("[TICKER] Cancelled")

    async def aclose(self) -> None:
        """Cancela y espera a que termine la tarea de fondo."""
        self.cancel()
        task, self._task = self._task, None
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def _run_loop(self) -> None:
        while self._running:
            try:
                await asyncio.sleep(self._period)
            except asyncio.CancelledError:
                break
            if not self._running or self._callback is None:
                break
            try:
                self._callback()
            except Exception as e:
                logger.exception("[TICKER] Tick callback failed: %s", e)


class ManualTicker:
    """Timer que solo avanza cuando se llama a ``fire``."""

    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None
        self._running = False
        self.fired = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self._running = True

    def cancel(self) -> None:
        self._running = False
        self._callback = None

    def fire(self, times: int = 1) -> int:
        """Dispara ``times`` ticks; devuelve cuántos se entregaron."""
        delivered = 0
        for _ in range(max(0, times)):
            if not self._running or self._callback is None:
                break
            self._callback()
            delivered += 1
        self.fired += delivered
        return delivered
