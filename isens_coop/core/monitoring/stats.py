"""Estadísticas del replay."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ReplayStats:
    """Estadísticas de avance del cursor de replay."""

    ticks: int = 0
    loops_completed: int = 0
    evictions: int = 0
    started_at: Optional[datetime] = None
    last_tick_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"ReplayStats: ticks={self.ticks} loops={self.loops_completed} evictions={self.evictions}"

    def mark_started(self) -> None:
        self.started_at = _utcnow()

    def record_tick(self, wrapped: bool, evicted: bool) -> None:
        self.ticks += 1
        self.last_tick_at = _utcnow()
        if wrapped:
            self.loops_completed += 1
        if evicted:
            self.evictions += 1

    def to_dict(self) -> dict:
        """Convierte a diccionario."""
        return {
            "ticks": self.ticks,
            "loops_completed": self.loops_completed,
            "evictions": self.evictions,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "last_tick_at": self.last_tick_at.isoformat() if self.last_tick_at else None,
        }
