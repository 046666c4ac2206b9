"""Replay layer - Ventana reciente, cursor cíclico y fuentes de tick."""

from .engine import ReplayState, ReplayWindowEngine, TickResult
from .scheduler import AsyncioTicker, ManualTicker, TickSource
from .window import DEFAULT_WINDOW_CAPACITY, RecentWindow

__all__ = [
    "ReplayState",
    "ReplayWindowEngine",
    "TickResult",
    "AsyncioTicker",
    "ManualTicker",
    "TickSource",
    "DEFAULT_WINDOW_CAPACITY",
    "RecentWindow",
]
