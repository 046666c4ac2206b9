"""Monitoring layer - Estadísticas y métricas de replay."""

from .stats import ReplayStats

__all__ = ["ReplayStats"]
