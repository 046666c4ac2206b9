"""Utilidades compartidas (configuración y errores)."""

from .config import Settings, get_settings
from .errors import ArchiveLoadError, IsensError

__all__ = ["Settings", "get_settings", "IsensError", "ArchiveLoadError"]
