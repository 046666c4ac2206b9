"""Excepciones propias del servicio."""

from __future__ import annotations


class IsensError(Exception):
    """Base de todas las excepciones del paquete."""


class ArchiveLoadError(IsensError):
    """No se pudo leer el archivo de telemetría desde disco.

    Solo la lectura del archivo la lanza; el host la captura y se queda en
    estado "Starting…" (no hay reintento).
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load archive {path!r}: {reason}")
