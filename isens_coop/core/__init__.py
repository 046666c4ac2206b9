"""Core - lógica de telemetría sin dependencias del host.

Estructura:
- domain/       → Modelos de dominio (muestras, consumo, mortalidad)
- loader        → Normalización del archivo de telemetría
- replay/       → Ventana reciente, cursor cíclico y fuentes de tick
- metrics/      → Score de actividad, umbrales y correlaciones
- consumption/  → Registro de consumo, curva estándar y mortalidad
- monitoring/   → Estadísticas del replay
"""
