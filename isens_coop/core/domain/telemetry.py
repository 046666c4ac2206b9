"""Modelo de dominio para muestras de telemetría ambiental."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

# Contrato con el archivo de datos: etiqueta de campo -> atributo.
# Las etiquetas deben coincidir EXACTAMENTE con las del archivo fuente.
FIELD_LABELS: Dict[str, str] = {
    "time": "Timestamp",
    "temp": "Temperature (°C)",
    "humidity": "Humidity (%)",
    "co2": "CO₂ (ppm)",
    "nh3": "Ammonia (ppm)",
    "pm25": "PM2.5 (µg/m³)",
}

NUMERIC_FIELDS = ("temp", "humidity", "co2", "nh3", "pm25")


@dataclass(frozen=True)
class TelemetrySample:
    """Lectura ambiental del galpón - inmutable una vez creada.

    Este es el contrato que fluye por todo el core:
    Loader → Replay → Métricas derivadas
    """

    time: str
    temp: float  # °C
    humidity: float  # %
    co2: float  # ppm
    nh3: float  # ppm
    pm25: float  # µg/m³

    def to_dict(self) -> dict:
        return asdict(self)


# Muestra de relleno para tarjetas cuando aún no hay datos.
PLACEHOLDER_SAMPLE = TelemetrySample(time="-", temp=0.0, humidity=0.0, co2=0.0, nh3=0.0, pm25=0.0)
