"""Fixtures compartidas."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import pytest

from isens_coop.core.domain import TelemetrySample
from isens_coop.core.metrics import ActivityAnalyzer
from isens_coop.core.replay import ManualTicker
from isens_coop.dashboard.controller import DashboardController


def make_record(
    time: Any = "08:00",
    temp: Any = 28.0,
    humidity: Any = 65.0,
    co2: Any = 900.0,
    nh3: Any = 2.0,
    pm25: Any = 20.0,
) -> Dict[str, Any]:
    """Registro crudo con las etiquetas exactas del archivo de datos."""
    return {
        "Timestamp": time,
        "Temperature (°C)": temp,
        "Humidity (%)": humidity,
        "CO₂ (ppm)": co2,
        "Ammonia (ppm)": nh3,
        "PM2.5 (µg/m³)": pm25,
    }


def make_sample(
    time: str = "08:00",
    temp: float = 28.0,
    humidity: float = 65.0,
    co2: float = 900.0,
    nh3: float = 2.0,
    pm25: float = 20.0,
) -> TelemetrySample:
    return TelemetrySample(time=time, temp=temp, humidity=humidity, co2=co2, nh3=nh3, pm25=pm25)


@pytest.fixture
def record_factory() -> Callable[..., Dict[str, Any]]:
    return make_record


@pytest.fixture
def sample_factory() -> Callable[..., TelemetrySample]:
    return make_sample


@pytest.fixture
def archive() -> List[TelemetrySample]:
    """Archivo de 4 muestras distinguibles por timestamp."""
    return [make_sample(time=f"08:{i:02d}", temp=28.0 + i) for i in range(4)]


@pytest.fixture
def manual_ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture
def controller() -> DashboardController:
    """Controller con ruido fijo (0.5) para resultados reproducibles."""
    return DashboardController(analyzer=ActivityAnalyzer(lambda: 0.5))
