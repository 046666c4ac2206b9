"""Controller único dueño de todo el estado mutable del dashboard.

La capa de presentación solo tiene referencias de lectura: los únicos
mutadores son los ticks del motor de replay y los formularios manuales
(consumo y mortalidad). Todo corre en un único timeline lógico (event
loop del host), así que no hay lecturas a medias.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from ..common.config import Settings
from ..common.errors import ArchiveLoadError
from ..core.consumption import ConsumptionLog, MortalityLog, compare
from ..core.domain import ComparisonRow, ConsumptionEntry, MortalityEntry, TelemetrySample
from ..core.loader import normalize_records, read_archive_file
from ..core.metrics import (
    ActivityAnalyzer,
    AnomalyAssessment,
    CorrelationSeries,
    MetricCard,
    correlation_insight,
    evaluate_cards,
)
from ..core.replay import DEFAULT_WINDOW_CAPACITY, ReplayState, ReplayWindowEngine, TickResult, TickSource

logger = logging.getLogger(__name__)

STATUS_ONLINE = "Online"
STATUS_STARTING = "Starting…"
NO_UPDATE = "-"


@dataclass(frozen=True)
class SystemHealth:
    """Estado del sistema para la franja "System Health & Uptime"."""

    last_update: str
    status: str
    archive_size: int
    window_size: int
    replay_state: str
    replay: dict


class DashboardController:
    """Compone loader, motor de replay, métricas y registros manuales."""

    def __init__(
        self,
        window_capacity: int = DEFAULT_WINDOW_CAPACITY,
        analyzer: Optional[ActivityAnalyzer] = None,
        consumption: Optional[ConsumptionLog] = None,
        mortality: Optional[MortalityLog] = None,
    ) -> None:
        self._engine = ReplayWindowEngine(capacity=window_capacity)
        self._analyzer = analyzer or ActivityAnalyzer()
        # Los registros definen __len__: un registro vacío inyectado es falsy.
        self._consumption = consumption if consumption is not None else ConsumptionLog()
        self._mortality = mortality if mortality is not None else MortalityLog()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DashboardController":
        return cls(
            window_capacity=settings.window_capacity,
            analyzer=ActivityAnalyzer.seeded(settings.activity_seed),
        )

    @property
    def engine(self) -> ReplayWindowEngine:
        return self._engine

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------

    def load_records(self, records: Iterable[Any]) -> bool:
        """Normaliza los registros crudos y los entrega al motor."""
        return self._engine.load(normalize_records(records))

    def load_from_file(self, path: str | Path) -> bool:
        """Carga el archivo desde disco. Si falla, se queda en "Starting…"."""
        try:
            records = read_archive_file(path)
        except ArchiveLoadError as e:
            logger.error("[DASHBOARD] %s; staying in loading state", e)
            return False
        return self.load_records(records)

    def start(self, ticker: TickSource) -> None:
        self._engine.attach(ticker)

    def close(self) -> None:
        self._engine.close()

    def tick(self) -> Optional[TickResult]:
        return self._engine.tick()

    # ------------------------------------------------------------------
    # Mutadores de formularios
    # ------------------------------------------------------------------

    def upsert_consumption(self, day, feed_kg, water_l) -> bool:
        return self._consumption.upsert(day, feed_kg, water_l)

    def add_mortality(self, entry_date, count, notes: Optional[str] = None) -> bool:
        return self._mortality.add(entry_date, count, notes)

    # ------------------------------------------------------------------
    # Vistas de solo lectura
    # ------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self._engine.is_loading

    def window_view(self) -> Tuple[TelemetrySample, ...]:
        return self._engine.window

    def latest_sample(self) -> TelemetrySample:
        return self._engine.latest_or_fallback()

    def cards_view(self) -> List[MetricCard]:
        return evaluate_cards(self._engine.latest_or_fallback())

    def assessment_view(self) -> AnomalyAssessment:
        return self._analyzer.assess(self._engine.latest)

    def archive_view(self) -> Tuple[TelemetrySample, ...]:
        return self._engine.archive

    def correlation_view(self) -> List[CorrelationSeries]:
        return correlation_insight(self._engine.archive)

    def consumption_view(self) -> List[ConsumptionEntry]:
        return self._consumption.entries()

    @property
    def next_day(self) -> int:
        return self._consumption.next_day

    def comparison_view(self) -> List[ComparisonRow]:
        return compare(self._consumption)

    def mortality_view(self) -> Tuple[MortalityEntry, ...]:
        return self._mortality.entries()

    def mortality_total(self) -> int:
        return self._mortality.total()

    def system_health(self) -> SystemHealth:
        engine = self._engine
        loaded = len(engine.archive) > 0
        return SystemHealth(
            last_update=engine.last_update or NO_UPDATE,
            status=STATUS_ONLINE if loaded else STATUS_STARTING,
            archive_size=len(engine.archive),
            window_size=len(engine.window),
            replay_state=engine.state.value,
            replay=engine.stats.to_dict(),
        )

    @property
    def replay_state(self) -> ReplayState:
        return self._engine.state
