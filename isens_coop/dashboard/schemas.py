from __future__ import annotations

import datetime as dt
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from ..core.domain import ComparisonRow, ConsumptionEntry, MortalityEntry, TelemetrySample
from ..core.metrics import AnomalyAssessment, CorrelationSeries, MetricCard


class SampleOut(BaseModel):
    time: str
    temp: float
    humidity: float
    co2: float
    nh3: float
    pm25: float

    @classmethod
    def from_sample(cls, sample: TelemetrySample) -> "SampleOut":
        return cls(**sample.to_dict())


class WindowOut(BaseModel):
    is_loading: bool
    last_update: str
    samples: List[SampleOut] = Field(default_factory=list)


class ArchiveOut(BaseModel):
    size: int
    samples: List[SampleOut] = Field(default_factory=list)


class CardOut(BaseModel):
    key: str
    label: str
    unit: str
    value: float
    limit: float
    tier: str
    color: str
    above_limit: bool

    @classmethod
    def from_card(cls, card: MetricCard) -> "CardOut":
        return cls(
            key=card.key,
            label=card.label,
            unit=card.unit,
            value=card.value,
            limit=card.limit,
            tier=card.tier.value,
            color=card.color,
            above_limit=card.above_limit,
        )


class CardsOut(BaseModel):
    is_loading: bool
    time: str
    cards: List[CardOut] = Field(default_factory=list)


class ActivityOut(BaseModel):
    activity_score: float
    rounded_score: int
    status: str
    reasons: List[str]
    reason_text: str

    @classmethod
    def from_assessment(cls, assessment: AnomalyAssessment) -> "ActivityOut":
        return cls(
            activity_score=assessment.activity_score,
            rounded_score=assessment.rounded_score,
            status=assessment.status.value,
            reasons=list(assessment.reasons),
            reason_text=assessment.reason_text,
        )


class CorrelationOut(BaseModel):
    title: str
    x_key: str
    y_key: str
    points: List[Tuple[float, float]] = Field(default_factory=list)
    pearson_r: Optional[float] = None

    @classmethod
    def from_series(cls, series: CorrelationSeries) -> "CorrelationOut":
        return cls(
            title=series.title,
            x_key=series.x_key,
            y_key=series.y_key,
            points=list(series.points),
            pearson_r=series.pearson_r,
        )


class ConsumptionIn(BaseModel):
    day: int
    feed_kg: float
    water_l: float


class ConsumptionEntryOut(BaseModel):
    day: int
    feed_kg: float
    water_l: float

    @classmethod
    def from_entry(cls, entry: ConsumptionEntry) -> "ConsumptionEntryOut":
        return cls(day=entry.day, feed_kg=entry.feed_kg, water_l=entry.water_l)


class ConsumptionOut(BaseModel):
    next_day: int
    entries: List[ConsumptionEntryOut] = Field(default_factory=list)


class UpsertResult(BaseModel):
    accepted: bool
    next_day: int


class ComparisonRowOut(BaseModel):
    day: int
    feed_kg: float
    water_l: float
    std_feed_kg: float
    std_water_l: float

    @classmethod
    def from_row(cls, row: ComparisonRow) -> "ComparisonRowOut":
        return cls(**row.to_dict())


class MortalityIn(BaseModel):
    # Sin fecha la entrada se rechaza (no-op), no es un 422.
    date: Optional[dt.date] = None
    count: int = 0
    notes: Optional[str] = None


class MortalityEntryOut(BaseModel):
    date: dt.date
    count: int
    notes: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: MortalityEntry) -> "MortalityEntryOut":
        return cls(date=entry.date, count=entry.count, notes=entry.notes)


class MortalityOut(BaseModel):
    total: int
    entries: List[MortalityEntryOut] = Field(default_factory=list)


class MortalityResult(BaseModel):
    accepted: bool
    entries: int


class SystemOut(BaseModel):
    last_update: str
    status: str
    archive_size: int
    window_size: int
    replay_state: str
    replay: dict = Field(default_factory=dict)
