"""Metrics layer - Score de actividad, umbrales y correlaciones."""

from .activity import (
    ActivityAnalyzer,
    ActivityStatus,
    AnomalyAssessment,
    anomaly_reasons,
    assess_activity,
    compute_activity_score,
)
from .correlation import CorrelationSeries, correlation_insight, pearson
from .thresholds import THRESHOLDS, AlertTier, MetricCard, MetricThreshold, evaluate_cards

__all__ = [
    "ActivityAnalyzer",
    "ActivityStatus",
    "AnomalyAssessment",
    "anomaly_reasons",
    "assess_activity",
    "compute_activity_score",
    "CorrelationSeries",
    "correlation_insight",
    "pearson",
    "THRESHOLDS",
    "AlertTier",
    "MetricCard",
    "MetricThreshold",
    "evaluate_cards",
]
