"""Métricas Prometheus del servicio."""

from __future__ import annotations

from prometheus_client import Counter, Gauge

REPLAY_TICKS = Counter(
    "isens_replay_ticks_total",
    "Total replay ticks applied to the recent window",
)
REPLAY_WINDOW_SIZE = Gauge(
    "isens_replay_window_size",
    "Current number of samples in the recent window",
)
FORM_SUBMISSIONS = Counter(
    "isens_form_submissions_total",
    "Manual form submissions",
    ["form", "status"],  # consumption|mortality, accepted|rejected
)
