"""Prometheus counters for diff runs."""

from __future__ import annotations

from prometheus_client import Counter

discrepancies_total = Counter(
    "grantdiff_discrepancies_total",
    "Discrepancies found between two permission snapshots",
    ["kind", "type"],
)

diff_runs_total = Counter(
    "grantdiff_diff_runs_total",
    "Completed snapshot comparisons by outcome",
    ["result"],
)
