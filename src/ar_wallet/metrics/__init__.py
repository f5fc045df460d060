"""Metrics — Prometheus metrics collection."""

from __future__ import annotations

from ar_wallet.metrics.collector import DraftMetrics, MetricsCollector

__all__ = ["DraftMetrics", "MetricsCollector"]
