"""Metrics collector — Prometheus counters and histograms for drafts.

- ``ar_draft_finalized_total``    counter-vec   (variant)
- ``ar_draft_rejected_total``     counter-vec   (variant)
- ``ar_finalize_draft_histogram`` histogram-vec (variant)

``variant`` is ``plain`` or ``silo``.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from prometheus_client import CollectorRegistry, Counter, Histogram

if TYPE_CHECKING:
    from collections.abc import Iterator


_PREFIX = "ar"

_VARIANT_LABELS = ("variant",)


class MetricsCollector:
    """Low-level Prometheus collector that owns the registry.

    Use :class:`DraftMetrics` for the high-level tracking interface.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._registry

    def histogram(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Histogram:
        """Register and return a Histogram."""
        return Histogram(name, doc, labels, registry=self._registry)

    def counter(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Counter:
        """Register and return a Counter."""
        return Counter(name, doc, labels, registry=self._registry)


class DraftMetrics:
    """High-level draft finalization metrics.

    The histogram tracks finalize duration in seconds, including the time
    spent waiting on collaborators.
    """

    def __init__(self, collector: MetricsCollector | None = None) -> None:
        self._collector = collector or MetricsCollector()

        self._finalized = self._collector.counter(
            f"{_PREFIX}_draft_finalized",
            "Drafts successfully finalized into transactions",
            _VARIANT_LABELS,
        )
        self._rejected = self._collector.counter(
            f"{_PREFIX}_draft_rejected",
            "Drafts rejected by local validation",
            _VARIANT_LABELS,
        )
        self._finalize = self._collector.histogram(
            f"{_PREFIX}_finalize_draft_histogram",
            "Duration of draft finalization",
            _VARIANT_LABELS,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._collector.registry

    def record_rejected(self, variant: str) -> None:
        """Count a draft that failed validation."""
        self._rejected.labels(variant=variant).inc()

    @contextmanager
    def track_finalize(self, variant: str) -> Iterator[None]:
        """Track the duration of a finalize call; count it if it succeeds."""
        start = time.monotonic()
        try:
            yield
        finally:
            self._finalize.labels(variant=variant).observe(time.monotonic() - start)
        self._finalized.labels(variant=variant).inc()
