"""Metrics service for tracking recommendation fetches.

Singleton service to track fetch calls, failures and latency per provider.
"""

import threading
from typing import Dict


class MetricsService:
    """Singleton service for tracking API metrics.

    Thread-safe counters and latency tracking for recommendation fetches.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        """Create singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(MetricsService, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize metrics counters."""
        if self._initialized:
            return

        self._lock = threading.Lock()
        self._fetch_counts: Dict[str, int] = {}
        self._failure_count = 0
        self._total_latency_ms = 0.0
        self._min_latency_ms = float('inf')
        self._max_latency_ms = 0.0
        self._initialized = True

    def record_fetch(self, source: str, latency_ms: float) -> None:
        """Record a successful fetch with its latency.

        Args:
            source: Provider source that served the request
            latency_ms: Latency in milliseconds
        """
        with self._lock:
            self._fetch_counts[source] = self._fetch_counts.get(source, 0) + 1
            self._total_latency_ms += latency_ms

            if latency_ms < self._min_latency_ms:
                self._min_latency_ms = latency_ms

            if latency_ms > self._max_latency_ms:
                self._max_latency_ms = latency_ms

    def record_failure(self) -> None:
        """Record a failed fetch."""
        with self._lock:
            self._failure_count += 1

    def get_metrics(self) -> Dict:
        """Get current metrics.

        Returns:
            Dictionary with metrics including:
            - fetch_count: Total number of successful fetches
            - fetch_count_by_source: Successful fetches per provider source
            - failure_count: Number of failed fetches
            - average_latency_ms: Average latency of successful fetches
            - min_latency_ms: Minimum latency observed
            - max_latency_ms: Maximum latency observed
        """
        with self._lock:
            fetch_count = sum(self._fetch_counts.values())
            avg_latency = (
                self._total_latency_ms / fetch_count
                if fetch_count > 0
                else 0.0
            )

            return {
                "fetch_count": fetch_count,
                "fetch_count_by_source": dict(self._fetch_counts),
                "failure_count": self._failure_count,
                "average_latency_ms": round(avg_latency, 2),
                "min_latency_ms": round(self._min_latency_ms, 2) if self._min_latency_ms != float('inf') else 0.0,
                "max_latency_ms": round(self._max_latency_ms, 2),
            }

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self._lock:
            self._fetch_counts = {}
            self._failure_count = 0
            self._total_latency_ms = 0.0
            self._min_latency_ms = float('inf')
            self._max_latency_ms = 0.0


# Global singleton instance
metrics_service = MetricsService()
