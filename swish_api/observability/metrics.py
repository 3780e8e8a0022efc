"""
Metrics Collection with Prometheus.

Counts and times every outbound Swish call. The embedding application
exposes the default registry however it already exposes metrics.
"""

import time
from enum import StrEnum

from prometheus_client import Counter, Gauge, Histogram


class MetricLabels(StrEnum):
    """Standard metric label names."""

    OPERATION = "operation"
    STATUS_CODE = "status_code"
    ERROR_TYPE = "error_type"


class SwishMetrics:
    """Centralized metrics for Swish API calls."""

    def __init__(self) -> None:
        """Initialize all Prometheus metrics."""
        self.requests_total = Counter(
            "swish_requests_total",
            "Total requests sent to the Swish API",
            [MetricLabels.OPERATION, MetricLabels.STATUS_CODE],
        )

        self.request_duration_seconds = Histogram(
            "swish_request_duration_seconds",
            "Swish API request duration in seconds",
            [MetricLabels.OPERATION],
            buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
        )

        self.requests_in_progress = Gauge(
            "swish_requests_in_progress",
            "Number of Swish API requests currently in flight",
            [MetricLabels.OPERATION],
        )

        self.errors_total = Counter(
            "swish_errors_total",
            "Total failed Swish operations by error type",
            [MetricLabels.ERROR_TYPE, MetricLabels.OPERATION],
        )

    def record_request(self, operation: str, status_code: int, duration: float) -> None:
        """Record one completed HTTP exchange."""
        self.requests_total.labels(operation=operation, status_code=status_code).inc()
        self.request_duration_seconds.labels(operation=operation).observe(duration)

    def record_error(self, error_type: str, operation: str) -> None:
        """Record a failed operation."""
        self.errors_total.labels(error_type=error_type, operation=operation).inc()


# Global metrics instance
metrics = SwishMetrics()


class track_swish_request:
    """
    Context manager for tracking one Swish operation.

    Usage:
        with track_swish_request("create_payment") as tracker:
            response = await http_client.send(request)
            tracker.set_status_code(response.status_code)

    Operations that fail before a response arrives are recorded with
    status code 0.
    """

    def __init__(self, operation: str, enabled: bool = True) -> None:
        self.operation = operation
        self.enabled = enabled
        self.status_code = 0
        self.start_time: float = 0.0

    def set_status_code(self, status_code: int) -> None:
        """Set the response status code."""
        self.status_code = status_code

    def __enter__(self) -> "track_swish_request":
        """Start tracking."""
        self.start_time = time.monotonic()
        if self.enabled:
            metrics.requests_in_progress.labels(operation=self.operation).inc()
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object) -> None:
        """Record metrics."""
        if not self.enabled:
            return
        duration = time.monotonic() - self.start_time
        metrics.record_request(self.operation, self.status_code, duration)
        if exc_type is not None:
            metrics.record_error(exc_type.__name__, self.operation)
        metrics.requests_in_progress.labels(operation=self.operation).dec()
