"""
Observability module - Logging and Metrics.
"""

from swish_api.observability.logging import get_logger, log_context, setup_logging
from swish_api.observability.metrics import metrics, track_swish_request

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
    "metrics",
    "track_swish_request",
]
