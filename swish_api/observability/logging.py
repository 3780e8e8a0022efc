"""
Structured Logging with Structlog.

The library only emits events; applications embedding the client call
setup_logging() once if they want the JSON or console rendering below.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from swish_api.config import SwishSettings

SERVICE_NAME = "swish-api"


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add library-level context to all log entries."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def setup_logging(settings: SwishSettings) -> None:
    """
    Configure structured logging with structlog.

    Logs are formatted as JSON for machine parsing with the following structure:
    {
        "event": "swish_payment_created",
        "level": "info",
        "timestamp": "2025-01-08T12:00:00.123456Z",
        "logger": "swish_api.client",
        "service": "swish-api",
        "payment_id": "AB23D7406ECE4542A80152D909EF9F6B",
        ...additional context
    }
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_app_context,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.log_level.upper() == "DEBUG":
        processors.append(structlog.processors.ExceptionRenderer())
    else:
        processors.append(structlog.processors.format_exc_info)

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("swish_payment_created", payment_id=payment_id)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


class log_context:
    """
    Context manager for adding structured logging context.

    Usage:
        with log_context(order_id="order-123"):
            await client.create_payment(params)
            # All logs within this context will include order_id
    """

    def __init__(self, **kwargs: Any) -> None:
        self.context = kwargs

    def __enter__(self) -> None:
        """Enter context - bind context variables."""
        structlog.contextvars.bind_contextvars(**self.context)

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit context - clear context variables."""
        structlog.contextvars.unbind_contextvars(*self.context.keys())
