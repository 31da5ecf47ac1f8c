"""
Structured logging configuration using structlog.

Diagnostic logs of this layer must never carry a raw customer email or a
credential, and a failing sink must never fail a payment attempt. The
processor chain therefore ends with ``redact_sensitive_fields`` before
rendering, and code running inside an attempt logs through ``SafeLogger``.
"""

import logging
import sys
from typing import Any, Callable

import structlog
from structlog.types import Processor

from payment_handoff.domain.redaction import redact_sensitive_fields

_fallback_logger = logging.getLogger(__name__)


def configure_logging(
    log_level: str = "INFO",
    format_as_json: bool = True,
    redact: bool = True,
) -> None:
    """
    Configure structured logging for the hand-off layer.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_as_json: If True, output logs as JSON; otherwise use console format
        redact: If True, mask email fields and blank credential fields
                (see payment_handoff.domain.redaction) before rendering
    """
    # Configure standard logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    # Build processor chain
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    # Scrub before any renderer sees the event
    if redact:
        processors.append(redact_sensitive_fields)

    if format_as_json:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

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

    Modules whose calls sit inside a payment attempt should wrap the result
    in SafeLogger.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


class SafeLogger:
    """
    Fire-and-forget wrapper around a logger.

    Any exception raised by the wrapped logger is noted on the stdlib logger
    at debug level and dropped, so logging can never change the outcome of a
    payment attempt.
    """

    def __init__(self, logger: Any) -> None:
        self._logger = logger

    def __getattr__(self, method_name: str) -> Callable[..., None]:
        if method_name.startswith("_"):
            raise AttributeError(method_name)

        def emit(event: str, **kwargs: Any) -> None:
            try:
                getattr(self._logger, method_name)(event, **kwargs)
            except Exception as e:
                _fallback_logger.debug("log emit failed for %s: %s", event, e)

        return emit
