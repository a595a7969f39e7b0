"""Logging infrastructure.

Structured logging on top of the standard library:
- JSONL format for log aggregation
- Automatic context injection (correlation_id, user_id, ...)
- OpenTelemetry trace correlation

Basic usage:
    import logging

    from press_graph.infra.logging import set_log_context

    logger = logging.getLogger(__name__)

    set_log_context(correlation_id="abc-123")
    logger.info("Resolving connection")  # Automatically includes correlation_id
"""

from press_graph.infra.logging.config import configure_logging, setup_logging
from press_graph.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from press_graph.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "set_log_context",
    "setup_logging",
]
