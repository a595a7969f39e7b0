"""Logging configuration setup.

Builds a ``dictConfig`` with:
- a console handler (stderr) and an optional rotating file handler
- ContextInjectingFilter on every handler for automatic context propagation
- JSONL or plain text formatting
- all handlers on the root logger (module loggers propagate)
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from press_graph.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    service_name: str | None = None,
    force: bool = False,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        service_name: Static ``service`` field added to JSON records.
        force: Reconfigure logging even if it was already initialized.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from press_graph.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    configure_logging(
        log_level=log_settings.level,
        file_path=log_settings.log_file,
        json_logs=log_settings.json_logs,
        console_enabled=log_settings.console_enabled,
        file_max_bytes=log_settings.max_bytes,
        file_backup_count=log_settings.backup_count,
        service_name=service_name,
    )
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    file_path: str | Path | None = None,
    json_logs: bool = True,
    console_enabled: bool = True,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    service_name: str | None = None,
) -> None:
    """Configure logging with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file_path: Path to log file. None disables file logging.
        json_logs: Enable JSONL (JSON Lines) structured logging.
        console_enabled: Enable console/stderr logging.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        service_name: Static service name for JSON records.

    Example:
        configure_logging(log_level="DEBUG", json_logs=False)
    """
    path = Path(file_path) if file_path else None
    if path:
        path.parent.mkdir(parents=True, exist_ok=True)

    formatter_name = "json" if json_logs else "text"
    formatters: dict[str, Any] = {
        "json": {
            "()": "press_graph.infra.logging.formatters.JSONFormatter",
            "static": {"service": service_name} if service_name else None,
        },
        "text": {"format": TEXT_FORMAT},
    }
    filters = {
        "context": {"()": "press_graph.infra.logging.context.ContextInjectingFilter"},
    }

    handlers: dict[str, Any] = {}
    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": formatter_name,
            "filters": ["context"],
            "level": log_level,
        }
    if path:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(path),
            "maxBytes": file_max_bytes,
            "backupCount": file_backup_count,
            "encoding": "utf-8",
            "formatter": "json",
            "filters": ["context"],
            "level": log_level,
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "filters": filters,
            "handlers": handlers,
            "root": {"level": log_level, "handlers": list(handlers)},
            "loggers": {
                # SQL echo is controlled by DB_ECHO, keep engine chatter out of app logs
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
    logger.debug(
        "Logging configured",
        extra={"log_level": log_level, "json_logs": json_logs, "file_path": str(path) if path else None},
    )
