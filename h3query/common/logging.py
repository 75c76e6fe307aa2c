"""
Logging utilities for the H3 query facade.

Provides structured logging with JSON formatting for production environments
and human-readable formatting for development.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from .config import config


class StructuredFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds common fields to all log records."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add common fields to log records."""
        super().add_fields(log_record, record, message_dict)

        # Add timestamp in ISO format
        log_record["timestamp"] = datetime.now(timezone.utc).strftime(
            "%Y-%m-%dT%H:%M:%S.%fZ"
        )

        # Add environment and service info
        log_record["environment"] = config.environment
        log_record["service"] = "h3-query-facade"

        # Add level name if not present
        if "level" not in log_record:
            log_record["level"] = record.levelname


def setup_logging(
    logger_name: Optional[str] = None,
    level: Optional[str] = None,
    enable_structured: Optional[bool] = None,
) -> logging.Logger:
    """
    Set up logging with configuration from environment.

    Args:
        logger_name: Name of the logger (defaults to root)
        level: Log level override
        enable_structured: Structured logging override

    Returns:
        Configured logger instance
    """

    # Use configuration values or provided overrides
    log_level = level or ("DEBUG" if config.debug else config.logging.level)
    structured = (
        enable_structured
        if enable_structured is not None
        else config.logging.enable_structured_logging
    )

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, log_level.upper()))

    if structured:
        formatter = StructuredFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter(config.logging.format_str)

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Prevent double logging
    logger.propagate = False

    return logger


def log_cell_operation(
    operation: str,
    cells_in: Optional[int] = None,
    cells_out: Optional[int] = None,
    resolution: Optional[int] = None,
    **kwargs,
) -> Dict[str, Any]:
    """
    Create a structured log entry for a grid operation.

    Args:
        operation: Facade operation name (polygon_to_cells, cell_to_descendants, ...)
        cells_in: Number of input cells, when the operation takes a cell set
        cells_out: Number of cells produced
        resolution: Target resolution, when the operation has one
        **kwargs: Additional context

    Returns:
        Log entry dictionary
    """
    entry = {"event": "cell_operation", "operation": operation}

    if cells_in is not None:
        entry["cells_in"] = cells_in
    if cells_out is not None:
        entry["cells_out"] = cells_out
    if resolution is not None:
        entry["resolution"] = resolution

    entry.update(kwargs)
    return entry


class TimedLogger:
    """Context manager for timing operations and logging results."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.DEBUG,
        **context,
    ):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.context = context
        self.start_time = None
        self.duration_ms = None

    def __enter__(self):
        self.start_time = datetime.now(timezone.utc)
        self.logger.log(
            self.level,
            f"Starting {self.operation}",
            extra={
                "event": "operation_start",
                "operation": self.operation,
                **self.context,
            },
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (
            datetime.now(timezone.utc) - self.start_time
        ).total_seconds() * 1000

        if exc_type is None:
            self.logger.log(
                self.level,
                f"Completed {self.operation}",
                extra={
                    "event": "operation_complete",
                    "operation": self.operation,
                    "duration_ms": self.duration_ms,
                    "success": True,
                    **self.context,
                },
            )
        else:
            self.logger.error(
                f"Failed {self.operation}: {exc_val}",
                extra={
                    "event": "operation_failed",
                    "operation": self.operation,
                    "duration_ms": self.duration_ms,
                    "success": False,
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **self.context,
                },
            )


# Global logger instance
logger = setup_logging("h3query")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module or component."""
    return setup_logging(f"h3query.{name}")
