"""
Common utilities for the H3 query facade.

This package provides shared configuration, logging, and the validation
error taxonomy used across all grid components.
"""

from .config import config, AppConfig, GridConfig, LoggingConfig, load_config
from .logging import (
    logger,
    get_logger,
    setup_logging,
    log_cell_operation,
    TimedLogger,
)
from .errors import (
    GridQueryError,
    ResolutionMismatchError,
    InvalidWKTError,
    UnknownCoordinateSystemError,
    UnknownUnitError,
)

__all__ = [
    "config",
    "AppConfig",
    "GridConfig",
    "LoggingConfig",
    "load_config",
    "logger",
    "get_logger",
    "setup_logging",
    "log_cell_operation",
    "TimedLogger",
    "GridQueryError",
    "ResolutionMismatchError",
    "InvalidWKTError",
    "UnknownCoordinateSystemError",
    "UnknownUnitError",
]
