"""Configuration for neo-batch: settings, constants and logging."""

from .constants import BatchDefaults, PaginationLimits
from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    get_log_level_from_verbosity,
    get_logger,
    setup_logging,
)
from .settings import BatchSettings, get_settings

__all__ = [
    # Constants
    "BatchDefaults",
    "PaginationLimits",

    # Settings
    "BatchSettings",
    "get_settings",

    # Logging
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "get_log_level_from_verbosity",
    "get_logger",
    "setup_logging",
]
