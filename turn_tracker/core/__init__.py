"""
Core module for the turn tracker.

Holds the shared constants, logging setup, error taxonomy and console helpers.
"""

from .constants import EFFECT_FIELDS, ERROR_HISTORY_LIMIT, LOGGER_NAME, MAX_DURATION
from .error_handling import (
    ERROR_HANDLER,
    CharacterNotFoundError,
    ErrorHandler,
    ErrorSeverity,
    InvalidDurationError,
    MissingFieldError,
    TrackerError,
)
from .logging import (
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
    setup_logging,
)
from .utils import cprint, crule

__all__ = [
    # Import from constants.py
    "EFFECT_FIELDS",
    "LOGGER_NAME",
    "ERROR_HISTORY_LIMIT",
    "MAX_DURATION",
    # Import from error_handling.py
    "ERROR_HANDLER",
    "CharacterNotFoundError",
    "ErrorHandler",
    "ErrorSeverity",
    "InvalidDurationError",
    "MissingFieldError",
    "TrackerError",
    # Import from logging.py
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "setup_logging",
    # Import from utils.py
    "cprint",
    "crule",
]
