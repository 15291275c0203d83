"""
Logging configuration module for the turn tracker.

Provides centralized logging setup with colored output using rich.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .constants import LOGGER_NAME


def setup_logging(level: int = logging.INFO) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.

    """
    console = Console(width=120, force_terminal=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(
        logging.Formatter("%(name)s - %(levelname)s - %(message)s", datefmt="[%X]")
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The configured logger instance.

    """
    return logging.getLogger(name)


logger = get_logger(LOGGER_NAME)


def _log(level: int, message: str, context: dict[str, Any] | None) -> None:
    """
    Emits a record on the package logger, appending the context as key=value pairs.

    Args:
        level (int): The logging level of the record.
        message (str): The message to log.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    if not logger.isEnabledFor(level):
        return
    if context:
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"
    logger.log(level, message)


def log_error(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs an error, used for failures on operations the host asked for."""
    _log(logging.ERROR, message, context)


def log_warning(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a warning, used for rejected user input."""
    _log(logging.WARNING, message, context)


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    _log(logging.INFO, message, context)


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs roster and round bookkeeping."""
    _log(logging.DEBUG, message, context)
