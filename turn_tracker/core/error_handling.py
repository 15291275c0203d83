"""
Centralized error handling for the turn tracker.
"""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .constants import ERROR_HISTORY_LIMIT
from .logging import log_error, log_info, log_warning


class TrackerError(Exception):
    """Base class for every error raised by the turn tracker."""


class MissingFieldError(TrackerError):
    """Raised when an effect is built from too few tokens."""

    def __init__(self, field_name: str) -> None:
        self.field = field_name
        super().__init__(f"Didn't get {field_name} string")


class InvalidDurationError(TrackerError, ValueError):
    """Raised when the duration token is not a non-negative integer in range."""

    def __init__(self, value: str, max_duration: int) -> None:
        self.value = value
        super().__init__(
            f"Duration must be an integer between 0 and {max_duration}, got: {value!r}"
        )


class CharacterNotFoundError(TrackerError, LookupError):
    """Raised when a combat operation targets a character not on the roster."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Character '{name}' is not part of this combat")


class ErrorSeverity(Enum):
    """Enumeration of error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class TrackerErrorRecord:
    """A reported error with its severity and context."""

    error: TrackerError
    severity: ErrorSeverity
    context: dict[str, Any] = field(default_factory=dict)


class ErrorHandler:
    """Logs reported errors and keeps a bounded history of the latest ones."""

    def __init__(self, history_limit: int = ERROR_HISTORY_LIMIT) -> None:
        self.error_history: deque[TrackerErrorRecord] = deque(maxlen=history_limit)

    def report(
        self,
        error: TrackerError,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: dict[str, Any] | None = None,
    ) -> TrackerError:
        """
        Record and log an error, returning it so the caller can raise it.

        Args:
            error (TrackerError): The error being reported.
            severity (ErrorSeverity): How loudly to log it.
            context (dict[str, Any] | None): Extra key/value pairs for the log line.

        Returns:
            TrackerError: The same error instance.

        """
        record = TrackerErrorRecord(error, severity, dict(context or {}))
        self.error_history.append(record)

        message = f"{type(error).__name__}: {error}"
        if severity == ErrorSeverity.HIGH:
            log_error(message, record.context)
        elif severity == ErrorSeverity.MEDIUM:
            log_warning(message, record.context)
        else:
            log_info(message, record.context)
        return error

    def clear(self) -> None:
        self.error_history.clear()


# Global error handler instance
ERROR_HANDLER = ErrorHandler()
