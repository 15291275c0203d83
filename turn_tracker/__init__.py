"""
Turn tracker package.

Tracks initiative order and timed effects for a turn-based combat encounter.
"""

from .character import Character
from .combat import Combat
from .core.error_handling import (
    CharacterNotFoundError,
    InvalidDurationError,
    MissingFieldError,
    TrackerError,
)
from .effects import Effect

__all__ = [
    "Character",
    "Combat",
    "Effect",
    "TrackerError",
    "MissingFieldError",
    "InvalidDurationError",
    "CharacterNotFoundError",
]
