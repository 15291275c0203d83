"""
Effects module for the turn tracker.

Contains the timed effect model and the helpers used to age it.
"""

from .base_effect import Effect
from .effect_manager import age_effects, decrement_all, remove_expired

__all__ = [
    "Effect",
    "age_effects",
    "decrement_all",
    "remove_expired",
]
