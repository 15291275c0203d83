"""
Combat module for the turn tracker.
"""

from .combat_manager import Combat

__all__ = [
    "Combat",
]
