"""
Character module for the turn tracker.
"""

from .main import Character

__all__ = [
    "Character",
]
