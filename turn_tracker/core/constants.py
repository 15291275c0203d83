"""
Constants for the turn tracker.

Defines the limits and field names shared by the effect, character and
combat modules.
"""

# Name of the logger used by the whole package.
LOGGER_NAME = "turn_tracker"

# Largest duration (in rounds) an effect can carry.
MAX_DURATION = 255

# Order in which effect tokens are consumed.
EFFECT_FIELDS: tuple[str, str, str] = ("description", "modifier", "duration")

# Number of reported errors the error handler remembers.
ERROR_HISTORY_LIMIT = 100
