"""
Base effect module for the turn tracker.

Defines the timed effect that can sit on a character or on the battlefield.
"""

import re
from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..core.constants import EFFECT_FIELDS, MAX_DURATION
from ..core.error_handling import (
    ERROR_HANDLER,
    InvalidDurationError,
    MissingFieldError,
)
from ..core.logging import log_debug

_DURATION_PATTERN = re.compile(r"\+?[0-9]+")


class Effect(BaseModel):
    """
    A timed modifier that counts down once per round.

    The modifier is free text (e.g. "Perception -2") and is never parsed.
    """

    description: str = Field(
        description="A human readable description of the effect.",
    )
    modifier: str = Field(
        description="Free text describing what the effect modifies.",
    )
    duration: int = Field(
        ge=0,
        le=MAX_DURATION,
        description="The number of rounds the effect has left.",
    )

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Effect":
        """
        Build an effect from raw text tokens.

        Tokens are consumed in order: description, modifier, duration. Any
        token past the third is ignored.

        Args:
            tokens (Iterable[str]):
                The raw tokens, usually split from user input.

        Raises:
            MissingFieldError:
                If fewer than three tokens are given. The error names the
                first missing field.
            InvalidDurationError:
                If the duration is not a non-negative integer up to
                MAX_DURATION.

        Returns:
            Effect:
                The new effect.

        """
        iterator = iter(tokens)
        values: dict[str, str] = {}
        for field_name in EFFECT_FIELDS:
            token = next(iterator, None)
            if token is None:
                raise ERROR_HANDLER.report(
                    MissingFieldError(field_name),
                    context={"received": len(values)},
                )
            values[field_name] = str(token)

        duration_text = values["duration"]
        if not _DURATION_PATTERN.fullmatch(duration_text):
            raise ERROR_HANDLER.report(
                InvalidDurationError(duration_text, MAX_DURATION),
                context={"description": values["description"]},
            )
        # Strip sign and padding so the digit count bounds the value.
        digits = duration_text.lstrip("+").lstrip("0") or "0"
        if len(digits) > len(str(MAX_DURATION)) or int(digits) > MAX_DURATION:
            raise ERROR_HANDLER.report(
                InvalidDurationError(duration_text, MAX_DURATION),
                context={"description": values["description"]},
            )

        return cls(
            description=values["description"],
            modifier=values["modifier"],
            duration=int(digits),
        )

    @property
    def display_name(self) -> str:
        """Returns the name shown for this effect."""
        return self.description

    @property
    def color(self) -> str:
        """Returns the color used to render this effect."""
        if self.duration <= 1:
            return "bold red"
        return "yellow"

    @property
    def colored_name(self) -> str:
        """Returns the effect description with color formatting applied."""
        return f"[{self.color}]{self.display_name}[/]"

    def is_expired(self) -> bool:
        """Check if the effect has run out of rounds.

        Returns:
            bool: True if the duration has reached zero, False otherwise.

        """
        return self.duration == 0

    def decrement_duration(self) -> None:
        """
        Age the effect by one round.

        The duration saturates at zero, so decrementing an expired effect
        leaves it expired.
        """
        if self.duration == 0:
            log_debug(
                f"Effect '{self.description}' is already expired, not decrementing."
            )
            return
        self.duration -= 1

    def __str__(self) -> str:
        return f"{self.description} ({self.modifier}), {self.duration} rounds"
