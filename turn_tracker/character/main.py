"""
Character module for the turn tracker.

Defines a combatant with an initiative score and the effects it carries.
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..core.logging import log_debug
from ..core.error_handling import TrackerError
from ..effects.base_effect import Effect
from ..effects.effect_manager import age_effects, remove_expired


class Character(BaseModel):
    """
    A combatant in an encounter.

    Attributes:
        name (str):
            The name of the character. Names do not need to be unique.
        initiative (int):
            Turn order score, higher values act first.
        effects (list[Effect]):
            The effects currently on the character, in the order they were
            added.

    """

    name: str = Field(
        description="The name of the character.",
    )
    initiative: int = Field(
        0,
        description="The initiative score, higher values act first.",
    )
    effects: list[Effect] = Field(
        default_factory=list,
        description="The effects currently applied to the character.",
    )

    def change_initiative(self, new_initiative: int) -> None:
        """
        Overwrites the initiative score.

        This does not reorder any combat the character belongs to, use
        Combat.change_initiative for that.

        Args:
            new_initiative (int): The new initiative score.

        """
        self.initiative = new_initiative

    def add_new_effect(self, tokens: Iterable[str]) -> Effect:
        """
        Builds an effect from raw tokens and adds it to the character.

        Args:
            tokens (Iterable[str]):
                The description, modifier and duration tokens.

        Raises:
            MissingFieldError:
                If fewer than three tokens are supplied.
            InvalidDurationError:
                If the duration token is not a valid duration.

        Returns:
            Effect:
                The effect that was added.

        """
        try:
            effect = Effect.from_tokens(tokens)
        except TrackerError:
            log_debug(
                f"Could not add effect to {self.name}",
                {"character": self.name},
            )
            raise
        self.effects.append(effect)
        return effect

    def add_effect(self, effect: Effect) -> None:
        """Adds an already built effect to the character."""
        self.effects.append(effect)

    def has_effect(self, description: str) -> bool:
        """Checks whether an effect with the given description is active."""
        return any(effect.description == description for effect in self.effects)

    def remove_expired_effects(self) -> None:
        """Removes all the effects whose duration has reached zero."""
        self.effects = remove_expired(self.effects)

    def new_round(self) -> None:
        """
        Ages the character's effects by one round.

        Every effect is decremented first, and only then are the expired ones
        removed.
        """
        before = len(self.effects)
        self.effects = age_effects(self.effects)
        expired = before - len(self.effects)
        if expired:
            log_debug(
                f"{self.name} lost {expired} expired effect(s)",
                {"character": self.name, "remaining": len(self.effects)},
            )

    def get_status_line(self) -> str:
        """
        Returns a one line summary of the character.

        Returns:
            str: The initiative, name and active effects in rich markup.

        """
        line = f"🎲 {self.initiative:3}  [bold]{self.name}[/]"
        if self.effects:
            line += "  " + ", ".join(
                f"{effect.colored_name} ({effect.duration})" for effect in self.effects
            )
        return line
