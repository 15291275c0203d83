"""
Combat module for the turn tracker.

Keeps the roster sorted by initiative, holds the battlefield-wide effects and
advances the round counter.
"""

from ..character.main import Character
from ..core.error_handling import (
    ERROR_HANDLER,
    CharacterNotFoundError,
    ErrorSeverity,
)
from ..core.logging import log_debug
from ..effects.base_effect import Effect
from ..effects.effect_manager import age_effects


class Combat:
    """Tracks the round number, the turn order and the environment effects.

    The roster is sorted by descending initiative after every insertion and
    every initiative change made through the combat. Characters with the same
    initiative keep the order in which they were added.
    """

    def __init__(self) -> None:
        """Initialize an empty combat at round zero."""
        # Number of rounds that have been completed.
        self.round: int = 0

        # The combatants, highest initiative first.
        self.characters: list[Character] = []

        # Effects that belong to the battlefield rather than to a character.
        self.environ: list[Effect] = []

    def add_environ(self, effect: Effect) -> None:
        """Adds an environment effect.

        Args:
            effect (Effect): The effect to add.

        """
        self.environ.append(effect)

    def add_character(self, character: Character) -> None:
        """Adds a character to the roster and restores the turn order.

        Args:
            character (Character): The character to add.

        """
        self.characters.append(character)
        self._sort_characters()
        log_debug(
            f"{character.name} joined the combat",
            {"initiative": character.initiative, "position": self._position_of(character)},
        )

    def change_initiative(self, character: Character, new_initiative: int) -> None:
        """Changes the initiative of a character already on the roster.

        The character is looked up by identity since names are not unique.

        Args:
            character (Character): The character to update.
            new_initiative (int): The new initiative score.

        Raises:
            CharacterNotFoundError: If the character is not on the roster.

        """
        if self._position_of(character) is None:
            raise ERROR_HANDLER.report(
                CharacterNotFoundError(character.name),
                ErrorSeverity.HIGH,
                {"initiative": new_initiative},
            )
        character.change_initiative(new_initiative)
        self._sort_characters()

    def get_character(self, name: str) -> Character | None:
        """Returns the first character with the given name, in turn order."""
        for character in self.characters:
            if character.name == name:
                return character
        return None

    def turn_order(self) -> list[str]:
        """Returns the names of the characters in the order they act."""
        return [character.name for character in self.characters]

    def next_round(self) -> None:
        """Advances the combat by one round.

        Increments the round counter, then ages every character's effects and
        the environment effects, dropping the ones that expire.
        """
        self.round += 1
        for character in self.characters:
            character.new_round()
        self.environ = age_effects(self.environ)
        log_debug(
            f"Round {self.round} started",
            {"characters": len(self.characters), "environ": len(self.environ)},
        )

    def _sort_characters(self) -> None:
        # sorted() is stable, so ties keep their insertion order.
        self.characters = sorted(
            self.characters,
            key=lambda c: c.initiative,
            reverse=True,
        )

    def _position_of(self, character: Character) -> int | None:
        for index, member in enumerate(self.characters):
            if member is character:
                return index
        return None
