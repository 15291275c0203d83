"""
Sheets module for the turn tracker.

Renders effects, characters and the state of a combat with rich markup.
"""

from typing import TYPE_CHECKING

from rich.padding import Padding

from .utils import cprint, crule

if TYPE_CHECKING:
    from ..character.main import Character
    from ..combat.combat_manager import Combat
    from ..effects.base_effect import Effect


def effect_to_string(effect: "Effect") -> str:
    """
    Formats an effect as a single line of markup.

    Args:
        effect (Effect): The effect to format.

    Returns:
        str: The description, modifier and remaining rounds.

    """
    rounds = "round" if effect.duration == 1 else "rounds"
    return (
        f"{effect.colored_name}, [italic]\"{effect.modifier}\"[/], "
        f"{effect.duration} {rounds}"
    )


def print_effect_sheet(effect: "Effect", padding: int = 2) -> None:
    """Prints the details of an effect in a formatted way."""
    cprint(Padding(effect_to_string(effect), (0, padding)))


def print_character_sheet(character: "Character", padding: int = 2) -> None:
    """
    Prints a character followed by each of its effects.

    Args:
        character (Character): The character to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    cprint(Padding(character.get_status_line(), (0, padding)))
    for effect in character.effects:
        print_effect_sheet(effect, padding + 4)


def print_combat_sheet(combat: "Combat") -> None:
    """
    Prints the round number, the roster in turn order and the environment.

    Args:
        combat (Combat): The combat to display.

    """
    crule(f"⏱ Round {combat.round}", style="cyan")
    if not combat.characters:
        cprint("  [dim]No characters[/]")
    for character in combat.characters:
        print_character_sheet(character)
    if combat.environ:
        cprint("[bold yellow]Environment:[/]")
        for effect in combat.environ:
            print_effect_sheet(effect)
