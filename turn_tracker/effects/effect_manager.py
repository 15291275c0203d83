"""
Helpers that age and cull collections of effects.

Characters and the combat environment both run their effects through these,
so every decrement is always followed by removal of expired effects.
"""

from collections.abc import Iterable

from .base_effect import Effect


def decrement_all(effects: Iterable[Effect]) -> None:
    """Ages every effect by one round."""
    for effect in effects:
        effect.decrement_duration()


def remove_expired(effects: Iterable[Effect]) -> list[Effect]:
    """
    Returns the effects that still have rounds left, in their original order.

    Args:
        effects (Iterable[Effect]): The effects to filter.

    Returns:
        list[Effect]: The surviving effects.

    """
    return [effect for effect in effects if effect.duration > 0]


def age_effects(effects: list[Effect]) -> list[Effect]:
    """
    Ages every effect by one round and then drops the expired ones.

    Args:
        effects (list[Effect]): The effects to age. They are mutated in place.

    Returns:
        list[Effect]: The effects that survived the round.

    """
    decrement_all(effects)
    return remove_expired(effects)
