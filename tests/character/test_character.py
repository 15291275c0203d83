"""
Tests for the character model.
"""

import logging

import pytest

from turn_tracker.character import Character
from turn_tracker.core.error_handling import InvalidDurationError, MissingFieldError
from turn_tracker.effects import Effect


@pytest.fixture
def character():
    return Character(name="TEST_NAME", initiative=10)


@pytest.fixture
def effect_tokens():
    return ["Blinded", "-2 Perception", "3"]


def test_new_character(character):
    assert character.name == "TEST_NAME"
    assert character.initiative == 10
    assert character.effects == []


def test_character_accepts_any_initiative():
    assert Character(name="", initiative=-4).initiative == -4


def test_change_initiative(character):
    character.change_initiative(16)
    assert character.initiative == 16


def test_add_new_effect(character, effect_tokens):
    added = character.add_new_effect(effect_tokens)
    assert character.effects == [Effect.from_tokens(effect_tokens)]
    assert character.effects[0] is added


def test_add_new_effect_failure_leaves_character_unchanged(character, effect_tokens):
    character.add_new_effect(effect_tokens)
    with pytest.raises(InvalidDurationError):
        character.add_new_effect(["Blinded", "-2 Perception", "-3"])
    with pytest.raises(MissingFieldError):
        character.add_new_effect(["Blinded"])
    assert character.effects == [Effect.from_tokens(effect_tokens)]


def test_failed_add_new_effect_logs_one_warning(character, caplog):
    with caplog.at_level(logging.DEBUG, logger="turn_tracker"):
        with pytest.raises(MissingFieldError):
            character.add_new_effect([])
    warnings = [record for record in caplog.records if record.levelno >= logging.WARNING]
    assert len(warnings) == 1


def test_add_effect_preserves_insertion_order(character):
    first = Effect(description="Blinded", modifier="-2 Perception", duration=3)
    second = Effect(description="Bless", modifier="+1d4 attacks", duration=10)
    character.add_effect(first)
    character.add_effect(second)
    assert character.effects == [first, second]
    assert character.has_effect("Bless")
    assert not character.has_effect("Haste")


def test_remove_expired_effects(character):
    character.add_new_effect(["Blinded", "-2 Perception", "0"])
    character.add_new_effect(["Bless", "+1d4 attacks", "1"])
    character.remove_expired_effects()
    assert [effect.description for effect in character.effects] == ["Bless"]


def test_new_round(character):
    character.add_new_effect(["Blinded", "-2 Perception", "2"])
    character.new_round()
    assert character.effects[0].duration == 1
    character.new_round()
    assert character.effects == []


def test_new_round_never_leaves_expired_effects(character):
    for duration in ("0", "1", "2", "3"):
        character.add_new_effect(["Effect", "mod", duration])
    for _ in range(4):
        character.new_round()
        assert all(effect.duration > 0 for effect in character.effects)
    assert character.effects == []


def test_get_status_line(character):
    character.add_new_effect(["Blinded", "-2 Perception", "2"])
    line = character.get_status_line()
    assert "TEST_NAME" in line
    assert "Blinded" in line
    assert " 10" in line
