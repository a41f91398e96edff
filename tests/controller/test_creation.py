"""
Tests for the validation of creation requests.
"""

import pytest
from catalog.models import ClassType, RaceType
from controller.creation import (
    parse_member,
    selected_ability_names,
    validate_creation,
)
from core.constants import ABILITY_PLACEHOLDER
from core.errors import InvalidArgumentError, ResolutionFailureError


def test_valid_request_builds_character(catalog):
    result = validate_creation(
        catalog, "Thorin", RaceType.DWARF, ClassType.WARRIOR, ["Shield Bash", "Cleave"]
    )
    assert result.is_valid
    character = result.unwrap()
    assert character.summary() == "Thorin [DWARF | WARRIOR]"
    assert [a.name for a in character.abilities] == ["Shield Bash", "Cleave"]


@pytest.mark.parametrize("name", [None, "", " \t "])
def test_blank_name_fails_first(catalog, name):
    """Test that the name is checked before every other field."""
    result = validate_creation(catalog, name, None, None, None)
    assert isinstance(result.error, InvalidArgumentError)
    assert "name" in result.message


def test_race_checked_before_class(catalog):
    result = validate_creation(catalog, "Thorin", "DWARF", "WARRIOR", ["Shield Bash"])
    assert isinstance(result.error, InvalidArgumentError)
    assert "race" in result.message


def test_unrecognized_class(catalog):
    result = validate_creation(catalog, "Thorin", RaceType.DWARF, "PALADIN", ["Shield Bash"])
    assert isinstance(result.error, InvalidArgumentError)
    assert "classType" in result.message


@pytest.mark.parametrize(
    "names",
    [
        None,
        [],
        ["Shield Bash", "Cleave", "Bloodlust", "Rallying Cry"],
        "Shield Bash",
        5,
        [["Shield Bash"]],
        ["Shield Bash", None],
    ],
)
def test_ability_count_out_of_range(catalog, names):
    result = validate_creation(catalog, "Thorin", RaceType.DWARF, ClassType.WARRIOR, names)
    assert isinstance(result.error, InvalidArgumentError)


def test_duplicate_abilities_are_rejected(catalog):
    result = validate_creation(
        catalog, "Thorin", RaceType.DWARF, ClassType.WARRIOR, ["Cleave", "Cleave"]
    )
    assert isinstance(result.error, InvalidArgumentError)


def test_unknown_ability_fails_resolution(catalog):
    result = validate_creation(
        catalog, "Thorin", RaceType.DWARF, ClassType.WARRIOR, ["Shield Bash", "Fireball"]
    )
    assert isinstance(result.error, ResolutionFailureError)
    assert "Fireball" in result.message


def test_ability_of_another_class_fails_legality(catalog):
    """Test that an ability existing in another class is still rejected."""
    result = validate_creation(
        catalog, "Thorin", RaceType.DWARF, ClassType.WARRIOR, ["Shield Bash", "Arcane Bolt"]
    )
    assert isinstance(result.error, ResolutionFailureError)
    assert "Arcane Bolt" in result.message
    with pytest.raises(ResolutionFailureError):
        result.unwrap()


def test_parse_member_keeps_unknown_text():
    assert parse_member(ClassType, "MAGE") is ClassType.MAGE
    assert parse_member(ClassType, "mage") == "mage"
    assert parse_member(RaceType, None) is None


def test_selected_ability_names_drops_empty_slots():
    selections = ["Shiv", None, ABILITY_PLACEHOLDER, "", "Focus"]
    assert selected_ability_names(selections) == ["Shiv", "Focus"]
