"""
Tests for the Character model.
"""

import pytest
from catalog.models import ClassType, RaceType
from character.main import Character
from core.errors import InvalidArgumentError, ResolutionFailureError
from pydantic import ValidationError


@pytest.fixture
def mage():
    return Character(name="Merlin", race=RaceType.ELF, class_type=ClassType.MAGE)


def test_summary_format(thorin):
    assert thorin.summary() == "Thorin [DWARF | WARRIOR]"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_is_rejected(name):
    with pytest.raises(ValidationError):
        Character(name=name, race=RaceType.HUMAN, class_type=ClassType.ROGUE)


def test_identity_is_frozen(thorin):
    """Test that name, race and class cannot change after creation."""
    with pytest.raises(ValidationError):
        thorin.name = "Gimli"
    with pytest.raises(ValidationError):
        thorin.class_type = ClassType.MAGE


def test_assign_abilities(mage, catalog):
    abilities = catalog.abilities_by_names(["Arcane Bolt", "Mana Channel"])
    mage.assign_abilities(abilities)
    assert mage.has_abilities
    assert [a.name for a in mage.abilities] == ["Arcane Bolt", "Mana Channel"]


def test_abilities_are_assigned_once(mage, catalog):
    mage.assign_abilities(catalog.abilities_by_names(["Arcane Bolt"]))
    with pytest.raises(InvalidArgumentError):
        mage.assign_abilities(catalog.abilities_by_names(["Arcane Blast"]))
    assert [a.name for a in mage.abilities] == ["Arcane Bolt"]


@pytest.mark.parametrize("count", [0, 4])
def test_ability_count_out_of_range(mage, catalog, count):
    names = [a.name for a in catalog.abilities_for_class(ClassType.MAGE)][:count]
    with pytest.raises(InvalidArgumentError):
        mage.assign_abilities(catalog.abilities_by_names(names))
    assert not mage.has_abilities


def test_ability_of_other_class_is_rejected(mage, catalog):
    with pytest.raises(ResolutionFailureError):
        mage.assign_abilities(catalog.abilities_by_names(["Arcane Bolt", "Shield Bash"]))
    assert not mage.has_abilities


def test_abilities_property_returns_copy(thorin):
    thorin.abilities.clear()
    assert len(thorin.abilities) == 1


def test_describe_lists_identity_and_abilities(thorin):
    description = thorin.describe()
    assert description.splitlines()[:4] == [
        "Name: Thorin",
        "Race: DWARF",
        "Class: WARRIOR",
        "Abilities:",
    ]
    assert "Shield Bash (5 EP)" in description
    assert str(thorin) == description


def test_describe_without_abilities(mage):
    assert mage.describe().endswith("(none)")
