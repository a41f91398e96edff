"""
Tests for the Player roster.
"""

import pytest
from catalog.models import ClassType, RaceType
from character.main import Character
from character.player import Player
from core.errors import InvalidArgumentError
from pydantic import ValidationError


def _make(name: str, class_type: ClassType = ClassType.ROGUE) -> Character:
    return Character(name=name, race=RaceType.HUMAN, class_type=class_type)


def test_new_player_has_empty_roster(player):
    assert player.get_characters() == []


def test_player_id_must_be_positive():
    with pytest.raises(ValidationError):
        Player(player_id=0)


def test_characters_keep_insertion_order(player):
    for name in ["Ayla", "Bram", "Cora"]:
        player.add_character(_make(name))
    assert [c.name for c in player.get_characters()] == ["Ayla", "Bram", "Cora"]


def test_get_characters_returns_copy(player):
    player.add_character(_make("Ayla"))
    player.get_characters().clear()
    assert len(player.get_characters()) == 1


def test_add_none_is_rejected(player):
    with pytest.raises(InvalidArgumentError):
        player.add_character(None)


def test_lookup_returns_first_match(player):
    """Test that duplicate names are allowed and lookup returns the first one."""
    first = _make("Ayla", ClassType.ROGUE)
    second = _make("Ayla", ClassType.MAGE)
    player.add_character(first)
    player.add_character(second)
    assert player.get_character("Ayla") is first


def test_lookup_is_exact(player):
    player.add_character(_make("Ayla"))
    assert player.get_character("ayla") is None
    assert player.get_character(None) is None
