"""
Shared fixtures for the roster manager tests.
"""

import io

import pytest
from catalog.content import CatalogService
from catalog.models import ClassType, RaceType
from character.main import Character
from character.player import Player
from controller.character_controller import CharacterController
from rich.console import Console
from ui.factory import ConsoleSurfaceFactory
from ui.overview import RosterOverviewScreen


@pytest.fixture
def console():
    """A console that renders into memory."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def catalog():
    """The catalog built from the packaged content."""
    return CatalogService()


@pytest.fixture
def player():
    """A player with an empty roster."""
    return Player(player_id=1, name="Player 1")


@pytest.fixture
def factory(console):
    """Non-interactive screens that accept every confirmation."""
    return ConsoleSurfaceFactory(console=console, confirm=lambda _: True)


@pytest.fixture
def overview(console):
    return RosterOverviewScreen(player_id=1, console=console, confirm=lambda _: True)


@pytest.fixture
def controller(player, overview, catalog, factory):
    return CharacterController(player, overview, catalog=catalog, surface_factory=factory)


@pytest.fixture
def thorin(catalog):
    """A dwarf warrior that has not been added to any roster."""
    character = Character(name="Thorin", race=RaceType.DWARF, class_type=ClassType.WARRIOR)
    character.assign_abilities(catalog.abilities_by_names(["Shield Bash"]))
    return character
