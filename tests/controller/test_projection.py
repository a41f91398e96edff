"""
Tests for the projections of a roster into display text.
"""

from catalog.models import ClassType, RaceType
from character.main import Character
from controller.projection import (
    describe_selection,
    project_summaries,
    render_character_list,
    summarize,
)
from core.constants import MSG_NO_CHARACTERS, MSG_NO_SELECTION, MSG_NOT_FOUND


def test_summarize(thorin):
    assert summarize(thorin) == "Thorin [DWARF | WARRIOR]"


def test_project_summaries_preserves_order(thorin):
    elf = Character(name="Lia", race=RaceType.ELF, class_type=ClassType.MAGE)
    assert project_summaries([elf, thorin]) == [
        "Lia [ELF | MAGE]",
        "Thorin [DWARF | WARRIOR]",
    ]


def test_render_empty_list():
    assert render_character_list([]) == MSG_NO_CHARACTERS


def test_render_separates_characters_with_blank_line(thorin):
    elf = Character(name="Lia", race=RaceType.ELF, class_type=ClassType.MAGE)
    rendered = render_character_list([thorin, elf])
    assert rendered == thorin.describe() + "\n\n" + elf.describe()


def test_describe_selection(player, thorin):
    player.add_character(thorin)
    assert describe_selection(player, None) == MSG_NO_SELECTION
    assert describe_selection(player, "Gimli") == MSG_NOT_FOUND
    assert describe_selection(player, "Thorin") == thorin.describe()
