"""
Pure projections of a roster into the text the screens display.
"""

from collections.abc import Iterable

from character.main import Character
from character.player import Player
from core.constants import MSG_NO_CHARACTERS, MSG_NO_SELECTION, MSG_NOT_FOUND


def summarize(character: Character) -> str:
    """Returns ``"<name> [<race> | <class>]"``."""
    return character.summary()


def project_summaries(characters: Iterable[Character]) -> list[str]:
    """Returns the summary of every character, preserving order."""
    return [summarize(character) for character in characters]


def project_names(characters: Iterable[Character]) -> list[str]:
    """Returns the name of every character, preserving order."""
    return [character.name for character in characters]


def render_character_list(characters: Iterable[Character]) -> str:
    """
    Renders the full description of every character, separated by a blank
    line, or a fixed message when there are none.
    """
    descriptions = [character.describe() for character in characters]
    if not descriptions:
        return MSG_NO_CHARACTERS
    return "\n\n".join(descriptions)


def describe_selection(player: Player, selected_name: str | None) -> str:
    """
    Renders the details of the character picked by name.

    Args:
        player (Player): The player whose roster is searched.
        selected_name (str | None): The name picked, if any.

    Returns:
        str: The description of the first character with that name, or a
        message saying nothing was selected or found.

    """
    if selected_name is None:
        return MSG_NO_SELECTION
    character = player.get_character(selected_name)
    if character is None:
        return MSG_NOT_FOUND
    return character.describe()
