"""
Player module for the roster manager.

Defines the Player aggregate, which owns an ordered roster of characters.
"""

from core.error_handling import require_not_none
from core.logging import log_debug
from pydantic import BaseModel, Field, PrivateAttr

from .main import Character


class Player(BaseModel):
    """
    A player and the characters in their roster.

    Characters are kept in insertion order. Names need not be unique; lookups
    by name return the first match.
    """

    player_id: int = Field(
        ge=1,
        description="The slot number of the player.",
    )
    name: str = Field(
        default="",
        description="The display name of the player.",
    )

    _characters: list[Character] = PrivateAttr(default_factory=list)

    def get_characters(self) -> list[Character]:
        """Returns a copy of the roster, in insertion order."""
        return list(self._characters)

    def add_character(self, character: Character) -> None:
        """
        Appends a character to the roster.

        Args:
            character (Character): The character to add.

        Raises:
            InvalidArgumentError: If character is None.

        """
        require_not_none(character, "character")
        self._characters.append(character)
        log_debug(
            f"Player {self.player_id} roster now holds {len(self._characters)} characters.",
            {"added": character.name},
        )

    def get_character(self, name: str | None) -> Character | None:
        """
        Finds a character by exact name.

        Args:
            name (str | None): The name to look for.

        Returns:
            Character | None: The first character with that name, if any.

        """
        if name is None:
            return None
        return next((c for c in self._characters if c.name == name), None)
