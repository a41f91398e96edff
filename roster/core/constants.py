"""
Constants and enumerations for the roster manager.

Defines the global limits on character abilities, the placeholder options and
the user-visible messages shared by the controller and the screens.
"""

from enum import Enum
from pathlib import Path

# Bounds on the number of abilities a character may start with.
MIN_ABILITIES = 1
MAX_ABILITIES = 3

# Number of ability drop-downs on the creation form.
ABILITY_SLOTS = 3

# Number of player slots on the roster overview.
PLAYER_SLOTS = 2

# Option shown in every ability slot until a class has been chosen.
ABILITY_PLACEHOLDER = "Select Class First"

# Location of the packaged catalog content.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "catalog" / "data"

# Environment variable read by the entry point to pick the log level.
LOG_LEVEL_ENV = "ROSTER_LOG_LEVEL"

# Messages shown to the user.
MSG_NO_CHARACTERS = "No characters available."
MSG_NO_SELECTION = "No character selected."
MSG_NOT_FOUND = "Character not found."
MSG_INVALID_INPUT = "Invalid input or missing selection."
MSG_CONFIRM_EXIT = "Are you sure you want to quit?"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name


def created_message(name: str, *, exclaim: bool = False) -> str:
    """
    Builds the message reporting a successful character creation.

    Args:
        name (str): The name of the created character.
        exclaim (bool): Whether to end with an exclamation mark rather than a
            period. The creation form uses the former.

    Returns:
        str: The formatted message.

    """
    return f'Character "{name}" created successfully{"!" if exclaim else "."}'
