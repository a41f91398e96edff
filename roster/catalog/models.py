"""
Catalog models for the roster manager.

Defines the closed enumerations of races and classes, and the Ability model
loaded from the catalog content.
"""

from typing import TypeVar

from core.constants import NiceEnum
from core.errors import InvalidArgumentError
from pydantic import BaseModel, ConfigDict, Field

_E = TypeVar("_E", bound="CatalogEnum")


class CatalogEnum(NiceEnum):
    """Enumeration whose members can be parsed back from their display tag."""

    @classmethod
    def from_name(cls: type[_E], name: str | None) -> _E:
        """
        Parses a member from its exact, case-sensitive name.

        Args:
            name (str | None): The member name, as shown on screen.

        Returns:
            The matching member.

        Raises:
            InvalidArgumentError: If the name is missing or not a member.

        """
        if not name or name not in cls.__members__:
            raise InvalidArgumentError(f"Unknown {cls.__name__}: {name!r}.")
        return cls[name]


class RaceType(CatalogEnum):
    """The playable races."""

    HUMAN = "HUMAN"
    ELF = "ELF"
    DWARF = "DWARF"
    GNOME = "GNOME"


class ClassType(CatalogEnum):
    """The playable classes."""

    WARRIOR = "WARRIOR"
    MAGE = "MAGE"
    ROGUE = "ROGUE"


class Ability(BaseModel):
    """
    An ability a character can start with. Every ability belongs to exactly
    one class.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=1,
        description="The display name of the ability, unique across the catalog.",
    )
    class_type: ClassType = Field(
        description="The class this ability belongs to.",
    )
    ep_cost: int = Field(
        default=0,
        ge=0,
        description="The energy points spent when the ability is used.",
    )
    description: str = Field(
        default="",
        description="A short description of what the ability does.",
    )

    def __str__(self) -> str:
        return f"{self.name} ({self.ep_cost} EP): {self.description}"
