"""
Character module for the roster manager.

Defines the Character model: a named combination of a race, a class and the
abilities picked for it at creation.
"""

from catalog.models import Ability, ClassType, RaceType
from core.constants import MAX_ABILITIES, MIN_ABILITIES
from core.error_handling import require_count_in_range, require_non_blank
from core.errors import InvalidArgumentError, ResolutionFailureError
from core.logging import log_debug
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


class Character(BaseModel):
    """
    Represents a character in a player's roster.

    The identity of a character (name, race and class) cannot change once it
    has been created, and its abilities are assigned exactly once.

    Attributes:
        name (str):
            The name of the character.
        race (RaceType):
            The race of the character.
        class_type (ClassType):
            The class of the character.

    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the character.",
    )
    race: RaceType = Field(
        description="The race of the character.",
    )
    class_type: ClassType = Field(
        description="The class of the character.",
    )

    _abilities: list[Ability] | None = PrivateAttr(default=None)

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: object) -> str:
        return require_non_blank(value, "Character name")

    @property
    def abilities(self) -> list[Ability]:
        """The abilities of the character, in the order they were picked."""
        return list(self._abilities or [])

    @property
    def has_abilities(self) -> bool:
        return self._abilities is not None

    def assign_abilities(self, abilities: list[Ability]) -> None:
        """
        Assigns the starting abilities of the character.

        Args:
            abilities (list[Ability]):
                Between one and three abilities, all belonging to the class
                of the character.

        Raises:
            InvalidArgumentError:
                If abilities were already assigned, or their number is out of
                range.
            ResolutionFailureError:
                If an ability belongs to another class.

        """
        if self._abilities is not None:
            raise InvalidArgumentError(
                f"Abilities of '{self.name}' have already been assigned."
            )
        require_count_in_range(
            abilities,
            "abilities",
            MIN_ABILITIES,
            MAX_ABILITIES,
            {"character": self.name},
        )
        for ability in abilities:
            if ability.class_type is not self.class_type:
                raise ResolutionFailureError(
                    f"Ability '{ability.name}' is not available to the "
                    f"{self.class_type} class."
                )
        self._abilities = list(abilities)
        log_debug(
            f"Assigned {len(abilities)} abilities to '{self.name}'.",
            {"abilities": [a.name for a in abilities]},
        )

    def summary(self) -> str:
        """Returns the one-line summary shown in roster lists."""
        return f"{self.name} [{self.race} | {self.class_type}]"

    def describe(self) -> str:
        """Returns the full, multi-line description of the character."""
        lines = [
            f"Name: {self.name}",
            f"Race: {self.race}",
            f"Class: {self.class_type}",
            "Abilities:",
        ]
        if self._abilities:
            lines.extend(f"  - {ability}" for ability in self._abilities)
        else:
            lines.append("  (none)")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()
