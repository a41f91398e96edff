"""
Validation of character creation requests.

Both the creation form and programmatic callers go through
``validate_creation``; each decides how much of a failure to show.
"""

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from catalog.content import CatalogService
from catalog.models import CatalogEnum, ClassType, RaceType
from character.main import Character
from core.constants import ABILITY_PLACEHOLDER, MAX_ABILITIES, MIN_ABILITIES
from core.error_handling import (
    require_count_in_range,
    require_enum_member,
    require_non_blank,
)
from core.errors import InvalidArgumentError, ResolutionFailureError, RosterError
from core.validation import ValidationResult

CreationResult = ValidationResult[Character]


def validate_creation(
    catalog: CatalogService,
    name: Any,
    race: Any,
    class_type: Any,
    ability_names: Sequence[str] | None,
) -> CreationResult:
    """
    Checks a creation request and builds the character it describes.

    The checks run in this order, and the first one failing is reported:
    the name must not be blank, the race and the class must be catalog
    members, there must be between one and three distinct ability names,
    every name must resolve in the catalog, and every resolved ability must
    belong to the class.

    Args:
        catalog (CatalogService):
            The catalog ability names are resolved against.
        name (Any):
            The name of the character.
        race (Any):
            The race, expected to be a RaceType.
        class_type (Any):
            The class, expected to be a ClassType.
        ability_names (Sequence[str] | None):
            The names of the starting abilities.

    Returns:
        CreationResult:
            The new character, not yet added to any roster, or the error
            describing why the request is invalid.

    """
    try:
        require_non_blank(name, "Character name")
        require_enum_member(race, RaceType, "race")
        require_enum_member(class_type, ClassType, "classType")
        if isinstance(ability_names, str) or (
            ability_names is not None and not isinstance(ability_names, Iterable)
        ):
            raise InvalidArgumentError("abilities must be a list of names.")
        names = list(ability_names) if ability_names is not None else None
        if names is not None and not all(isinstance(n, str) for n in names):
            raise InvalidArgumentError("abilities must only contain names.")
        require_count_in_range(names, "abilities", MIN_ABILITIES, MAX_ABILITIES)
        if len(set(names)) != len(names):
            raise InvalidArgumentError("abilities cannot contain duplicates.")

        abilities = catalog.abilities_by_names(names)
        illegal = [a.name for a in abilities if a.class_type is not class_type]
        if illegal:
            raise ResolutionFailureError(
                f"Abilities not available to the {class_type} class: {', '.join(illegal)}."
            )

        character = Character(name=name, race=race, class_type=class_type)
        character.assign_abilities(abilities)
    except RosterError as e:
        return ValidationResult.failure(e)
    return ValidationResult.success(character)


def parse_member(enum_class: type[CatalogEnum], text: str | None) -> Enum | str | None:
    """
    Parses a drop-down selection into an enum member.

    Unknown selections are returned unchanged so that ``validate_creation``
    reports them in its usual order.
    """
    try:
        return enum_class.from_name(text)
    except InvalidArgumentError:
        return text


def selected_ability_names(selections: Sequence[str | None]) -> list[str]:
    """Drops empty slots and placeholders from the ability selections."""
    return [
        selection
        for selection in selections
        if selection and selection != ABILITY_PLACEHOLDER
    ]
