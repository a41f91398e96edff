import json
from collections.abc import Callable, Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

from catchery import log_warning
from core.constants import DEFAULT_DATA_DIR
from core.error_handling import require_enum_member
from core.errors import ResolutionFailureError
from pydantic import ValidationError

from .models import Ability, ClassType, RaceType


class CatalogService:
    """
    Read-only registry of the races, classes and class-scoped abilities that
    characters can be created from.
    """

    abilities: dict[str, Ability]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the CatalogService.

        Args:
            data_dir (Path | None):
                The directory containing the catalog content. Defaults to the
                content shipped with the package.

        """
        self.reload(data_dir or DEFAULT_DATA_DIR)

    def reload(self, root: Path) -> None:
        """
        (Re)load the catalog content from disk.

        Args:
            root (Path):
                The directory containing the catalog content.
        """
        self.abilities = _load_json_file(
            root / "abilities.json",
            self._load_abilities,
            "abilities",
        )

    def list_races(self) -> list[RaceType]:
        """Returns every race, in declaration order."""
        return list(RaceType)

    def list_classes(self) -> list[ClassType]:
        """Returns every class, in declaration order."""
        return list(ClassType)

    def abilities_for_class(self, class_type: ClassType) -> list[Ability]:
        """
        Returns the abilities of a class, in catalog order.

        Args:
            class_type (ClassType):
                The class whose abilities are requested.

        Returns:
            list[Ability]:
                The abilities belonging to the class.

        Raises:
            InvalidArgumentError:
                If class_type is not a ClassType.

        """
        require_enum_member(class_type, ClassType, "class_type")
        return [
            ability
            for ability in self.abilities.values()
            if ability.class_type is class_type
        ]

    def get_ability(self, name: str) -> Ability | None:
        """Get an ability by its exact name, or None if not found."""
        return self.abilities.get(name)

    def abilities_by_names(self, names: Iterable[str]) -> list[Ability]:
        """
        Resolves ability names against the whole catalog.

        Resolution is by exact, case-sensitive name and does not check which
        class the abilities belong to.

        Args:
            names (Iterable[str]):
                The ability names to resolve.

        Returns:
            list[Ability]:
                The resolved abilities, in the order the names were given.

        Raises:
            ResolutionFailureError:
                If any of the names is not in the catalog.

        """
        resolved: list[Ability] = []
        for name in names:
            ability = self.get_ability(name)
            if ability is None:
                raise ResolutionFailureError(f"Unknown ability: {name!r}.")
            resolved.append(ability)
        return resolved

    @staticmethod
    def _load_abilities(data: list[dict]) -> dict[str, Ability]:
        """
        Load abilities from JSON data.

        Args:
            data (list[dict]):
                The ability records.

        Returns:
            dict[str, Ability]:
                The valid abilities, keyed by name. Records that fail
                validation, or that repeat an existing name, are skipped.

        """
        abilities: dict[str, Ability] = {}
        for entry in data:
            try:
                ability = Ability.model_validate(entry)
            except ValidationError as e:
                log_warning(
                    f"Skipping invalid ability record: {e.error_count()} error(s).",
                    {"entry": entry, "errors": str(e)},
                )
                continue
            if ability.name in abilities:
                log_warning(
                    f"Skipping duplicate ability '{ability.name}'.",
                    {"ability_name": ability.name},
                )
                continue
            abilities[ability.name] = ability
        return abilities


def _load_json_file(
    file_path: Path,
    loader: Callable[[Any], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """
    Load a JSON file and hand its content to a loader.

    Args:
        file_path (Path):
            The file to read.
        loader (Callable[[Any], dict[str, Any]]):
            Turns the decoded JSON into the registry entries.
        description (str):
            What the file contains, for log messages.

    Returns:
        dict[str, Any]:
            The loaded entries, or an empty registry if the file is missing
            or unreadable.

    """
    if not file_path.exists():
        log_warning(
            f"Catalog file for {description} not found.",
            {"file_path": str(file_path)},
        )
        return {}
    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        log_warning(
            f"Catalog file for {description} is not valid JSON: {e}",
            {"file_path": str(file_path)},
        )
        return {}
    if not isinstance(data, list):
        log_warning(
            f"Catalog file for {description} must hold a list of records.",
            {"file_path": str(file_path), "type": type(data).__name__},
        )
        return {}
    return loader(data)


@lru_cache(maxsize=1)
def load_default_catalog() -> CatalogService:
    """Returns the catalog built from the packaged content, loading it once."""
    return CatalogService()
