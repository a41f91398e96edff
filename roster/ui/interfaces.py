"""
Capabilities the controller expects from each kind of screen.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

from .commands import SurfaceCommand

# Field identifiers accepted by ``set_options``.
FIELD_RACE = "race"
FIELD_CLASS = "class"
FIELD_CHARACTER = "character"


def ability_field(slot: int) -> str:
    """Returns the field identifier of an ability slot (1-based)."""
    return f"ability_{slot}"


class Surface(Protocol):

    def add_listener(
        self, command: SurfaceCommand, handler: Callable[[], None]
    ) -> None:
        """Registers a handler for one user action."""
        ...

    def set_action_listener(
        self, listener: Callable[[SurfaceCommand], None]
    ) -> None:
        """Registers a handler receiving every action, tagged by its command."""
        ...

    def fire(self, command: SurfaceCommand) -> None:
        """Delivers a user action to the registered handlers."""
        ...

    def set_options(self, field_id: str, options: Sequence[str]) -> None:
        """Replaces the options of a selectable field."""
        ...

    def show_info_message(self, message: str) -> None: ...

    def show_error_message(self, message: str) -> None: ...

    def show(self) -> None:
        """Makes the screen visible to the user."""
        ...

    def dispose(self) -> None:
        """Closes the screen. Later actions are ignored."""
        ...

    @property
    def is_disposed(self) -> bool: ...


class RosterOverview(Surface, Protocol):

    def display_character_list(self, summaries: Sequence[str]) -> None:
        """Shows the summaries of the characters in the roster."""
        ...


class CreationForm(Surface, Protocol):

    def set_race_options(self, options: list[str]) -> None: ...

    def set_class_options(self, options: list[str]) -> None: ...

    def set_ability_options(self, slot: int, options: list[str]) -> None:
        """Replaces the options of one ability drop-down (1-based)."""
        ...

    def get_character_name(self) -> str | None: ...

    def get_selected_race(self) -> str | None: ...

    def get_selected_class(self) -> str | None: ...

    def get_selected_abilities(self) -> list[str | None]:
        """Returns the selection of every ability slot, in slot order."""
        ...

    def confirm_character_creation(self, name: str | None) -> bool:
        """Asks the user to confirm the creation of a character."""
        ...

    def reset_fields(self) -> None: ...


class ListDetail(Surface, Protocol):

    player_slot: int

    def update_list(self, details: str) -> None: ...


class Inspector(Surface, Protocol):

    def set_character_options(self, names: list[str]) -> None: ...

    def get_selected_character(self) -> str | None: ...

    def update_details(self, details: str) -> None: ...

    def reset_view(self) -> None:
        """Clears the selection and the details shown."""
        ...


class SurfaceFactory(Protocol):

    def create_creation_form(self) -> CreationForm: ...

    def create_list_detail(self, player_slot: int) -> ListDetail: ...

    def create_inspector(self) -> Inspector: ...
