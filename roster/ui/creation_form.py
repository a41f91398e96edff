from collections.abc import Callable

from core.constants import ABILITY_SLOTS
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .commands import SurfaceCommand
from .interfaces import FIELD_CLASS, FIELD_RACE, ability_field
from .surface import ConsoleSurface, MenuEntry


class CreationFormScreen(ConsoleSurface):
    """
    Form for creating a character manually: a name, a race, a class and one
    drop-down per ability slot.
    """

    title = "Fatal Fantasy: Tactics | Create Character"

    def __init__(
        self,
        console: Console | None = None,
        interactive: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        super().__init__(console=console, interactive=interactive, confirm=confirm)
        self._name: str | None = None
        self._selected: dict[str, str | None] = {}

    # ------------------ Setters -----------------------

    def set_race_options(self, options: list[str]) -> None:
        self.set_options(FIELD_RACE, options)

    def set_class_options(self, options: list[str]) -> None:
        self.set_options(FIELD_CLASS, options)

    def set_ability_options(self, slot: int, options: list[str]) -> None:
        self.set_options(ability_field(slot), options)

    def _on_options_changed(self, field_id: str) -> None:
        # A drop-down loses its selection when its options are replaced.
        self._selected[field_id] = None

    def set_character_name(self, name: str | None) -> None:
        self._name = name

    def select_race(self, race: str | None) -> None:
        self._selected[FIELD_RACE] = race

    def select_class(self, class_name: str | None) -> None:
        """Selects a class and raises CLASS_CHANGED, like a drop-down does."""
        self._selected[FIELD_CLASS] = class_name
        self.fire(SurfaceCommand.CLASS_CHANGED)

    def select_ability(self, slot: int, ability: str | None) -> None:
        self._selected[ability_field(slot)] = ability

    # ------------------ Getters -----------------------

    def get_character_name(self) -> str | None:
        return self._name

    def get_selected_race(self) -> str | None:
        return self._selected.get(FIELD_RACE)

    def get_selected_class(self) -> str | None:
        return self._selected.get(FIELD_CLASS)

    def get_selected_abilities(self) -> list[str | None]:
        return [
            self._selected.get(ability_field(slot))
            for slot in range(1, ABILITY_SLOTS + 1)
        ]

    def get_ability_options(self, slot: int) -> list[str]:
        return self.get_options(ability_field(slot))

    # ------------------ Actions -----------------------

    def confirm_character_creation(self, name: str | None) -> bool:
        return self._confirm(f'Create character "{name or ""}"?')

    def reset_fields(self) -> None:
        self._name = None
        for field_id in self._selected:
            self._selected[field_id] = None

    # ------------------ Rendering -----------------------

    def render(self) -> RenderableType:
        table = Table(pad_edge=False, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="bold")
        table.add_row("Name", escape(self._name or "-"))
        table.add_row("Race", escape(self.get_selected_race() or "-"))
        table.add_row("Class", escape(self.get_selected_class() or "-"))
        for slot, ability in enumerate(self.get_selected_abilities(), 1):
            table.add_row(f"Ability {slot}", escape(ability or "-"))
        return Panel(table, title=escape(self.title))

    def menu_entries(self) -> list[MenuEntry]:
        entries: list[MenuEntry] = [
            ("Set name", self._enter_name),
            ("Choose race", self._choose_race),
            ("Choose class", self._choose_class),
        ]
        for slot in range(1, ABILITY_SLOTS + 1):
            entries.append(
                (f"Choose ability {slot}", lambda slot=slot: self._choose_ability(slot))
            )
        entries.append((SurfaceCommand.CREATE.label, lambda: self.fire(SurfaceCommand.CREATE)))
        entries.append((SurfaceCommand.RETURN.label, lambda: self.fire(SurfaceCommand.RETURN)))
        return entries

    def _enter_name(self) -> None:
        name = self.ask_text("Name")
        if name is not None:
            self.set_character_name(name)

    def _choose_race(self) -> None:
        race = self.ask_choice("Race", self.get_options(FIELD_RACE))
        if race is not None:
            self.select_race(race)

    def _choose_class(self) -> None:
        class_name = self.ask_choice("Class", self.get_options(FIELD_CLASS))
        if class_name is not None:
            self.select_class(class_name)

    def _choose_ability(self, slot: int) -> None:
        ability = self.ask_choice(f"Ability {slot}", self.get_ability_options(slot))
        if ability is not None:
            self.select_ability(slot, ability)
