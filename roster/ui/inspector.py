from collections.abc import Callable

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel

from .commands import SurfaceCommand
from .interfaces import FIELD_CHARACTER
from .surface import ConsoleSurface, MenuEntry


class InspectorScreen(ConsoleSurface):
    """Lets the user pick one character and shows its full description."""

    title = "Fatal Fantasy: Tactics | View Character"

    def __init__(
        self,
        console: Console | None = None,
        interactive: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        super().__init__(console=console, interactive=interactive, confirm=confirm)
        self._selected: str | None = None
        self.details = ""

    def set_character_options(self, names: list[str]) -> None:
        self.set_options(FIELD_CHARACTER, names)

    def get_character_options(self) -> list[str]:
        return self.get_options(FIELD_CHARACTER)

    def select_character(self, name: str | None) -> None:
        """Selects a character and raises SELECT."""
        self._selected = name
        self.fire(SurfaceCommand.SELECT)

    def get_selected_character(self) -> str | None:
        return self._selected

    def update_details(self, details: str) -> None:
        self.details = details

    def reset_view(self) -> None:
        self._selected = None
        self.details = ""

    def render(self) -> RenderableType:
        return Panel(escape(self.details or "Pick a character."), title=escape(self.title))

    def menu_entries(self) -> list[MenuEntry]:
        return [
            (SurfaceCommand.SELECT.label, self._choose_character),
            (SurfaceCommand.RETURN.label, lambda: self.fire(SurfaceCommand.RETURN)),
        ]

    def _choose_character(self) -> None:
        name = self.ask_choice("Character", self.get_character_options())
        self.select_character(name)
