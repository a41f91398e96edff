from collections.abc import Callable

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel

from .commands import SurfaceCommand
from .surface import ConsoleSurface, MenuEntry


class ListDetailScreen(ConsoleSurface):
    """Shows the full description of every character in a roster."""

    def __init__(
        self,
        player_slot: int = 1,
        console: Console | None = None,
        interactive: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        super().__init__(console=console, interactive=interactive, confirm=confirm)
        self.player_slot = player_slot
        self.title = f"Fatal Fantasy: Tactics | Player {player_slot} Characters"
        self.details = ""

    def update_list(self, details: str) -> None:
        self.details = details

    def render(self) -> RenderableType:
        return Panel(escape(self.details), title=escape(self.title))

    def menu_entries(self) -> list[MenuEntry]:
        return [
            (SurfaceCommand.REFRESH.label, lambda: self.fire(SurfaceCommand.REFRESH)),
            (SurfaceCommand.RETURN.label, lambda: self.fire(SurfaceCommand.RETURN)),
        ]
