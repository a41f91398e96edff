from collections.abc import Callable, Sequence

from core.constants import MSG_CONFIRM_EXIT, PLAYER_SLOTS
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .commands import SurfaceCommand
from .surface import ConsoleSurface, MenuEntry


class RosterOverviewScreen(ConsoleSurface):
    """
    Top-level character management screen. Lists the summaries of the roster
    and offers to create, view and manage characters.
    """

    def __init__(
        self,
        player_id: int = 1,
        console: Console | None = None,
        interactive: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        super().__init__(console=console, interactive=interactive, confirm=confirm)
        self.player_id = player_id
        self.title = f"Fatal Fantasy: Tactics | Player {player_id} Management"
        self._summaries: list[str] = []

    def display_character_list(self, summaries: Sequence[str]) -> None:
        self._summaries = list(summaries)

    @property
    def displayed_summaries(self) -> list[str]:
        return list(self._summaries)

    def request_close(self) -> bool:
        """
        Asks the user to confirm quitting; raises EXIT only if they agree.

        Returns:
            bool: Whether the user confirmed.

        """
        if self.is_disposed:
            return False
        if not self._confirm(MSG_CONFIRM_EXIT):
            return False
        self.fire(SurfaceCommand.EXIT)
        return True

    def on_quit(self) -> None:
        self.request_close()

    def render(self) -> RenderableType:
        table = Table(title="Characters", pad_edge=False, show_header=False)
        table.add_column("Summary", style="bold")
        for summary in self._summaries:
            table.add_row(escape(summary))
        if not self._summaries:
            table.add_row("[dim]No characters yet.[/]")
        return Panel(table, title=escape(self.title))

    def menu_entries(self) -> list[MenuEntry]:
        commands = [
            SurfaceCommand.VIEW,
            SurfaceCommand.CREATE,
            *(SurfaceCommand.manage_for_slot(slot) for slot in range(1, PLAYER_SLOTS + 1)),
            SurfaceCommand.RETURN,
        ]
        return [(c.label, lambda c=c: self.fire(c)) for c in commands]
