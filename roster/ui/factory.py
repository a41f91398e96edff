from collections.abc import Callable

from rich.console import Console

from .creation_form import CreationFormScreen
from .inspector import InspectorScreen
from .list_detail import ListDetailScreen


class ConsoleSurfaceFactory:
    """
    Builds the short-lived console screens the controller opens on demand.
    Every screen shares the console, the interactivity and the confirmation
    prompt of the factory.
    """

    def __init__(
        self,
        console: Console | None = None,
        interactive: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self.console = console or Console()
        self.interactive = interactive
        self.confirm = confirm
        self.opened: list[CreationFormScreen | InspectorScreen | ListDetailScreen] = []

    def create_creation_form(self) -> CreationFormScreen:
        screen = CreationFormScreen(
            console=self.console, interactive=self.interactive, confirm=self.confirm
        )
        self.opened.append(screen)
        return screen

    def create_list_detail(self, player_slot: int) -> ListDetailScreen:
        screen = ListDetailScreen(
            player_slot=player_slot,
            console=self.console,
            interactive=self.interactive,
            confirm=self.confirm,
        )
        self.opened.append(screen)
        return screen

    def create_inspector(self) -> InspectorScreen:
        screen = InspectorScreen(
            console=self.console, interactive=self.interactive, confirm=self.confirm
        )
        self.opened.append(screen)
        return screen
