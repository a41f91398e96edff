"""
Console screens for the roster manager.

Screens render with rich and read input with prompt_toolkit. They hold no
business rules: user actions are delivered as tagged events to whatever
handlers were registered, and the handlers push data back through the
setters.
"""

from collections.abc import Callable, Sequence

from core.logging import log_debug
from core.utils import ccapture
from prompt_toolkit import ANSI, PromptSession
from prompt_toolkit.shortcuts import confirm as prompt_confirm
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.table import Table

from .commands import SurfaceCommand

MenuEntry = tuple[str, Callable[[], None]]


def ask_yes_no(question: str) -> bool:
    """Blocks until the user answers a yes/no question."""
    return prompt_confirm(question)


class ConsoleSurface:
    """
    Base class of every console screen.

    Attributes:
        title (str):
            The title rendered at the top of the screen.
        console (Console):
            The rich console the screen renders to.
        interactive (bool):
            Whether ``show`` hands control to the user until the screen is
            closed. Non-interactive screens only render.
        messages (list[tuple[str, str]]):
            Every message shown, as ``(level, text)`` pairs.

    """

    title: str = "Fatal Fantasy: Tactics"

    def __init__(
        self,
        console: Console | None = None,
        interactive: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self.console = console or Console()
        self.interactive = interactive
        self.messages: list[tuple[str, str]] = []
        self._confirm = confirm or ask_yes_no
        self._listeners: dict[SurfaceCommand, list[Callable[[], None]]] = {}
        self._action_listener: Callable[[SurfaceCommand], None] | None = None
        self._options: dict[str, list[str]] = {}
        self._disposed = False
        self._session: PromptSession | None = None

    # ------------------ Events -----------------------

    def add_listener(
        self, command: SurfaceCommand, handler: Callable[[], None]
    ) -> None:
        self._listeners.setdefault(command, []).append(handler)

    def set_action_listener(
        self, listener: Callable[[SurfaceCommand], None]
    ) -> None:
        self._action_listener = listener

    def fire(self, command: SurfaceCommand) -> None:
        if self._disposed:
            log_debug(
                f"Ignoring {command} on a closed screen.",
                {"screen": type(self).__name__},
            )
            return
        for handler in list(self._listeners.get(command, [])):
            handler()
        if self._action_listener is not None:
            self._action_listener(command)

    # ------------------ Fields -----------------------

    def set_options(self, field_id: str, options: Sequence[str]) -> None:
        self._options[field_id] = list(options)
        self._on_options_changed(field_id)

    def get_options(self, field_id: str) -> list[str]:
        return list(self._options.get(field_id, []))

    def _on_options_changed(self, field_id: str) -> None:
        """Hook for screens that keep a selection per field."""

    # ------------------ Messages -----------------------

    def show_info_message(self, message: str) -> None:
        self.messages.append(("info", message))
        self.console.print(f"[bold green]{escape(message)}[/]")

    def show_error_message(self, message: str) -> None:
        self.messages.append(("error", message))
        self.console.print(f"[bold red]{escape(message)}[/]")

    @property
    def last_info(self) -> str | None:
        return next((m for lvl, m in reversed(self.messages) if lvl == "info"), None)

    @property
    def last_error(self) -> str | None:
        return next((m for lvl, m in reversed(self.messages) if lvl == "error"), None)

    # ------------------ Lifecycle -----------------------

    def show(self) -> None:
        self.console.print(self.render())
        if self.interactive:
            self.run()

    def dispose(self) -> None:
        self._disposed = True

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # ------------------ Rendering -----------------------

    def render(self) -> RenderableType:
        """Returns what the screen currently displays."""
        return f"[bold]{escape(self.title)}[/]"

    def menu_entries(self) -> list[MenuEntry]:
        """Returns the actions offered to the user, in display order."""
        return [(SurfaceCommand.RETURN.label, lambda: self.fire(SurfaceCommand.RETURN))]

    def on_quit(self) -> None:
        """Called when the user types 'q'."""
        self.fire(SurfaceCommand.RETURN)

    # ------------------ Interaction -----------------------

    def run(self) -> None:
        """Hands control to the user until the screen is closed."""
        while not self._disposed:
            entries = self.menu_entries()
            table = Table(title="Actions", pad_edge=False)
            table.add_column("#", style="cyan")
            table.add_column("Action", style="bold")
            for i, (label, _) in enumerate(entries, 1):
                table.add_row(str(i), label)
            table.add_row()
            table.add_row("q", "Back")
            prompt = (
                "\n"
                + ccapture(self.render(), self.console)
                + "\n"
                + ccapture(table, self.console)
                + "\nAction > "
            )
            answer = self._read_answer(prompt)
            index = self.get_number_choice(answer) - 1
            if 0 <= index < len(entries):
                entries[index][1]()
            elif answer.strip().lower() == "q":
                self.on_quit()

    def ask_text(self, question: str) -> str | None:
        """Reads a line of free text, or None if the user closed the input."""
        try:
            return self._prompt(f"{question} > ")
        except EOFError:
            return None

    def ask_choice(self, title: str, options: Sequence[str]) -> str | None:
        """
        Lets the user pick one of the options.

        Args:
            title (str): The title of the options table.
            options (Sequence[str]): The options to choose from.

        Returns:
            str | None: The option picked, or None if the user went back.

        """
        if not options:
            self.show_error_message(f"No options available for {title.lower()}.")
            return None
        table = Table(title=title, pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="bold")
        for i, option in enumerate(options, 1):
            table.add_row(str(i), escape(option))
        table.add_row()
        table.add_row("q", "Back")
        prompt = "\n" + ccapture(table, self.console) + f"\n{title} > "
        while True:
            answer = self._read_answer(prompt)
            index = self.get_number_choice(answer) - 1
            if 0 <= index < len(options):
                return options[index]
            if answer.strip().lower() == "q":
                return None

    def _read_answer(self, prompt: str) -> str:
        # Ctrl-D goes back, like "q".
        try:
            return self._prompt(prompt)
        except EOFError:
            return "q"

    def _prompt(self, text: str) -> str:
        # Created on first use so that non-interactive screens never touch the terminal.
        if self._session is None:
            self._session = PromptSession(erase_when_done=True)
        return self._session.prompt(ANSI(text))

    @staticmethod
    def get_number_choice(answer: str) -> int:
        """
        Convert a numeric string input to its integer value.

        Args:
            answer (str): User input string to parse.

        Returns:
            int: The integer value, or -1 if invalid input.

        """
        answer = answer.strip() if isinstance(answer, str) else ""
        if answer.isdigit():
            return int(answer)
        return -1
