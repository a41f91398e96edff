"""
Console entry point of the roster manager.

Lets the user pick a player, then hands control to that player's character
management screen. Rosters live in memory for the duration of the session.
"""

import logging
import os

from catalog.content import load_default_catalog
from character.player import Player
from controller.character_controller import CharacterController
from core.constants import LOG_LEVEL_ENV, PLAYER_SLOTS
from core.logging import log_info, setup_logging
from core.utils import cprint, crule
from rich.console import Console

from .factory import ConsoleSurfaceFactory
from .overview import RosterOverviewScreen
from .surface import ConsoleSurface


def _log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def manage_player(players: dict[int, Player], slot: int, console: Console) -> bool:
    """
    Runs the management screen of one player until it is closed.

    Returns:
        bool: Whether the user confirmed quitting the application.

    """
    factory = ConsoleSurfaceFactory(console=console, interactive=True)
    overview = RosterOverviewScreen(player_id=slot, console=console, interactive=True)
    controller = CharacterController(
        players[slot],
        overview,
        catalog=load_default_catalog(),
        surface_factory=factory,
    )
    for other_slot, player in players.items():
        controller.register_slot(other_slot, player)
    overview.show()
    return controller.exited


def main() -> None:
    setup_logging(_log_level())
    console = Console()
    players = {
        slot: Player(player_id=slot, name=f"Player {slot}")
        for slot in range(1, PLAYER_SLOTS + 1)
    }

    crule("Fatal Fantasy: Tactics", style="bold green")
    cprint("Create and review the characters of each player.\n", style="bold blue")
    log_info("Roster manager started.", {"players": len(players)})

    menu = ConsoleSurface(console=console)
    options = [f"Player {slot} Management" for slot in players]
    try:
        while True:
            choice = menu.ask_choice("Players", options)
            if choice is None:
                break
            if manage_player(players, options.index(choice) + 1, console):
                break
    except (KeyboardInterrupt, EOFError):
        cprint("")
        crule("Roster Manager Interrupted", style="bold red")
        return

    crule("Goodbye", style="bold green")


if __name__ == "__main__":
    main()
