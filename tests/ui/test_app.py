"""
Tests for the console entry point.
"""

import logging

from character.player import Player
from core.constants import LOG_LEVEL_ENV
from ui import app
from ui.overview import RosterOverviewScreen


def test_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert app._log_level() == logging.WARNING


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert app._log_level() == logging.DEBUG
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert app._log_level() == logging.WARNING


def test_manage_player_routes_every_slot(mocker, console):
    players = {1: Player(player_id=1), 2: Player(player_id=2)}
    show = mocker.patch.object(RosterOverviewScreen, "show", autospec=True)

    assert app.manage_player(players, 2, console) is False

    (overview,), _ = show.call_args
    assert overview.player_id == 2
    assert overview.interactive
    assert overview.displayed_summaries == []


def test_interrupt_at_player_menu_ends_cleanly(mocker):
    mocker.patch("ui.app.setup_logging")
    rule = mocker.patch("ui.app.crule")
    mocker.patch("ui.app.ConsoleSurface.ask_choice", side_effect=KeyboardInterrupt)

    app.main()

    assert rule.call_args.args[0] == "Roster Manager Interrupted"


def test_closed_input_at_player_menu_ends_cleanly(mocker):
    mocker.patch("ui.app.setup_logging")
    rule = mocker.patch("ui.app.crule")
    mocker.patch("ui.app.manage_player", side_effect=EOFError)
    mocker.patch("ui.app.ConsoleSurface.ask_choice", return_value="Player 1 Management")

    app.main()

    assert rule.call_args.args[0] == "Roster Manager Interrupted"


def test_quitting_player_menu_says_goodbye(mocker):
    mocker.patch("ui.app.setup_logging")
    rule = mocker.patch("ui.app.crule")
    mocker.patch("ui.app.ConsoleSurface.ask_choice", return_value=None)

    app.main()

    assert rule.call_args.args[0] == "Goodbye"
