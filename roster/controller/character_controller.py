"""
Controller managing the character roster of a player.

The controller is the only place holding decisions: it validates creation
requests, projects the roster into the text screens display, and decides
which screen opens or closes in response to each user action. Screens only
raise tagged events and render what they are given.
"""

from collections.abc import Callable, Sequence

from catalog.content import CatalogService, load_default_catalog
from catalog.models import Ability, ClassType, RaceType
from character.main import Character
from character.player import Player
from core.constants import (
    ABILITY_PLACEHOLDER,
    ABILITY_SLOTS,
    MSG_INVALID_INPUT,
    PLAYER_SLOTS,
    created_message,
)
from core.error_handling import log_critical, require_not_none
from core.errors import InvalidArgumentError, RosterError
from core.logging import log_debug, log_info
from ui.commands import SurfaceCommand
from ui.factory import ConsoleSurfaceFactory
from ui.interfaces import (
    CreationForm,
    Inspector,
    ListDetail,
    RosterOverview,
    Surface,
    SurfaceFactory,
)

from .creation import (
    parse_member,
    selected_ability_names,
    validate_creation,
)
from .projection import (
    describe_selection,
    project_names,
    project_summaries,
    render_character_list,
)


class CharacterController:
    """
    Manages all character-related actions for a single player.

    Attributes:
        player (Player):
            The player whose roster is managed.
        overview (RosterOverview):
            The management screen, owned for the lifetime of the controller.
        catalog (CatalogService):
            The source of races, classes and abilities.
        surface_factory (SurfaceFactory):
            Builds the screens opened on demand.
        exited (bool):
            Whether the user confirmed quitting from the overview.

    """

    def __init__(
        self,
        player: Player,
        overview: RosterOverview,
        catalog: CatalogService | None = None,
        surface_factory: SurfaceFactory | None = None,
    ) -> None:
        """
        Constructs a controller and binds the management screen.

        Args:
            player (Player):
                The player whose characters are being managed.
            overview (RosterOverview):
                The screen used to display the roster.
            catalog (CatalogService | None):
                The catalog to use. Defaults to the packaged catalog.
            surface_factory (SurfaceFactory | None):
                Builds the screens opened on demand. Defaults to console
                screens.

        Raises:
            InvalidArgumentError:
                If player or overview is None.

        """
        self.player = require_not_none(player, "player")
        self.overview = require_not_none(overview, "managementView")
        self.catalog = catalog or load_default_catalog()
        self.surface_factory = surface_factory or ConsoleSurfaceFactory()
        self.exited = False
        self._slot_players: dict[int, Player] = {}

        self._bind_overview()

    # ------------------ Roster Overview -----------------------

    def _bind_overview(self) -> None:
        for slot in range(1, PLAYER_SLOTS + 1):
            self.overview.add_listener(
                SurfaceCommand.manage_for_slot(slot),
                self._guarded(self.overview, lambda slot=slot: self.open_list_detail(slot)),
            )
        self.overview.add_listener(
            SurfaceCommand.CREATE,
            self._guarded(self.overview, self.open_creation_form),
        )
        self.overview.add_listener(
            SurfaceCommand.VIEW,
            self._guarded(self.overview, self.open_inspector),
        )
        self.overview.add_listener(SurfaceCommand.RETURN, self.overview.dispose)
        self.overview.add_listener(SurfaceCommand.EXIT, self._on_exit)

        self.update_overview()

    def update_overview(self) -> None:
        """Re-projects the roster into the management screen."""
        self.overview.display_character_list(
            project_summaries(self.player.get_characters())
        )

    def register_slot(self, slot: int, player: Player) -> None:
        """
        Routes the manage action of a player slot to another roster.

        Args:
            slot (int): The player slot, starting from 1.
            player (Player): The player whose roster the slot shows.

        Raises:
            InvalidArgumentError: If the slot does not exist or player is None.

        """
        require_not_none(player, "player")
        if not 1 <= slot <= PLAYER_SLOTS:
            raise InvalidArgumentError(
                f"Player slot must be between 1 and {PLAYER_SLOTS}, got {slot}."
            )
        self._slot_players[slot] = player

    def roster_for_slot(self, slot: int) -> Player:
        """Returns the player shown by a slot; unregistered slots show this controller's player."""
        return self._slot_players.get(slot, self.player)

    def _on_exit(self) -> None:
        log_info("Exit confirmed, closing the management screen.")
        self.exited = True
        self.overview.dispose()

    # ------------------ Screen Opening -----------------------

    def open_list_detail(self, slot: int = 1) -> ListDetail:
        """Opens and binds a new list screen for a player slot."""
        list_view = self.surface_factory.create_list_detail(slot)
        self.bind_list_detail(list_view, self.roster_for_slot(slot))
        log_debug("Opened character list.", {"slot": slot})
        list_view.show()
        return list_view

    def open_creation_form(self) -> CreationForm:
        """Opens and binds a new creation form."""
        form = self.surface_factory.create_creation_form()
        self.bind_creation_form(form)
        log_debug("Opened creation form.")
        form.show()
        return form

    def open_inspector(self) -> Inspector:
        """Opens and binds a new character inspector."""
        inspector = self.surface_factory.create_inspector()
        self.bind_inspector(inspector)
        log_debug("Opened character inspector.")
        inspector.show()
        return inspector

    # ------------------ Creation Form -----------------------

    def bind_creation_form(self, form: CreationForm) -> None:
        """
        Wires a creation form to this controller and populates its
        drop-down options.

        Args:
            form (CreationForm): The creation form to bind.

        """
        form.set_race_options([race.name for race in self.get_available_races()])
        form.set_class_options([c.name for c in self.get_available_classes()])
        self._reset_ability_options(form)

        form.set_action_listener(
            self._dispatcher(
                form,
                {
                    SurfaceCommand.CLASS_CHANGED: lambda: self._on_class_changed(form),
                    SurfaceCommand.CREATE: lambda: self._on_create_requested(form),
                    SurfaceCommand.RETURN: form.dispose,
                },
            )
        )

    def _reset_ability_options(self, form: CreationForm) -> None:
        for slot in range(1, ABILITY_SLOTS + 1):
            form.set_ability_options(slot, [ABILITY_PLACEHOLDER])

    def _on_class_changed(self, form: CreationForm) -> None:
        selected = form.get_selected_class()
        if not selected:
            return
        class_type = ClassType.from_name(selected)
        names = [ability.name for ability in self.get_available_abilities(class_type)]
        for slot in range(1, ABILITY_SLOTS + 1):
            form.set_ability_options(slot, names)

    def _on_create_requested(self, form: CreationForm) -> None:
        name = form.get_character_name()
        if not form.confirm_character_creation(name):
            return

        result = validate_creation(
            self.catalog,
            name,
            parse_member(RaceType, form.get_selected_race()),
            parse_member(ClassType, form.get_selected_class()),
            selected_ability_names(form.get_selected_abilities()),
        )
        if not result.is_valid:
            log_debug(
                f"Rejected creation request: {result.message}",
                {"error": type(result.error).__name__},
            )
            form.show_error_message(MSG_INVALID_INPUT)
            return

        character = result.unwrap()
        self._commit(character)
        form.reset_fields()
        self._reset_ability_options(form)
        form.show_info_message(created_message(character.name, exclaim=True))

    # ------------------ Character Creation -----------------------

    def create_character(
        self,
        name: str | None,
        race: RaceType | None,
        class_type: ClassType | None,
        ability_names: Sequence[str] | None,
    ) -> Character:
        """
        Creates a new character for the player and updates the management
        screen.

        On failure the concrete reason is shown on the management screen and
        the roster is left untouched.

        Args:
            name (str | None): The character's name.
            race (RaceType | None): The chosen race.
            class_type (ClassType | None): The chosen class.
            ability_names (Sequence[str] | None): The names of one to three
                abilities of the chosen class.

        Returns:
            Character: The character added to the roster.

        Raises:
            InvalidArgumentError: If a field is missing, blank or unrecognized,
                or the number of abilities is out of range.
            ResolutionFailureError: If an ability is unknown or belongs to
                another class.

        """
        result = validate_creation(self.catalog, name, race, class_type, ability_names)
        if not result.is_valid:
            log_debug(
                f"Rejected creation request: {result.message}",
                {"name": name, "error": type(result.error).__name__},
            )
            self.overview.show_error_message(result.message)
            return result.unwrap()
        character = result.unwrap()
        self._commit(character)
        return character

    def _commit(self, character: Character) -> None:
        self.player.add_character(character)
        self.update_overview()
        log_info(
            f"Created character '{character.name}'.",
            {"player": self.player.player_id, "summary": character.summary()},
        )
        self.overview.show_info_message(created_message(character.name))

    # ------------------ Shared Accessors -----------------------

    def get_available_races(self) -> list[RaceType]:
        """Returns every race available for character creation."""
        return self.catalog.list_races()

    def get_available_classes(self) -> list[ClassType]:
        """Returns every class available for character creation."""
        return self.catalog.list_classes()

    def get_available_abilities(self, class_type: ClassType | None) -> list[Ability]:
        """
        Returns the abilities allowed for a class.

        Raises:
            InvalidArgumentError: If class_type is None.

        """
        require_not_none(class_type, "classType")
        return self.catalog.abilities_for_class(class_type)

    # ------------------ List Detail -----------------------

    def bind_list_detail(self, list_view: ListDetail, player: Player | None = None) -> None:
        """
        Binds a character list screen and renders it right away.

        Args:
            list_view (ListDetail): The list screen to bind.
            player (Player | None): The roster to show. Defaults to this
                controller's player.

        """
        roster = self.player if player is None else player
        list_view.set_action_listener(
            self._dispatcher(
                list_view,
                {
                    SurfaceCommand.REFRESH: lambda: self._refresh_list_detail(list_view, roster),
                    SurfaceCommand.RETURN: list_view.dispose,
                },
            )
        )
        self._refresh_list_detail(list_view, roster)

    def _refresh_list_detail(self, list_view: ListDetail, roster: Player) -> None:
        list_view.update_list(render_character_list(roster.get_characters()))

    # ------------------ Inspector -----------------------

    def bind_inspector(self, inspector: Inspector) -> None:
        """
        Binds a character inspector, enabling selection and detail display.

        Args:
            inspector (Inspector): The inspector to bind.

        """
        inspector.set_character_options(project_names(self.player.get_characters()))
        inspector.set_action_listener(
            self._dispatcher(
                inspector,
                {
                    SurfaceCommand.SELECT: lambda: inspector.update_details(
                        describe_selection(self.player, inspector.get_selected_character())
                    ),
                    SurfaceCommand.RETURN: inspector.dispose,
                },
            )
        )
        inspector.reset_view()

    # ------------------ Event Plumbing -----------------------

    def _dispatcher(
        self,
        surface: Surface,
        handlers: dict[SurfaceCommand, Callable[[], object]],
    ) -> Callable[[SurfaceCommand], None]:
        """Builds a multiplexed listener routing each command to its handler."""

        def dispatch(command: SurfaceCommand) -> None:
            handler = handlers.get(command)
            if handler is None:
                return
            self._guarded(surface, handler)()

        return dispatch

    @staticmethod
    def _guarded(surface: Surface, handler: Callable[[], object]) -> Callable[[], None]:
        """Wraps an event handler so that failures are shown, never raised to the screen."""

        def run() -> None:
            try:
                handler()
            except RosterError as e:
                surface.show_error_message(str(e))
            except Exception as e:
                log_critical(
                    f"Unexpected failure handling a screen event: {e}",
                    {"screen": type(surface).__name__},
                    e,
                )
                surface.show_error_message(MSG_INVALID_INPUT)

        return run
