"""
Command tags carried by the events screens raise.
"""

from core.constants import NiceEnum


class SurfaceCommand(NiceEnum):
    """
    Identifies the user action behind an event. The value is the label of
    the control that raises it.
    """

    CREATE = "Create Character"
    VIEW = "View Characters"
    REFRESH = "Refresh"
    SELECT = "Select Character"
    CLASS_CHANGED = "Class Changed"
    MANAGE_PLAYER_1 = "Manage Player 1"
    MANAGE_PLAYER_2 = "Manage Player 2"
    RETURN = "Return"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def manage_for_slot(cls, slot: int) -> "SurfaceCommand":
        """Returns the manage command of a player slot."""
        return cls[f"MANAGE_PLAYER_{slot}"]
