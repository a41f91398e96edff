"""
User interface module for the roster manager.

This module provides the console screens of the roster manager, the command
tags their events carry, and the protocols the controller relies on.
"""

from .commands import SurfaceCommand
from .creation_form import CreationFormScreen
from .factory import ConsoleSurfaceFactory
from .inspector import InspectorScreen
from .list_detail import ListDetailScreen
from .overview import RosterOverviewScreen
from .surface import ConsoleSurface

__all__ = [
    "ConsoleSurface",
    "ConsoleSurfaceFactory",
    "CreationFormScreen",
    "InspectorScreen",
    "ListDetailScreen",
    "RosterOverviewScreen",
    "SurfaceCommand",
]
