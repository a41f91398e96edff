"""
Controller module for the roster manager.

This module mediates between a player's roster and the screens that create,
list and inspect characters.
"""

from .character_controller import CharacterController
from .creation import CreationResult, validate_creation
from .projection import (
    describe_selection,
    project_summaries,
    render_character_list,
    summarize,
)

__all__ = [
    # Import from character_controller.py
    "CharacterController",
    # Import from creation.py
    "CreationResult",
    "validate_creation",
    # Import from projection.py
    "describe_selection",
    "project_summaries",
    "render_character_list",
    "summarize",
]
