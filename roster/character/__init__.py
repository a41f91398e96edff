"""
Character system module for the roster manager.

This module holds the entities the roster is made of: characters, and the
players that own them.
"""

from .main import Character
from .player import Player

__all__ = [
    # Import from main.py
    "Character",
    # Import from player.py
    "Player",
]
