"""
Source root for the Fatal Fantasy: Tactics roster manager.

This directory contains all the packages of the roster manager, including the
character catalog, the player and character entities, the controller that
mediates between rosters and screens, and the console user interface.
"""
