"""
Main entry point for the Fatal Fantasy: Tactics roster manager.

Run from this directory with ``python main.py``, or use the installed
``tactics-roster`` command.
"""

from ui.app import main

if __name__ == "__main__":
    main()
