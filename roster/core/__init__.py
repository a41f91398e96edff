"""
Core system module for the roster manager.

This module contains the fundamental components shared by every other package:
constants and user-visible messages, the error taxonomy, validation helpers,
logging setup and console utilities.
"""

from .constants import (
    ABILITY_PLACEHOLDER,
    ABILITY_SLOTS,
    MAX_ABILITIES,
    MIN_ABILITIES,
    MSG_CONFIRM_EXIT,
    MSG_INVALID_INPUT,
    MSG_NO_CHARACTERS,
    MSG_NO_SELECTION,
    MSG_NOT_FOUND,
    PLAYER_SLOTS,
    NiceEnum,
    created_message,
)
from .errors import (
    InvalidArgumentError,
    ResolutionFailureError,
    RosterError,
)
from .utils import (
    ccapture,
    cprint,
    crule,
)
from .validation import ValidationResult

__all__ = [
    # Import from constants.py
    "ABILITY_PLACEHOLDER",
    "ABILITY_SLOTS",
    "MAX_ABILITIES",
    "MIN_ABILITIES",
    "MSG_CONFIRM_EXIT",
    "MSG_INVALID_INPUT",
    "MSG_NO_CHARACTERS",
    "MSG_NO_SELECTION",
    "MSG_NOT_FOUND",
    "PLAYER_SLOTS",
    "NiceEnum",
    "created_message",
    # Import from errors.py
    "InvalidArgumentError",
    "ResolutionFailureError",
    "RosterError",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    # Import from validation.py
    "ValidationResult",
]
