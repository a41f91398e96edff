"""
Exceptions raised by the roster manager.
"""


class RosterError(Exception):
    """Base class for all the errors raised while managing a roster."""


class InvalidArgumentError(RosterError, ValueError):
    """A required value is missing, blank, out of range or not recognized."""


class ResolutionFailureError(RosterError, LookupError):
    """An ability name could not be resolved, or is not legal for a class."""
