"""
Exceptions raised by the simulation core and the season service.
The caller (HTTP adapter, script) decides how to surface them.
"""
from __future__ import annotations


class InvalidInputError(ValueError):
    """Week number, strength or team name outside the valid domain. Nothing was mutated."""


class WeekSequenceError(InvalidInputError):
    """Weeks must be played in order; a played week is never replayed."""


class StorageUnavailableError(RuntimeError):
    """The database could not be read or written. The current week was rolled back."""
