"""
Custom exceptions for the championship core.

Lookups never raise; these only come up in strict-name mode:
- ChampionshipError: Base exception for all championship errors
- DuplicateNameError: A team or player name is already taken
- AmbiguousNameError: A name lookup matched more than one player
"""


class ChampionshipError(Exception):
    """Base exception for all championship errors."""
    pass


class DuplicateNameError(ChampionshipError):
    """Name already registered (case-insensitive)."""
    pass


class AmbiguousNameError(ChampionshipError):
    """Name lookup resolved to more than one player."""
    pass
