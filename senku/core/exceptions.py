"""
Custom exceptions used across layers.

Everything derives from SenkuError, so a caller (the CLI for instance) can catch a single type
to report any recoverable problem back to the user.
"""


class SenkuError(Exception):
    """Base class for all recoverable errors raised by senku."""


# --- MOVE NOTATION ---
class MoveParseError(SenkuError):
    """Text could not be decoded into a Move."""


class InvalidLengthError(MoveParseError):
    """A move is written with exactly 3 characters."""


class InvalidColumnError(MoveParseError):
    """First character is not a column letter."""


class InvalidRowError(MoveParseError):
    """Second character is not a digit, or the digit is outside the board."""


class InvalidDirectionError(MoveParseError):
    """Third character is not one of U, D, L, R."""


# --- GAME RULES ---
class IllegalMoveError(SenkuError):
    """The move is well-formed, but cannot be played on the current board."""


class GameStateError(SenkuError):
    """The requested action does not make sense in the current state of the session."""


# --- BOUNDARY VALIDATION ---
class InvalidRequestError(SenkuError):
    """Request (or configuration) data did not pass validation."""


class InvalidTemplateError(InvalidRequestError):
    """Board template rows cannot be turned into a playable board."""
