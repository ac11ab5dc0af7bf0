"""Custom exceptions shared across layers.

NOTE: none of these derive from ValueError, so pydantic validators let them propagate unchanged.
"""


class GameError(Exception):
    """Top-level exception for anything raised by this application."""


class InvalidFENError(GameError):
    """The FEN (piece placement) string cannot be interpreted."""


class InvalidRequestError(GameError):
    """The request sent by the presentation layer is malformed."""


class GameStateError(GameError):
    """An operation was called in a state that does not allow it."""
