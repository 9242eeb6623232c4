"""
Exceptions raised by the Blokus engine.

Legality rejections are never raised; they are returned by
PlayerInputs.validate_move(). These exceptions signal bookkeeping
defects in the calling code and are meant to propagate.
"""


class BlokusError(Exception):
    """Base class for engine invariant violations."""


class PieceNotOwnedError(BlokusError, ValueError):
    """A move used a piece the player no longer holds."""


class InvalidMoveError(BlokusError, ValueError):
    """An agent proposed a move that validation rejected."""


class UnknownPlayerError(BlokusError, KeyError):
    """A player id was looked up that is not part of the game."""
