"""Exception hierarchy of the chess core."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`chessbot`."""


class BoundsError(ChessError, ValueError):
    """A file, rank or square name lies outside the 8x8 grid."""


class IllegalMoveError(ChessError, ValueError):
    """The requested move is not in the legal move set of the side to move."""


class GameOverError(IllegalMoveError):
    """A move was submitted after the game reached a terminal state."""


class InvariantViolation(ChessError, RuntimeError):
    """Internal state is corrupt; indicates a bug in the core, never caught."""
