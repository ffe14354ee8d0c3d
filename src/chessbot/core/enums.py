"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction of this side's pawns."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveKind(IntEnum):
    """Move classification needed to apply and undo a move exactly."""

    NORMAL = 0
    CASTLING = 1
    PROMOTION = 2
    EN_PASSANT = 3


class CastlingRights(IntFlag):
    """One castling flag per player, cleared when its king or a rook moves."""

    NONE = 0
    WHITE = 1
    BLACK = 2
    ALL = WHITE | BLACK

    @classmethod
    def of(cls, color: Color) -> CastlingRights:
        return cls.WHITE if color == Color.WHITE else cls.BLACK


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class EndReason(IntEnum):
    """Why a game ended."""

    CHECKMATE = 1
    STALEMATE = 2
    FIFTY_MOVES = 3
    THREEFOLD_REPETITION = 4
