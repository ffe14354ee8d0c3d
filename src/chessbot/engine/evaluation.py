"""Static evaluation: material plus piece-square bonuses.

Tables are written from White's point of view with the eighth rank first,
the way a board diagram reads. Black looks them up with the rank mirrored.
"""

from __future__ import annotations

from chessbot.core.board import Board
from chessbot.core.enums import Color, PieceType
from chessbot.core.piece import Piece
from chessbot.core.types import Square, file_of, rank_of

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}

_Table = tuple[tuple[float, ...], ...]

_KING_TABLE: _Table = (
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-3.0, -4.0, -4.0, -5.0, -5.0, -4.0, -4.0, -3.0),
    (-2.0, -3.0, -3.0, -4.0, -4.0, -3.0, -3.0, -2.0),
    (-1.0, -2.0, -2.0, -2.0, -2.0, -2.0, -2.0, -1.0),
    (2.0, 2.0, 0.0, 0.0, 0.0, 0.0, 2.0, 2.0),
    (2.0, 3.0, 1.0, 0.0, 0.0, 1.0, 3.0, 2.0),
)

_QUEEN_TABLE: _Table = (
    (-2.0, -1.0, -1.0, -0.5, -0.5, -1.0, -1.0, -2.0),
    (-1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -1.0),
    (-0.5, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -0.5),
    (0.0, 0.0, 0.5, 0.5, 0.5, 0.5, 0.0, -0.5),
    (-1.0, 0.5, 0.5, 0.5, 0.5, 0.5, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-2.0, -1.0, -1.0, -0.5, -0.5, -1.0, -1.0, -2.0),
)

_BISHOP_TABLE: _Table = (
    (-2.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -2.0),
    (-1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.5, 1.0, 1.0, 0.5, 0.0, -1.0),
    (-1.0, 0.5, 0.5, 1.0, 1.0, 0.5, 0.5, -1.0),
    (-1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 0.0, -1.0),
    (-1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, -1.0),
    (-1.0, 0.5, 0.0, 0.0, 0.0, 0.0, 0.5, -1.0),
    (-2.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -2.0),
)

_KNIGHT_TABLE: _Table = (
    (-5.0, -4.0, -3.0, -3.0, -3.0, -3.0, -4.0, -5.0),
    (-4.0, -2.0, 0.0, 0.0, 0.0, 0.0, -2.0, -4.0),
    (-3.0, 0.0, 1.0, 1.5, 1.5, 1.0, 0.0, -3.0),
    (-3.0, 0.5, 1.5, 2.0, 2.0, 1.5, 0.5, -3.0),
    (-3.0, 0.0, 1.5, 2.0, 2.0, 1.5, 0.0, -3.0),
    (-3.0, 0.5, 1.0, 1.5, 1.5, 1.0, 0.5, -3.0),
    (-4.0, -2.0, 0.0, 0.5, 0.5, 0.0, -2.0, -4.0),
    (-5.0, -4.0, -3.0, -3.0, -3.0, -3.0, -4.0, -5.0),
)

_ROOK_TABLE: _Table = (
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (-0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.5),
    (0.0, 0.0, 0.0, 0.5, 0.5, 0.0, 0.0, 0.0),
)

_PAWN_TABLE: _Table = (
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    (5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0),
    (1.0, 1.0, 2.0, 3.0, 3.0, 2.0, 1.0, 1.0),
    (0.5, 0.5, 1.0, 2.5, 2.5, 1.0, 0.5, 0.5),
    (0.0, 0.0, 0.0, 2.0, 2.0, 0.0, 0.0, 0.0),
    (0.5, -0.5, -1.0, 0.0, 0.0, -1.0, -0.5, 0.5),
    (0.5, 1.0, 1.0, -2.0, -2.0, 1.0, 1.0, 0.5),
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
)

PIECE_SQUARE_TABLES: dict[PieceType, _Table] = {
    PieceType.KING: _KING_TABLE,
    PieceType.QUEEN: _QUEEN_TABLE,
    PieceType.BISHOP: _BISHOP_TABLE,
    PieceType.KNIGHT: _KNIGHT_TABLE,
    PieceType.ROOK: _ROOK_TABLE,
    PieceType.PAWN: _PAWN_TABLE,
}


def piece_square_bonus(piece: Piece, sq: Square) -> float:
    rank = rank_of(sq)
    row = 7 - rank if piece.color == Color.WHITE else rank
    return PIECE_SQUARE_TABLES[piece.piece_type][row][file_of(sq)]


def piece_score(piece: Piece, sq: Square) -> float:
    """Material plus positional worth, positive for White, negative for Black."""
    score = PIECE_VALUES[piece.piece_type] + piece_square_bonus(piece, sq)
    return score if piece.color == Color.WHITE else -score


def evaluate(board: Board, perspective: Color) -> float:
    """Score of *board* seen from *perspective*; higher is better for it."""
    total = 0.0
    for sq, piece in board.items():
        total += piece_score(piece, sq)
    return total if perspective == Color.WHITE else -total
