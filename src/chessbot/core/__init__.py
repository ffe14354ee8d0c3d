"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessbot.core import MoveGenerator, Position

    pos = Position()
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from chessbot.core.attacks import is_in_check, is_square_attacked
from chessbot.core.board import Board
from chessbot.core.enums import (
    CastlingRights,
    Color,
    EndReason,
    GameResult,
    MoveKind,
    PieceType,
)
from chessbot.core.errors import (
    BoundsError,
    ChessError,
    GameOverError,
    IllegalMoveError,
    InvariantViolation,
)
from chessbot.core.move import Move
from chessbot.core.move_generator import MoveGenerator
from chessbot.core.notation import (
    describe_move,
    format_coordinates,
    parse_coordinates,
    parse_promotion,
)
from chessbot.core.piece import Piece
from chessbot.core.position import Position
from chessbot.core.rules import Rules
from chessbot.core.types import (
    Square,
    checked_square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "EndReason",
    "GameResult",
    "MoveKind",
    "PieceType",
    # Errors
    "BoundsError",
    "ChessError",
    "GameOverError",
    "IllegalMoveError",
    "InvariantViolation",
    # Types / helpers
    "Square",
    "checked_square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "is_in_check",
    "is_square_attacked",
    # Notation
    "describe_move",
    "format_coordinates",
    "parse_coordinates",
    "parse_promotion",
]
