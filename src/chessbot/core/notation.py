"""Coordinate notation and the human-readable move log.

Moves are addressed at the boundary as origin file, origin rank, destination
file, destination rank, e.g. ``"e2e4"``. A trailing promotion letter
(``"e7e8n"``) is accepted as well.
"""

from __future__ import annotations

from chessbot.core.enums import MoveKind, PieceType
from chessbot.core.errors import BoundsError
from chessbot.core.move import Move
from chessbot.core.types import Square, file_of, parse_square, square_name

# Letters accepted for a promotion choice; 'k' is knight in the console
# prompt, 'n' its algebraic spelling.
PROMOTION_CHOICES: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "k": PieceType.KNIGHT,
    "n": PieceType.KNIGHT,
}


def parse_promotion(letter: str) -> PieceType:
    try:
        return PROMOTION_CHOICES[letter.lower()]
    except KeyError:
        raise ValueError(f"Invalid promotion choice: {letter!r}") from None


def parse_coordinates(text: str) -> tuple[Square, Square, PieceType | None]:
    """Parse ``"e2e4"``, ``"e2 e4"`` or ``"e7e8q"`` into squares and promotion."""
    compact = "".join(text.split())
    if len(compact) not in (4, 5):
        raise BoundsError(f"Invalid move coordinates: {text!r}")
    from_sq = parse_square(compact[0:2])
    to_sq = parse_square(compact[2:4])
    promotion = parse_promotion(compact[4]) if len(compact) == 5 else None
    return from_sq, to_sq, promotion


def format_coordinates(move: Move) -> str:
    """Boundary encoding of *move*, e.g. ``"e2e4"``."""
    return f"{square_name(move.from_sq)}{square_name(move.to_sq)}"


def describe_move(move: Move) -> str:
    """Move-log text for an applied move record.

    Examples: ``"pawn 'e2' to 'e4'"``, ``"castling short"``,
    ``"pawn 'd7' to rook 'c8' promoted to queen"``.
    """
    if move.kind == MoveKind.CASTLING:
        return "castling short" if file_of(move.to_sq) == 6 else "castling long"

    mover = move.piece.name if move.piece is not None else "piece"
    text = f"{mover} '{square_name(move.from_sq)}' to "
    if move.captured is not None and move.kind != MoveKind.EN_PASSANT:
        text += f"{move.captured.name} "
    text += f"'{square_name(move.to_sq)}'"

    if move.kind == MoveKind.PROMOTION and move.promotion is not None:
        text += f" promoted to {move.promotion.name.lower()}"
    elif move.kind == MoveKind.EN_PASSANT:
        text += " (en passant)"
    return text
