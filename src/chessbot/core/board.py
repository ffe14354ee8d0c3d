"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessbot.core.enums import Color, PieceType
from chessbot.core.errors import InvariantViolation
from chessbot.core.piece import Piece
from chessbot.core.types import Square, checked_square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board with a cached king square per color."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            if self._king_squares[old_piece.color] == sq:
                self._king_squares[old_piece.color] = None

        self._squares[sq] = piece
        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[piece.color] = sq

    def piece_at(self, file: int, rank: int) -> Piece | None:
        """Bounds-checked lookup by zero-based (file, rank)."""
        return self._squares[checked_square(file, rank)]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def items(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in a1..h8 order."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def occupied(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.items() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.items() if piece == target]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        sq = self._king_squares[color]
        if sq is None:
            raise InvariantViolation(f"No {color.name} king on board")
        return sq

    def validate(self) -> None:
        """Raise :class:`InvariantViolation` unless each side has exactly one king."""
        for color in Color:
            kings = self.pieces(color, PieceType.KING)
            if len(kings) != 1:
                raise InvariantViolation(
                    f"Expected one {color.name} king, found {len(kings)}"
                )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
