"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessbot.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    An empty square is represented by ``None`` rather than by a piece.
    """

    color: Color
    piece_type: PieceType

    # ── Single-value encoding ────────────────────────────────────────────

    @property
    def code(self) -> int:
        """Signed code: positive for white, negative for black, 0 is empty."""
        value = int(self.piece_type)
        return value if self.color == Color.WHITE else -value

    @classmethod
    def from_code(cls, code: int) -> Piece | None:
        if code == 0:
            return None
        try:
            piece_type = PieceType(abs(code))
        except ValueError:
            raise ValueError(f"Invalid piece code: {code!r}") from None
        return cls(Color.WHITE if code > 0 else Color.BLACK, piece_type)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        piece_type = _TYPES_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)

    @property
    def name(self) -> str:
        """Lowercase type name, e.g. 'knight'."""
        return self.piece_type.name.lower()
