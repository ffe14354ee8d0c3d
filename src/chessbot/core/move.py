"""Move value object and history record."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessbot.core.enums import CastlingRights, MoveKind, PieceType
from chessbot.core.piece import Piece
from chessbot.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    Two moves are equal when origin, destination and kind match. The
    remaining fields describe the move well enough to undo it: the generator
    fills ``piece`` and ``captured``, and :meth:`Position.make_move` stores
    the pre-move ``castling_before`` and ``halfmove_before`` snapshots in the
    history record it appends.
    """

    from_sq: Square
    to_sq: Square
    kind: MoveKind = MoveKind.NORMAL
    promotion: PieceType | None = field(default=None, compare=False)
    piece: Piece | None = field(default=None, compare=False)
    captured: Piece | None = field(default=None, compare=False)
    castling_before: CastlingRights | None = field(default=None, compare=False)
    halfmove_before: int = field(default=0, compare=False)

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_pawn_move(self) -> bool:
        return self.piece is not None and self.piece.piece_type == PieceType.PAWN

    @property
    def captures_king(self) -> bool:
        """Whether the move takes the opposing king (illegal-position fast path)."""
        return self.captured is not None and self.captured.piece_type == PieceType.KING

    @property
    def is_castling(self) -> bool:
        return self.kind == MoveKind.CASTLING

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
