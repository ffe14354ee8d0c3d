"""Position — complete game state (board + metadata) with make/unmake."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from chessbot.core.board import Board
from chessbot.core.enums import CastlingRights, Color, MoveKind, PieceType
from chessbot.core.errors import InvariantViolation
from chessbot.core.move import Move
from chessbot.core.piece import Piece
from chessbot.core.types import Square, file_of, in_bounds, make_square, rank_of

# King destination file -> (rook origin file, rook destination file).
CASTLING_ROOK_FILES: dict[int, tuple[int, int]] = {
    6: (7, 5),  # short
    2: (0, 3),  # long
}


class Position:
    """Full game state: board, side to move, castling rights, halfmove clock
    and the history of applied moves.

    :meth:`make_move` appends a self-describing record to :attr:`history`
    before touching the board; :meth:`unmake_move` pops it and restores the
    previous state exactly (Command pattern). A supplied board must hold
    exactly one king per color.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "halfmove_clock",
        "_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        halfmove_clock: int = 0,
    ) -> None:
        if board is None:
            board = Board.initial()
        else:
            board.validate()
        self.board = board
        self.side_to_move = side_to_move
        self.castling = castling
        self.halfmove_clock = halfmove_clock
        self._history: list[Move] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> Move:
        """Apply *move* and return the history record that was appended."""
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise InvariantViolation(f"No piece on {move.from_sq}")
        if piece.color != self.side_to_move:
            raise InvariantViolation(f"{piece} moved out of turn")

        capture_sq = move.to_sq
        if move.kind == MoveKind.EN_PASSANT:
            capture_sq = make_square(file_of(move.to_sq), rank_of(move.from_sq))
        captured = board[capture_sq]

        promotion = None
        if move.kind == MoveKind.PROMOTION:
            promotion = move.promotion or PieceType.QUEEN

        record = replace(
            move,
            promotion=promotion,
            piece=piece,
            captured=captured,
            castling_before=self.castling,
            halfmove_before=self.halfmove_clock,
        )
        self._history.append(record)

        board[move.from_sq] = None
        if captured is not None:
            board[capture_sq] = None
        if promotion is not None:
            board[move.to_sq] = Piece(piece.color, promotion)
        else:
            board[move.to_sq] = piece

        if move.kind == MoveKind.CASTLING:
            self._slide_rook(move, back=False)

        if piece.piece_type in (PieceType.KING, PieceType.ROOK):
            self.castling &= ~CastlingRights.of(piece.color)

        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        self.side_to_move = self.side_to_move.opposite
        return record

    def unmake_move(self, move: Move | None = None) -> Move:
        """Undo the last :meth:`make_move` and return its record.

        When *move* is given it must equal the most recent record.
        """
        if not self._history:
            raise InvariantViolation("unmake_move called with empty history")
        record = self._history[-1]
        if move is not None and move != record:
            raise InvariantViolation(f"Cannot unmake {move}: last move was {record}")
        self._history.pop()

        self.side_to_move = self.side_to_move.opposite

        board = self.board
        board[record.to_sq] = None
        board[record.from_sq] = record.piece
        if record.kind == MoveKind.EN_PASSANT:
            ep_capture_sq = make_square(file_of(record.to_sq), rank_of(record.from_sq))
            board[ep_capture_sq] = record.captured
        else:
            board[record.to_sq] = record.captured

        if record.kind == MoveKind.CASTLING:
            self._slide_rook(record, back=True)

        assert record.castling_before is not None
        self.castling = record.castling_before
        self.halfmove_clock = record.halfmove_before
        return record

    def _slide_rook(self, move: Move, back: bool) -> None:
        rank = rank_of(move.from_sq)
        rook_from_file, rook_to_file = CASTLING_ROOK_FILES[file_of(move.to_sq)]
        rook_from = make_square(rook_from_file, rank)
        rook_to = make_square(rook_to_file, rank)
        if back:
            rook_from, rook_to = rook_to, rook_from
        rook = self.board[rook_from]
        if rook is None or rook.piece_type != PieceType.ROOK:
            raise InvariantViolation(f"Castling without a rook on {rook_from}")
        self.board[rook_to] = rook
        self.board[rook_from] = None

    # ── History queries ──────────────────────────────────────────────────

    @property
    def history(self) -> Sequence[Move]:
        """Applied move records, oldest first. Read-only view."""
        return self._history

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def en_passant_target(self) -> Square | None:
        """Square a pawn of the side to move may capture onto en passant.

        Only the immediately preceding move can create it: an opponent pawn
        advancing two ranks.
        """
        return _double_step_target(self.last_move)

    def has_castling_right(self, color: Color) -> bool:
        return bool(self.castling & CastlingRights.of(color))

    # ── Repetition ───────────────────────────────────────────────────────

    def repetition_count(self) -> int:
        """How many times the current position has occurred.

        Walks the history backwards, undoing each ply on a scratch board, and
        counts earlier positions with the same side to move whose placement,
        castling rights and en passant availability all match. The scan stops
        at the first castling move, pawn move or capture, since no earlier
        position can repeat across one.
        """
        current_ep = _en_passant_capturable(
            self.board, self.side_to_move, self.last_move
        )
        scratch = self.board.copy()
        count = 1
        history = self._history

        for index in range(len(history) - 1, -1, -1):
            record = history[index]
            if record.is_castling or record.is_pawn_move or record.is_capture:
                break
            scratch[record.to_sq] = None
            scratch[record.from_sq] = record.piece

            if (len(history) - index) % 2:
                continue
            previous = history[index - 1] if index else None
            if (
                record.castling_before == self.castling
                and scratch == self.board
                and _en_passant_capturable(scratch, self.side_to_move, previous)
                == current_ep
            ):
                count += 1
        return count

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy including history."""
        pos = Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            halfmove_clock=self.halfmove_clock,
        )
        pos._history = self._history.copy()
        return pos

    def reset(self) -> None:
        """Return to the standard starting position with an empty history."""
        self.board = Board.initial()
        self.side_to_move = Color.WHITE
        self.castling = CastlingRights.ALL
        self.halfmove_clock = 0
        self._history = []


def _double_step_target(move: Move | None) -> Square | None:
    if move is None or move.kind != MoveKind.NORMAL or not move.is_pawn_move:
        return None
    from_rank, to_rank = rank_of(move.from_sq), rank_of(move.to_sq)
    if abs(to_rank - from_rank) != 2:
        return None
    return make_square(file_of(move.from_sq), (from_rank + to_rank) // 2)


def _en_passant_capturable(
    board: Board, side: Color, last_move: Move | None
) -> Square | None:
    """En passant target if a pawn of *side* stands ready to take it."""
    target = _double_step_target(last_move)
    if target is None or last_move is None:
        return None
    rank = rank_of(last_move.to_sq)
    for file in (file_of(target) - 1, file_of(target) + 1):
        if not in_bounds(file, rank):
            continue
        if board[make_square(file, rank)] == Piece(side, PieceType.PAWN):
            return target
    return None
