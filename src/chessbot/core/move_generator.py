"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessbot.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
)
from chessbot.core.enums import Color, MoveKind, PieceType
from chessbot.core.move import Move
from chessbot.core.piece import Piece
from chessbot.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from chessbot.core.position import Position

_KING_HOME_FILE = 4


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`.

    The generator mutates the position via ``make_move`` / ``unmake_move``
    internally but always restores it before returning.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move.

        A move that captures the opposing king can only come from an illegal
        position; it is passed through untested so the search can score it.
        """
        legal: list[Move] = []
        moving_color = self._pos.side_to_move

        for move in self.generate_pseudo_legal_moves():
            if move.captures_king:
                legal.append(move)
                continue
            self._pos.make_move(move)
            if not is_in_check(self._board, moving_color):
                legal.append(move)
            self._pos.unmake_move()
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._pos.side_to_move

        for sq, piece in list(self._board.items()):
            if piece.color != color:
                continue
            piece_type = piece.piece_type
            if piece_type == PieceType.PAWN:
                self._gen_pawn(sq, piece, moves)
            elif piece_type == PieceType.KNIGHT:
                self._gen_step(sq, piece, KNIGHT_TARGETS[sq], moves)
            elif piece_type == PieceType.BISHOP:
                self._gen_sliding(sq, piece, BISHOP_RAYS[sq], moves)
            elif piece_type == PieceType.ROOK:
                self._gen_sliding(sq, piece, ROOK_RAYS[sq], moves)
            elif piece_type == PieceType.QUEEN:
                self._gen_sliding(sq, piece, QUEEN_RAYS[sq], moves)
            else:
                self._gen_step(sq, piece, KING_TARGETS[sq], moves)
                self._gen_castling(sq, piece, moves)
        return moves

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._board, color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, pawn: Piece, moves: list[Move]) -> None:
        board = self._board
        color = pawn.color
        step = 8 * color.forward
        last_rank = 7 if color == Color.WHITE else 0
        start_rank = 1 if color == Color.WHITE else 6
        file_idx = file_of(sq)
        if rank_of(sq) == last_rank:
            return

        one_step = sq + step
        if board.is_empty(one_step):
            moves.append(self._pawn_move(sq, one_step, pawn, None, last_rank))
            two_step = one_step + step
            if rank_of(sq) == start_rank and board.is_empty(two_step):
                moves.append(Move(sq, two_step, piece=pawn))

        ep_target = self._pos.en_passant_target
        for df in (-1, 1):
            if not 0 <= file_idx + df < 8:
                continue
            cap_sq = one_step + df
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    moves.append(self._pawn_move(sq, cap_sq, pawn, target, last_rank))
            elif cap_sq == ep_target:
                victim = board[make_square(file_of(cap_sq), rank_of(sq))]
                moves.append(
                    Move(sq, cap_sq, MoveKind.EN_PASSANT, piece=pawn, captured=victim)
                )

    @staticmethod
    def _pawn_move(
        sq: Square,
        to_sq: Square,
        pawn: Piece,
        captured: Piece | None,
        last_rank: int,
    ) -> Move:
        if rank_of(to_sq) == last_rank:
            return Move(
                sq,
                to_sq,
                MoveKind.PROMOTION,
                promotion=PieceType.QUEEN,
                piece=pawn,
                captured=captured,
            )
        return Move(sq, to_sq, piece=pawn, captured=captured)

    def _gen_step(
        self,
        sq: Square,
        piece: Piece,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq, piece=piece, captured=target))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq, piece=piece))
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq, piece=piece, captured=target))
                break

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Move]) -> None:
        """Short (to file 6) and long (to file 2) castling.

        Requires the castling right, the king on its home square and not in
        check, an own rook in the corner, empty squares in between and an
        unattacked square for the king to pass over. Landing in check is
        rejected later by the legality filter.
        """
        color = king.color
        if not self._pos.has_castling_right(color):
            return
        rank = 0 if color == Color.WHITE else 7
        if king_sq != make_square(_KING_HOME_FILE, rank):
            return
        if is_in_check(self._board, color):
            return

        board = self._board
        opponent = color.opposite
        rook = Piece(color, PieceType.ROOK)
        for rook_file, between_files, transit_file, to_file in (
            (7, (5, 6), 5, 6),
            (0, (1, 2, 3), 3, 2),
        ):
            if board[make_square(rook_file, rank)] != rook:
                continue
            if any(not board.is_empty(make_square(f, rank)) for f in between_files):
                continue
            if is_square_attacked(board, make_square(transit_file, rank), opponent):
                continue
            moves.append(
                Move(king_sq, make_square(to_file, rank), MoveKind.CASTLING, piece=king)
            )
