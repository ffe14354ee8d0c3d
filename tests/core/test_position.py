"""Tests for Position make/unmake and history bookkeeping."""

import pytest

from chessbot.core.board import Board
from chessbot.core.enums import CastlingRights, Color, MoveKind, PieceType
from chessbot.core.errors import InvariantViolation
from chessbot.core.move import Move
from chessbot.core.move_generator import MoveGenerator
from chessbot.core.piece import Piece
from chessbot.core.position import Position
from chessbot.core.types import (
    A1, A7, A8, B1, C1, D1, D5, D6, D7, E1, E2, E3, E4, E5, E7, F1, F3, F6,
    G1, G8, H1,
)


def snapshot(pos: Position) -> tuple:
    return (
        pos.board.copy(),
        pos.side_to_move,
        pos.castling,
        pos.halfmove_clock,
        pos.ply_count,
        pos.en_passant_target,
    )


def assert_round_trip(pos: Position, move: Move) -> Move:
    before = snapshot(pos)
    record = pos.make_move(move)
    pos.unmake_move(record)
    assert snapshot(pos) == before, f"Failed for {move}"
    return record


class TestMakeUnmake:
    def test_side_switches(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        assert pos.side_to_move == Color.BLACK

    def test_unmake_restores_side(self) -> None:
        pos = Position()
        move = Move(E2, E4)
        pos.make_move(move)
        pos.unmake_move(move)
        assert pos.side_to_move == Color.WHITE

    def test_every_start_move_round_trips(self) -> None:
        pos = Position()
        for move in MoveGenerator(pos).generate_legal_moves():
            assert_round_trip(pos, move)

    def test_every_kiwipete_move_round_trips(self, build_position) -> None:
        pos = build_position(
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R",
            castling=CastlingRights.ALL,
        )
        for move in MoveGenerator(pos).generate_legal_moves():
            assert_round_trip(pos, move)

    def test_record_is_self_describing(self) -> None:
        pos = Position()
        record = pos.make_move(Move(E2, E4))
        assert record.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert record.captured is None
        assert record.castling_before == CastlingRights.ALL
        assert record.halfmove_before == 0
        assert pos.history[-1] is record

    def test_capture_is_normal_move(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        pos.make_move(Move(D7, D5))
        record = assert_round_trip(pos, Move(E4, D5))
        assert record.kind == MoveKind.NORMAL
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)

        pos.make_move(Move(E4, D5))
        assert pos.board[D5] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board[E4] is None

    def test_unmake_empty_history_raises(self) -> None:
        with pytest.raises(InvariantViolation):
            Position().unmake_move()

    def test_unmake_wrong_move_raises(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        with pytest.raises(InvariantViolation):
            pos.unmake_move(Move(D7, D5))

    def test_make_from_empty_square_raises(self) -> None:
        with pytest.raises(InvariantViolation):
            Position().make_move(Move(E4, E5))

    def test_make_out_of_turn_raises(self) -> None:
        with pytest.raises(InvariantViolation):
            Position().make_move(Move(E7, E5))


class TestSpecialMoves:
    def test_short_castling(self, build_position) -> None:
        pos = build_position("r3k2r/8/8/8/8/8/8/R3K2R", castling=CastlingRights.ALL)
        record = assert_round_trip(pos, Move(E1, G1, MoveKind.CASTLING))
        assert record.castling_before == CastlingRights.ALL

        pos.make_move(Move(E1, G1, MoveKind.CASTLING))
        assert pos.board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[H1] is None
        assert pos.board[E1] is None

    def test_long_castling(self, build_position) -> None:
        pos = build_position("r3k2r/8/8/8/8/8/8/R3K2R", castling=CastlingRights.ALL)
        assert_round_trip(pos, Move(E1, C1, MoveKind.CASTLING))

        pos.make_move(Move(E1, C1, MoveKind.CASTLING))
        assert pos.board[C1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[D1] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board[A1] is None
        assert pos.board[B1] is None

    def test_promotion(self, build_position) -> None:
        pos = build_position("4k3/P7/8/8/8/8/8/4K3")
        move = Move(A7, A8, MoveKind.PROMOTION, promotion=PieceType.KNIGHT)
        assert_round_trip(pos, move)
        assert pos.board[A7] == Piece(Color.WHITE, PieceType.PAWN)

        pos.make_move(move)
        assert pos.board[A8] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_promotion_defaults_to_queen(self, build_position) -> None:
        pos = build_position("4k3/P7/8/8/8/8/8/4K3")
        record = pos.make_move(Move(A7, A8, MoveKind.PROMOTION))
        assert record.promotion == PieceType.QUEEN
        assert pos.board[A8] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_en_passant(self, build_position) -> None:
        pos = build_position("4k3/3p4/8/4P3/8/8/8/4K3", side_to_move=Color.BLACK)
        pos.make_move(Move(D7, D5))
        ep = Move(E5, D6, MoveKind.EN_PASSANT)
        record = assert_round_trip(pos, ep)
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert pos.board[D5] == Piece(Color.BLACK, PieceType.PAWN)

        pos.make_move(ep)
        assert pos.board[D6] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board[D5] is None
        assert pos.board[E5] is None


class TestCastlingRightsUpdate:
    def test_king_move_removes_rights(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        pos.make_move(Move(E7, E5))
        pos.make_move(Move(E1, E2))
        assert not pos.has_castling_right(Color.WHITE)
        assert pos.has_castling_right(Color.BLACK)

    def test_rook_move_removes_the_right(self, build_position) -> None:
        pos = build_position("r3k2r/8/8/8/8/8/8/R3K2R", castling=CastlingRights.ALL)
        pos.make_move(Move(H1, G1))
        assert not pos.has_castling_right(Color.WHITE)
        # Moving the rook home keeps the right cleared; only unmake restores it.
        pos.make_move(Move(A8, A1))
        pos.make_move(Move(G1, H1))
        assert not pos.has_castling_right(Color.WHITE)
        assert not pos.has_castling_right(Color.BLACK)
        pos.unmake_move()
        pos.unmake_move()
        pos.unmake_move()
        assert pos.castling == CastlingRights.ALL

    def test_castling_removes_right(self, build_position) -> None:
        pos = build_position("r3k2r/8/8/8/8/8/8/R3K2R", castling=CastlingRights.ALL)
        pos.make_move(Move(E1, G1, MoveKind.CASTLING))
        assert pos.castling == CastlingRights.BLACK


class TestHalfmoveClock:
    def test_knight_move_increments(self) -> None:
        pos = Position()
        pos.make_move(Move(G1, F3))
        assert pos.halfmove_clock == 1
        pos.make_move(Move(G8, F6))
        assert pos.halfmove_clock == 2

    def test_pawn_move_resets(self) -> None:
        pos = Position()
        pos.make_move(Move(G1, F3))
        pos.make_move(Move(E7, E5))
        assert pos.halfmove_clock == 0

    def test_piece_capture_resets(self, build_position) -> None:
        pos = build_position("n3k3/8/8/8/8/8/8/R3K3", halfmove_clock=30)
        pos.make_move(Move(A1, A8))
        assert pos.halfmove_clock == 0
        pos.unmake_move()
        assert pos.halfmove_clock == 30

    def test_castling_increments(self, build_position) -> None:
        pos = build_position(
            "r3k2r/8/8/8/8/8/8/R3K2R",
            castling=CastlingRights.ALL,
            halfmove_clock=5,
        )
        pos.make_move(Move(E1, G1, MoveKind.CASTLING))
        assert pos.halfmove_clock == 6

    def test_unmake_restores_clock(self) -> None:
        pos = Position(halfmove_clock=17)
        pos.make_move(Move(E2, E4))
        pos.unmake_move()
        assert pos.halfmove_clock == 17


class TestEnPassantTarget:
    def test_set_by_double_step(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        assert pos.en_passant_target == E3

    def test_replaced_by_next_double_step(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        pos.make_move(Move(D7, D5))
        assert pos.en_passant_target == D6

    def test_cleared_by_other_move(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        pos.make_move(Move(G8, F6))
        assert pos.en_passant_target is None


class TestPositionUtilities:
    def test_copy_is_independent(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        clone = pos.copy()
        clone.make_move(Move(E7, E5))
        assert pos.ply_count == 1
        assert clone.ply_count == 2
        assert pos.board[E5] is None
        clone.unmake_move()
        clone.unmake_move()
        assert clone.board == Board.initial()

    def test_reset(self) -> None:
        pos = Position()
        pos.make_move(Move(E2, E4))
        pos.reset()
        assert pos.ply_count == 0
        assert pos.side_to_move == Color.WHITE
        assert pos.board == Board.initial()
        assert pos.last_move is None

    def test_board_without_king_rejected(self) -> None:
        with pytest.raises(InvariantViolation):
            Position(board=Board())

    def test_board_with_two_kings_rejected(self, build_position) -> None:
        with pytest.raises(InvariantViolation):
            build_position("4k3/8/8/8/4K3/8/8/4K3")
