"""Tests for Board, Piece and square helpers."""

import pytest

from chessbot.core.board import Board
from chessbot.core.enums import Color, PieceType
from chessbot.core.errors import BoundsError, InvariantViolation
from chessbot.core.piece import Piece
from chessbot.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    checked_square,
    parse_square,
    square_name,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == len(black) == 8
        assert all(8 <= sq < 16 for sq in white)  # rank 2
        assert all(48 <= sq < 56 for sq in black)  # rank 7

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_sixteen_pieces_each(self) -> None:
        board = Board.initial()
        assert len(board.occupied(Color.WHITE)) == 16
        assert len(board.occupied(Color.BLACK)) == 16
        board.validate()


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_piece_at_uses_file_and_rank(self) -> None:
        board = Board.initial()
        assert board.piece_at(4, 0) == Piece(Color.WHITE, PieceType.KING)
        assert board.piece_at(3, 7) == Piece(Color.BLACK, PieceType.QUEEN)
        assert board.piece_at(4, 3) is None

    @pytest.mark.parametrize("file, rank", [(-1, 0), (8, 0), (0, -1), (0, 8)])
    def test_piece_at_out_of_bounds(self, file: int, rank: int) -> None:
        with pytest.raises(BoundsError):
            Board.initial().piece_at(file, rank)

    def test_king_square_tracks_moves(self) -> None:
        board = Board.initial()
        king = board[E1]
        board[E1] = None
        board[E2] = king
        assert board.king_square(Color.WHITE) == E2

    def test_missing_king_raises(self) -> None:
        board = Board()
        with pytest.raises(InvariantViolation):
            board.king_square(Color.WHITE)

    def test_validate_rejects_two_kings(self) -> None:
        board = Board.initial()
        board[E4] = Piece(Color.WHITE, PieceType.KING)
        with pytest.raises(InvariantViolation):
            board.validate()

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E2] = None
        assert board[E2] is not None
        assert board != clone

    def test_equality(self) -> None:
        assert Board.initial() == Board.initial()
        assert Board() != Board.initial()

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.items()) == []

    def test_repr_diagram(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"


class TestPiece:
    def test_codes(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).code == 6
        assert Piece(Color.BLACK, PieceType.PAWN).code == -1

    def test_from_code(self) -> None:
        assert Piece.from_code(0) is None
        assert Piece.from_code(-4) == Piece(Color.BLACK, PieceType.ROOK)
        with pytest.raises(ValueError):
            Piece.from_code(7)

    def test_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"
        assert Piece.from_char("b") == Piece(Color.BLACK, PieceType.BISHOP)
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_name(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).name == "knight"


class TestSquares:
    def test_names(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert parse_square("e4") == E4
        assert parse_square("E4") == E4

    @pytest.mark.parametrize("name", ["i1", "a9", "a0", "e", "e44"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(BoundsError):
            parse_square(name)

    def test_checked_square(self) -> None:
        assert checked_square(4, 3) == E4
        with pytest.raises(BoundsError):
            checked_square(8, 8)

    def test_bounds_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            checked_square(-1, 0)
