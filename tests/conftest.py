"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessbot.core.board import Board
from chessbot.core.enums import CastlingRights, Color
from chessbot.core.piece import Piece
from chessbot.core.position import Position
from chessbot.core.types import make_square

PositionBuilder = Callable[..., Position]


def board_from_placement(placement: str) -> Board:
    """Board from a placement string, eighth rank first, e.g. ``"4k3/8/.../4K3"``.

    Digits count empty squares, letters are pieces (uppercase = white).
    """
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Expected 8 ranks, got {len(rows)}: {placement!r}")
    board = Board()
    for row_index, row in enumerate(rows):
        rank = 7 - row_index
        file = 0
        for char in row:
            if char.isdigit():
                file += int(char)
                continue
            board[make_square(file, rank)] = Piece.from_char(char)
            file += 1
        if file != 8:
            raise ValueError(f"Rank {rank + 1} has {file} files: {row!r}")
    return board


def position_from_placement(
    placement: str,
    side_to_move: Color = Color.WHITE,
    castling: CastlingRights = CastlingRights.NONE,
    halfmove_clock: int = 0,
) -> Position:
    return Position(
        board=board_from_placement(placement),
        side_to_move=side_to_move,
        castling=castling,
        halfmove_clock=halfmove_clock,
    )


@pytest.fixture
def build_position() -> PositionBuilder:
    """Factory for positions that are not the standard starting layout."""
    return position_from_placement
