"""Attack detection: is a square (or a king) attacked by the other side?

The lookup tables are built once at import time and never mutated.
"""

from __future__ import annotations

from chessbot.core.board import Board
from chessbot.core.enums import Color, PieceType
from chessbot.core.types import Square, file_of, in_bounds, make_square, rank_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        f, r = file_of(sq), rank_of(sq)
        targets.append(
            tuple(
                make_square(f + df, r + dr)
                for df, dr in offsets
                if in_bounds(f + df, r + dr)
            )
        )
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            f, r = file_of(sq) + df, rank_of(sq) + dr
            ray: list[Square] = []
            while in_bounds(f, r):
                ray.append(make_square(f, r))
                f += df
                r += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_sources(color: Color) -> tuple[tuple[Square, ...], ...]:
    """Squares from which a *color* pawn would attack each square."""
    sources: list[tuple[Square, ...]] = []
    for sq in range(64):
        f, r = file_of(sq), rank_of(sq) - color.forward
        sources.append(
            tuple(make_square(f + df, r) for df in (-1, 1) if in_bounds(f + df, r))
        )
    return tuple(sources)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_PAWN_SOURCES = (_build_pawn_sources(Color.WHITE), _build_pawn_sources(Color.BLACK))


# -- Public API -------------------------------------------------------------


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    for rays, attackers in (
        (ROOK_RAYS[sq], _ORTHOGONAL_ATTACKERS),
        (BISHOP_RAYS[sq], _DIAGONAL_ATTACKERS),
    ):
        for ray in rays:
            for to_sq in ray:
                piece = board[to_sq]
                if piece is None:
                    continue
                if piece.color == by_color and piece.piece_type in attackers:
                    return True
                break

    for piece_type, squares in (
        (PieceType.KNIGHT, KNIGHT_TARGETS[sq]),
        (PieceType.KING, KING_TARGETS[sq]),
        (PieceType.PAWN, _PAWN_SOURCES[by_color][sq]),
    ):
        for from_sq in squares:
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == piece_type
            ):
                return True

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(color), color.opposite)
