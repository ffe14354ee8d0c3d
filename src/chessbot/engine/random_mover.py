"""Engine that plays a uniformly random legal move."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from chessbot.core.enums import MoveKind, PieceType
from chessbot.core.move_generator import MoveGenerator
from chessbot.core.position import Position
from chessbot.engine.evaluation import evaluate
from chessbot.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class RandomMover(IEngine):
    """Weak bot: no search at all, and a random piece on promotion."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def search(
        self, position: Position, limits: SearchLimits | None = None
    ) -> SearchResult:
        moves = MoveGenerator(position).generate_legal_moves()
        score = evaluate(position.board, position.side_to_move)
        if not moves:
            return SearchResult(None, score, 0, 0)

        move = self._rng.choice(moves)
        if move.kind == MoveKind.PROMOTION:
            move = replace(move, promotion=self._rng.choice(_PROMOTION_TYPES))
        _LOGGER.debug("random pick %s out of %d", move, len(moves))
        return SearchResult(move, score, 0, 1, len(moves))
