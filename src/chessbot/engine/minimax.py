"""Fixed-depth minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
import random

from chessbot.core.enums import Color
from chessbot.core.move import Move
from chessbot.core.move_generator import MoveGenerator
from chessbot.core.position import Position
from chessbot.engine.evaluation import evaluate
from chessbot.engine.search import MATE_SCORE, IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

# Initial window of every root child; wider than any reachable score.
_WINDOW = 10_000.0


class MinimaxEngine(IEngine):
    """Searches every legal move to a fixed depth and picks the best.

    Scores are always from the point of view of the side to move at the
    root. Moves tying for the best score are chosen between with *rng*, so a
    seeded generator makes the choice reproducible.
    """

    __slots__ = ("_rng", "_nodes")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._nodes = 0

    def search(self, position: Position, limits: SearchLimits) -> SearchResult:
        """Choose a move for the side to move.

        Each root move is made and scored with :meth:`alpha_beta` to
        ``limits.depth`` further plies, using a fresh full window so that
        ties are exact. The position is restored before returning.
        """
        if limits.depth < 0:
            raise ValueError("Search depth must be >= 0")

        self._nodes = 0
        root_color = position.side_to_move
        root_gen = MoveGenerator(position)
        root_moves = root_gen.generate_legal_moves()
        if not root_moves:
            score = -MATE_SCORE if root_gen.is_in_check(root_color) else 0.0
            return SearchResult(None, score, limits.depth, self._nodes)

        for move in root_moves:
            if move.captures_king:
                return SearchResult(move, MATE_SCORE, limits.depth, self._nodes, 1)

        best_score = -_WINDOW
        best_moves: list[Move] = []
        for move in root_moves:
            position.make_move(move)
            score = self.alpha_beta(
                position, limits.depth, -_WINDOW, _WINDOW, False, root_color
            )
            position.unmake_move()

            if score > best_score:
                best_score = score
                best_moves = [move]
            elif score == best_score:
                best_moves.append(move)

        best_move = self._rng.choice(best_moves)
        _LOGGER.debug(
            "depth %d: %s scored %.1f (%d tied, %d nodes)",
            limits.depth,
            best_move,
            best_score,
            len(best_moves),
            self._nodes,
        )
        return SearchResult(
            best_move, best_score, limits.depth, self._nodes, len(best_moves)
        )

    def alpha_beta(
        self,
        position: Position,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        root_color: Color,
    ) -> float:
        """Minimax value of *position* searched *depth* plies deep.

        *maximizing* is true when the side to move is *root_color*. Siblings
        are skipped once ``alpha >= beta``.
        """
        if depth < 0:
            raise ValueError("Search depth must be >= 0")
        self._nodes += 1
        if depth == 0:
            return evaluate(position.board, root_color)

        gen = MoveGenerator(position)
        moves = gen.generate_legal_moves()
        if not moves:
            if not gen.is_in_check(position.side_to_move):
                return 0.0
            return -MATE_SCORE if maximizing else MATE_SCORE
        if any(move.captures_king for move in moves):
            return MATE_SCORE if maximizing else -MATE_SCORE

        if maximizing:
            best = -MATE_SCORE
            for move in moves:
                position.make_move(move)
                score = self.alpha_beta(
                    position, depth - 1, alpha, beta, False, root_color
                )
                position.unmake_move()
                best = max(best, score)
                alpha = max(alpha, best)
                if alpha >= beta:
                    break
            return best

        best = MATE_SCORE
        for move in moves:
            position.make_move(move)
            score = self.alpha_beta(position, depth - 1, alpha, beta, True, root_color)
            position.unmake_move()
            best = min(best, score)
            beta = min(beta, best)
            if alpha >= beta:
                break
        return best
