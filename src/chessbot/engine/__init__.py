"""Chess engine package: evaluation, alpha-beta search and the random mover."""

from chessbot.engine.evaluation import PIECE_VALUES, evaluate
from chessbot.engine.minimax import MinimaxEngine
from chessbot.engine.random_mover import RandomMover
from chessbot.engine.search import (
    MATE_SCORE,
    MAX_DEPTH,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "MATE_SCORE",
    "MAX_DEPTH",
    "PIECE_VALUES",
    "IEngine",
    "MinimaxEngine",
    "RandomMover",
    "SearchLimits",
    "SearchResult",
    "evaluate",
]
