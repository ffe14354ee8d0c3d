"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessbot.core.move import Move
    from chessbot.core.position import Position

# Score of a won (positive) or lost (negative) terminal position. Static
# evaluations stay far below it in magnitude.
MATE_SCORE = 9999.0
MAX_DEPTH = 5


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    depth: int = 1


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine."""

    best_move: Move | None
    score: float
    depth: int
    nodes: int
    candidates: int = 0


class IEngine(Protocol):
    """Protocol for move choosers used by the game layer."""

    def search(self, position: Position, limits: SearchLimits) -> SearchResult: ...
