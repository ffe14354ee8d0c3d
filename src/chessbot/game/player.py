"""Player record: identity, score and optional bot configuration."""

from __future__ import annotations

import random
from dataclasses import dataclass

from chessbot.core.enums import Color
from chessbot.engine.minimax import MinimaxEngine
from chessbot.engine.random_mover import RandomMover
from chessbot.engine.search import MAX_DEPTH, IEngine, SearchLimits


@dataclass(frozen=True, slots=True)
class BotConfig:
    """How an automated player chooses moves.

    Args:
        depth: Plies searched after each candidate move ("difficulty").
        random_mode: Skip the search and play a random legal move.
    """

    depth: int = 1
    random_mode: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.depth <= MAX_DEPTH:
            raise ValueError(f"Bot depth must be in 1..{MAX_DEPTH}, got {self.depth}")

    @property
    def limits(self) -> SearchLimits:
        return SearchLimits(depth=self.depth)

    def make_engine(self, rng: random.Random | None = None) -> IEngine:
        if self.random_mode:
            return RandomMover(rng)
        return MinimaxEngine(rng)


@dataclass(slots=True)
class Player:
    """A participant. Humans have no ``bot`` configuration."""

    color: Color
    name: str = ""
    bot: BotConfig | None = None
    score: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"Player ({self.color})"

    @property
    def is_human(self) -> bool:
        return self.bot is None

    def add_points(self, points: int) -> None:
        self.score += points

    def reset(self) -> None:
        self.score = 0
