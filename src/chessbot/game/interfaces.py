"""Abstract interfaces for the game layer.

The boundary (console, GUI, tests) depends on :class:`IGameController`,
not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessbot.core.enums import GameResult, PieceType
    from chessbot.core.move import Move
    from chessbot.game.player import Player


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, white: Player, black: Player) -> None:
        """Set up a new game from the standard starting position."""

    @abstractmethod
    def reset(self) -> None:
        """Restart with the same players, clearing history and scores."""

    @abstractmethod
    def legal_moves(self) -> list[Move]:
        """Legal moves of the side to move."""

    @abstractmethod
    def submit_move(
        self, move: Move, promotion: PieceType | None = None
    ) -> GameResult:
        """Apply a legal move and return the result after it.

        Raises :class:`~chessbot.core.errors.IllegalMoveError` otherwise.
        """

    @abstractmethod
    def engine_move(self) -> Move:
        """Move the configured engine would play for the side to move."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
