"""High-level chess rules: checkmate, stalemate, draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessbot.core.enums import Color, EndReason, GameResult
from chessbot.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessbot.core.position import Position

# Plies without a pawn move or capture that end the game.
FIFTY_MOVE_PLIES = 50
REPETITION_LIMIT = 3


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Draws by rule are automatic: the game ends on the ply that reaches
    # the fifty-move threshold or the third occurrence of a position.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return MoveGenerator(position).is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).generate_legal_moves()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).generate_legal_moves()

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= FIFTY_MOVE_PLIES

    @staticmethod
    def is_threefold_repetition(position: Position) -> bool:
        return position.repetition_count() >= REPETITION_LIMIT

    @staticmethod
    def end_reason(position: Position) -> EndReason | None:
        """Why the game is over in *position*, or ``None`` if it is not."""
        gen = MoveGenerator(position)
        if not gen.generate_legal_moves():
            if gen.is_in_check(position.side_to_move):
                return EndReason.CHECKMATE
            return EndReason.STALEMATE
        if Rules.is_fifty_move_rule(position):
            return EndReason.FIFTY_MOVES
        if Rules.is_threefold_repetition(position):
            return EndReason.THREEFOLD_REPETITION
        return None

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        reason = Rules.end_reason(position)
        if reason is None:
            return GameResult.IN_PROGRESS
        if reason == EndReason.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW
