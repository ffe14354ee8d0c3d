"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessbot.core.enums import Color, EndReason, GameResult, PieceType
from chessbot.core.move import Move
from chessbot.core.move_generator import MoveGenerator
from chessbot.core.notation import describe_move
from chessbot.core.position import Position
from chessbot.core.rules import Rules
from chessbot.engine.evaluation import PIECE_VALUES
from chessbot.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    text: str
    was_check: bool = False
    points: int = 0

    @property
    def color(self) -> Color:
        assert self.move.piece is not None
        return self.move.piece.color


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history.

    This is a pure data/logic class — no I/O.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: EndReason | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self) -> None:
        """Initialise (or reset) the game to the standard starting position."""
        self.position.reset()
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = None
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check. ``points`` holds the
        material captured, plus the king's value when the move mates.
        """
        applied = self.position.make_move(move)
        points = 0
        if applied.captured is not None:
            points += PIECE_VALUES[applied.captured.piece_type]

        self._check_game_over()
        if self.end_reason == EndReason.CHECKMATE:
            points += PIECE_VALUES[PieceType.KING]

        record = MoveRecord(
            move=applied,
            text=describe_move(applied),
            was_check=Rules.is_in_check(self.position),
            points=points,
        )
        self.move_history.append(record)
        return record

    def undo_last_move(self) -> MoveRecord | None:
        """Undo the last move. Returns its record, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.position.unmake_move(record.move)

        if self.result != GameResult.IN_PROGRESS or self.end_reason is not None:
            self.result = GameResult.IN_PROGRESS
            self.end_reason = None
            self.phase = GamePhase.AWAITING_MOVE

        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        reason = Rules.end_reason(self.position)
        if reason is None:
            return
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
        if reason == EndReason.CHECKMATE:
            loser = self.position.side_to_move
            self.result = (
                GameResult.BLACK_WINS if loser == Color.WHITE else GameResult.WHITE_WINS
            )
        else:
            self.result = GameResult.DRAW
