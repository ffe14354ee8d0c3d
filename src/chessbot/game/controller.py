"""GameController — the central orchestrator of a chess game.

Coordinates: Players, engines, GameState, MoveGenerator.
Emits events via simple callbacks so a front end / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessbot.core.enums import Color, EndReason, GameResult, MoveKind, PieceType
from chessbot.core.errors import GameOverError, IllegalMoveError
from chessbot.core.move import Move
from chessbot.core.notation import parse_coordinates
from chessbot.core.piece import Piece
from chessbot.core.types import Square, checked_square
from chessbot.engine.search import IEngine
from chessbot.game.interfaces import GamePhase, IGameController
from chessbot.game.player import BotConfig, Player
from chessbot.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult, EndReason], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, applies them, keeps
    scores, asks engines for moves and notifies listeners.

    Everything runs synchronously on the caller's thread. The random source
    is shared by both engines; pass a seeded ``random.Random`` for
    reproducible games.
    """

    __slots__ = ("_state", "_players", "_engines", "_rng", "events")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._state = GameState()
        self._players: dict[Color, Player] = {}
        self._engines: dict[Color, IEngine] = {}
        self._rng = rng if rng is not None else random.Random()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def current_player(self) -> Player | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> Player | None:
        return self._players.get(color)

    def piece_at(self, file: int, rank: int) -> Piece | None:
        """Piece on zero-based (file, rank); raises BoundsError off the grid."""
        return self._state.position.board.piece_at(file, rank)

    def castling_right(self, color: Color) -> bool:
        return self._state.position.has_castling_right(color)

    def legal_moves(self) -> list[Move]:
        return self._state.legal_moves()

    def move_log(self) -> list[str]:
        """Every move so far, e.g. ``"Alice: pawn 'e2' to 'e4'"``."""
        lines: list[str] = []
        for record in self._state.move_history:
            player = self._players.get(record.color)
            name = player.name if player is not None else str(record.color)
            lines.append(f"{name}: {record.text}")
        return lines

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, white: Player, black: Player) -> None:
        if white.color != Color.WHITE or black.color != Color.BLACK:
            raise ValueError("Players must be given as (white, black)")
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._engines = {}
        self.reset()

    def reset(self) -> None:
        for player in self._players.values():
            player.reset()
        self._state.setup()
        if self._players:
            _LOGGER.info(
                "New game: %s vs %s",
                self._players[Color.WHITE].name,
                self._players[Color.BLACK].name,
            )

    def submit_move(
        self, move: Move, promotion: PieceType | None = None
    ) -> GameResult:
        # Matched on origin and destination only; the kind comes from the legal move.
        return self._submit_between(
            move.from_sq, move.to_sq, promotion or move.promotion
        )

    def submit_squares(
        self,
        from_file: int,
        from_rank: int,
        to_file: int,
        to_rank: int,
        promotion: PieceType | None = None,
    ) -> GameResult:
        """Apply the legal move between two zero-based (file, rank) squares."""
        from_sq = checked_square(from_file, from_rank)
        to_sq = checked_square(to_file, to_rank)
        return self._submit_between(from_sq, to_sq, promotion)

    def submit_coordinates(
        self, text: str, promotion: PieceType | None = None
    ) -> GameResult:
        """Apply a move written as ``"e2e4"`` (optionally ``"e7e8q"``)."""
        from_sq, to_sq, parsed_promotion = parse_coordinates(text)
        return self._submit_between(from_sq, to_sq, promotion or parsed_promotion)

    def engine_move(self) -> Move:
        """Move chosen for the side to move by its bot configuration.

        Human players get the default :class:`BotConfig` as a hint.
        """
        if self._state.is_game_over:
            raise GameOverError("The game is already over")
        color = self._state.side_to_move
        player = self._players.get(color)
        config = player.bot if player is not None and player.bot else BotConfig()

        engine = self._engines.get(color)
        if engine is None:
            engine = self._engines[color] = config.make_engine(self._rng)

        result = engine.search(self._state.position, config.limits)
        if result.best_move is None:
            raise GameOverError("No legal move available")
        return result.best_move

    def play_engine_move(self) -> Move:
        """Ask the engine for a move and apply it."""
        move = self.engine_move()
        self.submit_move(move)
        return move

    def undo_move(self) -> bool:
        record = self._state.undo_last_move()
        if record is None:
            return False
        player = self._players.get(record.color)
        if player is not None:
            player.add_points(-record.points)
        _LOGGER.debug("Undid %s", record.move)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _submit_between(
        self, from_sq: Square, to_sq: Square, promotion: PieceType | None
    ) -> GameResult:
        if self._state.is_game_over:
            raise GameOverError("The game is already over")
        for move in self._state.legal_moves():
            if move.from_sq == from_sq and move.to_sq == to_sq:
                return self._apply(move, promotion)
        raise IllegalMoveError(f"Illegal move: {Move(from_sq, to_sq)}")

    def _apply(self, move: Move, promotion: PieceType | None) -> GameResult:
        if move.kind == MoveKind.PROMOTION and promotion is not None:
            if promotion in (PieceType.PAWN, PieceType.KING):
                raise IllegalMoveError(f"Cannot promote to {promotion.name.lower()}")
            move = replace(move, promotion=promotion)

        record = self._state.apply_move(move)
        player = self._players.get(record.color)
        if player is not None:
            player.add_points(record.points)
        _LOGGER.debug("%s: %s", record.color, record.text)

        for cb in self.events.on_move:
            cb(record, self._state)

        state = self._state
        if state.phase == GamePhase.GAME_OVER and state.end_reason is not None:
            _LOGGER.info(
                "Game over after %d plies: %s (%s)",
                state.ply_count,
                state.result.name,
                state.end_reason.name,
            )
            for game_over_cb in self.events.on_game_over:
                game_over_cb(state.result, state.end_reason)
        return state.result
