"""Game management layer — controller, players, state machine.

Quick start::

    from chessbot.core import Color
    from chessbot.game import BotConfig, GameController, Player

    ctrl = GameController()
    ctrl.new_game(
        white=Player(Color.WHITE, "Alice"),
        black=Player(Color.BLACK, "Bot", bot=BotConfig(depth=2)),
    )
    ctrl.submit_coordinates("e2e4")
    ctrl.play_engine_move()
"""

from chessbot.game.controller import GameController, GameEvents
from chessbot.game.interfaces import GamePhase, IGameController
from chessbot.game.player import BotConfig, Player
from chessbot.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "BotConfig",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "Player",
]
