"""Tests for Player and BotConfig."""

import random

import pytest

from chessbot.core.enums import Color
from chessbot.engine import MAX_DEPTH, MinimaxEngine, RandomMover
from chessbot.game.player import BotConfig, Player


class TestPlayer:
    def test_default_name(self) -> None:
        assert Player(Color.WHITE).name == "Player (white)"
        assert Player(Color.BLACK).name == "Player (black)"

    def test_custom_name(self) -> None:
        assert Player(Color.WHITE, "Alice").name == "Alice"

    def test_human_by_default(self) -> None:
        assert Player(Color.WHITE).is_human
        assert not Player(Color.BLACK, bot=BotConfig()).is_human

    def test_score(self) -> None:
        player = Player(Color.WHITE)
        player.add_points(30)
        player.add_points(10)
        assert player.score == 40
        player.reset()
        assert player.score == 0


class TestBotConfig:
    def test_defaults(self) -> None:
        config = BotConfig()
        assert config.depth == 1
        assert not config.random_mode
        assert config.limits.depth == 1

    @pytest.mark.parametrize("depth", [0, MAX_DEPTH + 1, -3])
    def test_depth_validated(self, depth: int) -> None:
        with pytest.raises(ValueError):
            BotConfig(depth=depth)

    def test_engine_kind(self) -> None:
        rng = random.Random(0)
        assert isinstance(BotConfig(depth=2).make_engine(rng), MinimaxEngine)
        assert isinstance(BotConfig(random_mode=True).make_engine(rng), RandomMover)
