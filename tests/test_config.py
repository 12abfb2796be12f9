"""Tests for the game configuration dataclass."""

import pytest

from term_snake.config import GameConfig


class TestGameConfigDefaults:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.initial_speed_ms == 250
        assert cfg.speed_step_ms == 20
        assert cfg.food_count == 15
        assert cfg.score_weight == 10
        assert cfg.max_level == 10
        assert cfg.snake_length == 3
        assert cfg.seed is None

    def test_to_dict(self):
        d = GameConfig(seed=7).to_dict()
        assert d["seed"] == 7
        assert d["max_level"] == 10

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.score_weight = 5


class TestGameConfigSpeed:
    def test_speed_drops_each_level(self):
        cfg = GameConfig()
        assert cfg.speed_for_level(1) == 230
        assert cfg.speed_for_level(2) == 210
        assert cfg.speed_for_level(10) == 50

    def test_speed_is_floored(self):
        cfg = GameConfig(initial_speed_ms=50, speed_step_ms=20, min_speed_ms=15)
        assert cfg.speed_for_level(1) == 30
        assert cfg.speed_for_level(2) == 15
        assert cfg.speed_for_level(50) == 15


class TestGameConfigValidation:
    def test_rejects_bad_values(self):
        bad = [
            {"min_speed_ms": 0},
            {"initial_speed_ms": 5, "min_speed_ms": 10},
            {"speed_step_ms": -1},
            {"food_count": 0},
            {"score_weight": -10},
            {"max_level": 0},
            {"snake_length": 0},
        ]
        for kwargs in bad:
            with pytest.raises(ValueError):
                GameConfig(**kwargs)

    def test_snake_must_fit(self):
        with pytest.raises(ValueError, match="snake_length"):
            GameConfig(snake_length=40)

    def test_food_must_fit(self):
        with pytest.raises(ValueError, match="food_count"):
            GameConfig(food_count=10_000)
