"""Gameplay configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from term_snake.board import Board


@dataclass(frozen=True)
class GameConfig:
    """Speed, scoring and level settings for a game.

    Tick intervals are in milliseconds. The interval shrinks by
    ``speed_step_ms`` at every level start but never drops below
    ``min_speed_ms``.
    """

    initial_speed_ms: int = 250
    speed_step_ms: int = 20
    min_speed_ms: int = 10
    food_count: int = 15
    score_weight: int = 10
    max_level: int = 10
    snake_length: int = 3
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.min_speed_ms < 1:
            raise ValueError("min_speed_ms must be at least 1.")
        if self.initial_speed_ms < self.min_speed_ms:
            raise ValueError("initial_speed_ms must be >= min_speed_ms.")
        if self.speed_step_ms < 0:
            raise ValueError("speed_step_ms must be >= 0.")
        if self.food_count < 1:
            raise ValueError("food_count must be at least 1.")
        if self.score_weight < 0:
            raise ValueError("score_weight must be >= 0.")
        if self.max_level < 1:
            raise ValueError("max_level must be at least 1.")
        if self.snake_length < 1:
            raise ValueError("snake_length must be at least 1.")

        board = Board()
        if self.snake_length > board.columns:
            raise ValueError("snake_length does not fit across the board.")
        if self.food_count + self.snake_length > board.interior_capacity:
            raise ValueError(
                "food_count does not fit the board next to the snake.",
            )

    def speed_for_level(self, level: int) -> int:
        """Return the tick interval used while playing *level*."""
        speed = self.initial_speed_ms - self.speed_step_ms * level
        return max(speed, self.min_speed_ms)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)
