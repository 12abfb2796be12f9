"""Level-based game engine composing board, snake, and food logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from term_snake.board import Board
from term_snake.config import GameConfig
from term_snake.food import FoodSet
from term_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GamePhase(enum.Enum):
    """Where the engine is in the level lifecycle."""

    LEVEL_START = "level_start"
    RUNNING = "running"
    LEVEL_WON = "level_won"
    GAME_LOST = "game_lost"
    GAME_COMPLETE = "game_complete"


class Outcome(enum.Enum):
    """Result of a single tick."""

    IN_PROGRESS = "in_progress"
    WIN = "win"
    LOSE = "lose"


class GameEngine:
    """Single-player, tick-based game engine.

    The engine owns the board, snake, and food set. :meth:`start_level`
    sets up a level and :meth:`step` advances it by one tick. A level is won
    once every food item is eaten; the game is complete after winning
    ``max_level`` levels and lost as soon as the snake runs into itself.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.board = Board()
        self.rng = np.random.default_rng(self.config.seed)

        self.score = 0
        self.level = 0
        self.speed_ms = self.config.initial_speed_ms
        self.ticks = 0
        self.phase = GamePhase.LEVEL_START
        self.snake = self._new_snake()
        self.food = FoodSet(self.board, rng=self.rng)

    @property
    def outcome(self) -> Outcome:
        if self.phase == GamePhase.GAME_LOST:
            return Outcome.LOSE
        if self.phase in (GamePhase.LEVEL_WON, GamePhase.GAME_COMPLETE):
            return Outcome.WIN
        return Outcome.IN_PROGRESS

    @property
    def is_complete(self) -> bool:
        """True once the last level has been reached."""
        return self.level >= self.config.max_level

    @property
    def finished(self) -> bool:
        return self.phase in (GamePhase.GAME_LOST, GamePhase.GAME_COMPLETE)

    def start_level(self) -> None:
        """Set up the next level with a fresh snake, food and faster ticks."""
        if self.phase not in (GamePhase.LEVEL_START, GamePhase.LEVEL_WON):
            raise RuntimeError(
                f"Cannot start a level while {self.phase.value}.",
            )
        self.snake = self._new_snake()
        self.food = FoodSet(self.board, rng=self.rng)
        self.food.spawn(self.config.food_count, excluding=self.snake.body)
        self.level += 1
        self.speed_ms = self.config.speed_for_level(self.level)
        self.phase = GamePhase.RUNNING
        logger.info(
            "Level %d started (tick %d ms, score %d).",
            self.level, self.speed_ms, self.score,
        )

    def set_direction(self, direction: Direction) -> bool:
        """Steer the snake; ignored unless a level is running."""
        if self.phase != GamePhase.RUNNING:
            return False
        return self.snake.set_direction(direction)

    def step(self) -> Outcome:
        """Advance the running level by one tick and classify the result."""
        if self.phase != GamePhase.RUNNING:
            return self.outcome

        self.ticks += 1
        self.snake.advance()

        # Eating and colliding are exclusive within one tick.
        if self.food.consume(self.snake.head):
            self.score += self.config.score_weight
            self.snake.grow()
        elif self.snake.self_collision():
            self.phase = GamePhase.GAME_LOST
            logger.info(
                "Snake collided at level %d, tick %d, score %d.",
                self.level, self.ticks, self.score,
            )
            return Outcome.LOSE

        if not self.food:
            if self.is_complete:
                self.phase = GamePhase.GAME_COMPLETE
                logger.info("Game complete with score %d.", self.score)
            else:
                self.phase = GamePhase.LEVEL_WON
                logger.info("Level %d cleared.", self.level)
            return Outcome.WIN

        return Outcome.IN_PROGRESS

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "phase": self.phase.value,
            "outcome": self.outcome.value,
            "level": self.level,
            "score": self.score,
            "speed_ms": self.speed_ms,
            "ticks": self.ticks,
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }

    def _new_snake(self) -> Snake:
        start_x, start_y = self.board.start
        return Snake(
            self.board, start_x, start_y,
            Direction.RIGHT, length=self.config.snake_length,
        )
