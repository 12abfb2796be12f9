"""term-snake: a snake game for the terminal."""

from term_snake.board import Board
from term_snake.config import GameConfig
from term_snake.engine import GameEngine, GamePhase, Outcome
from term_snake.food import FoodSet
from term_snake.snake import Direction, Snake

__all__ = [
    "Board",
    "Direction",
    "FoodSet",
    "GameConfig",
    "GameEngine",
    "GamePhase",
    "Outcome",
    "Snake",
]
