"""Fixed arena geometry with wraparound on every edge."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from term_snake.snake import Direction

Position = tuple[int, int]

# Outer frame drawn by the renderer.
LEFT_X = 1
TOP_Y = 1
RIGHT_X = 60
BOTTOM_Y = 20

# Terminal cells are roughly twice as tall as they are wide.
X_STEP = 2
Y_STEP = 1


class Board:
    """The playable interior of the arena.

    Positions are ``(x, y)`` pairs in terminal cells. Columns advance two
    cells per move, so the interior only holds even columns. Anything that
    steps off one edge reappears on the first interior cell of the opposite
    edge.
    """

    def __init__(self) -> None:
        self.left_x = LEFT_X
        self.top_y = TOP_Y
        self.right_x = RIGHT_X
        self.bottom_y = BOTTOM_Y
        self.x_step = X_STEP
        self.y_step = Y_STEP

        # First even column clear of the left border glyph and its padding.
        self.min_x = self.left_x + 1 + self.x_step
        self.max_x = self.right_x - self.x_step
        self.min_y = self.top_y + self.y_step
        self.max_y = self.bottom_y - self.y_step

    @property
    def columns(self) -> int:
        return (self.max_x - self.min_x) // self.x_step + 1

    @property
    def rows(self) -> int:
        return (self.max_y - self.min_y) // self.y_step + 1

    @property
    def interior_capacity(self) -> int:
        """Number of distinct cells a snake segment or food item can occupy."""
        return self.columns * self.rows

    @property
    def start(self) -> Position:
        """Initial head position for a new snake."""
        return self.right_x // 2, self.bottom_y // 2

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate is a valid interior cell."""
        return (
            self.min_x <= x <= self.max_x
            and self.min_y <= y <= self.max_y
            and (x - self.min_x) % self.x_step == 0
        )

    def wrap(self, x: int, y: int) -> Position:
        """Fold coordinates back into the interior around the edges."""
        span_x = self.columns * self.x_step
        span_y = self.rows * self.y_step
        return (
            self.min_x + (x - self.min_x) % span_x,
            self.min_y + (y - self.min_y) % span_y,
        )

    def step(self, position: Position, direction: Direction) -> Position:
        """Move one cell along *direction* and wrap."""
        dx, dy = direction.value
        x, y = position
        return self.wrap(x + dx * self.x_step, y + dy * self.y_step)

    def to_dict(self) -> dict:
        """Serialize board geometry to a dictionary."""
        return {
            "frame": [self.left_x, self.top_y, self.right_x, self.bottom_y],
            "interior": [self.min_x, self.min_y, self.max_x, self.max_y],
            "step": [self.x_step, self.y_step],
        }
