"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from term_snake.board import Board, Position


class Direction(enum.Enum):
    """Headings with their (dx, dy) unit deltas in board cells."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    IDLE = (0, 0)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The body trails
    the head in the direction opposite to the initial heading.
    """

    def __init__(
        self,
        board: Board,
        start_x: int,
        start_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.board = board
        self.body: deque[Position] = deque()
        # An idle snake is still laid out horizontally.
        layout = Direction.RIGHT if direction is Direction.IDLE else direction
        dx, dy = layout.value
        for i in range(length):
            self.body.append(board.wrap(
                start_x - dx * board.x_step * i,
                start_y - dy * board.y_step * i,
            ))
        self.direction = direction
        self._vacated: Position | None = None

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def set_direction(self, new_direction: Direction) -> bool:
        """Change heading unless it reverses the current one.

        Returns True when the new heading was accepted.
        """
        if _OPPOSITES.get(new_direction) == self.direction:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> Position:
        """Compute the next head position without moving."""
        return self.board.step(self.head, self.direction)

    def advance(self) -> Position | None:
        """Move the snake one step forward.

        Each segment takes the place its predecessor held before the move.
        Returns the vacated tail cell, or ``None`` when idle.
        """
        if self.direction is Direction.IDLE:
            return None
        self.body.appendleft(self.next_head())
        self._vacated = self.body.pop()
        return self._vacated

    def grow(self) -> None:
        """Lengthen the snake by one segment at its tail.

        The new segment fills the cell the tail left on the last advance, so
        the body stays contiguous. Before any advance the tail is doubled up
        and separates on the next move.
        """
        tail = self._vacated if self._vacated is not None else self.body[-1]
        self.body.append(tail)
        self._vacated = None

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def self_collision(self) -> bool:
        """Check whether any two segments share a cell."""
        segments = list(self.body)
        for i, first in enumerate(segments):
            for second in segments[i + 1:]:
                if first == second:
                    return True
        return False

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
