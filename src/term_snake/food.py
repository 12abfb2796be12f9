"""Food spawning and consumption."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from term_snake.board import Board, Position

logger = logging.getLogger(__name__)


class FoodSet:
    """The food items left on the board for the current level.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.positions: set[Position] = set()

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position: object) -> bool:
        return position in self.positions

    def __iter__(self) -> Iterator[Position]:
        return iter(sorted(self.positions))

    def spawn(
        self,
        count: int,
        excluding: Iterable[Position] = (),
    ) -> list[Position]:
        """Place *count* new food items by rejection sampling.

        Samples are drawn uniformly over the whole frame and kept only when
        they land on a free interior cell. Returns the new positions in the
        order they were accepted.
        """
        if count < 0:
            raise ValueError("count must be non-negative.")
        blocked = set(excluding) | self.positions
        free = self.board.interior_capacity - sum(
            1 for x, y in blocked if self.board.contains(x, y)
        )
        if count > free:
            raise ValueError(
                f"Cannot place {count} food items; only {free} free cells.",
            )

        board = self.board
        spawned: list[Position] = []
        rejected = 0
        while len(spawned) < count:
            x = int(self.rng.integers(board.left_x, board.right_x + 1))
            y = int(self.rng.integers(board.top_y, board.bottom_y + 1))
            if not board.contains(x, y) or (x, y) in blocked:
                rejected += 1
                continue
            blocked.add((x, y))
            self.positions.add((x, y))
            spawned.append((x, y))

        logger.debug(
            "Spawned %d food items (%d samples rejected).", count, rejected,
        )
        return spawned

    def consume(self, position: Position) -> bool:
        """Remove the food item at *position*. Returns True if one was there."""
        if position in self.positions:
            self.positions.remove(position)
            return True
        return False

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"positions": [list(p) for p in self]}
