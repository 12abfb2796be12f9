"""Draws the game onto a display."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from term_snake.display import Display
    from term_snake.engine import GameEngine

HEAD_GLYPH = "@"
BODY_GLYPH = "*"
FOOD_GLYPH = "♥"
HELP_TEXT = "Press ESC to exit the game"

# Box-drawing corners and edges.
_TOP_LEFT = "┌"
_TOP_RIGHT = "┐"
_BOTTOM_LEFT = "└"
_BOTTOM_RIGHT = "┘"
_HORIZONTAL = "─"
_VERTICAL = "│"


class Renderer:
    """Paints a full frame of the game on every call to :meth:`draw`."""

    def __init__(self, display: Display) -> None:
        self.display = display

    def draw(self, engine: GameEngine, message: str | None = None) -> None:
        """Redraw everything and flush, optionally with a centred message."""
        board = engine.board
        self.display.clear()

        self.draw_text(board.left_x + 1, board.top_y - 1, f"Level: {engine.level}")
        self.draw_text(board.right_x - 11, board.top_y - 1, f"Score: {engine.score}")
        self._draw_box(engine)

        for idx, (x, y) in enumerate(engine.snake.body):
            self.display.set_cell(x, y, HEAD_GLYPH if idx == 0 else BODY_GLYPH)
        for x, y in engine.food:
            self.display.set_cell(x, y, FOOD_GLYPH)

        self.draw_text(board.left_x + 1, board.bottom_y + 2, HELP_TEXT)
        if message:
            width = board.right_x - board.left_x
            x = board.left_x + (width - len(message)) // 2 + 1
            self.draw_text(x, board.start[1], message)

        self.display.flush()

    def draw_text(self, x: int, y: int, text: str) -> None:
        for offset, ch in enumerate(text):
            self.display.set_cell(x + offset, y, ch)

    def _draw_box(self, engine: GameEngine) -> None:
        board = engine.board
        top, bottom = board.top_y, board.bottom_y
        left, right = board.left_x, board.right_x

        for x in range(left + 1, right):
            self.display.set_cell(x, top, _HORIZONTAL)
            self.display.set_cell(x, bottom, _HORIZONTAL)
        for y in range(top + 1, bottom):
            self.display.set_cell(left, y, _VERTICAL)
            self.display.set_cell(right, y, _VERTICAL)

        self.display.set_cell(left, top, _TOP_LEFT)
        self.display.set_cell(right, top, _TOP_RIGHT)
        self.display.set_cell(left, bottom, _BOTTOM_LEFT)
        self.display.set_cell(right, bottom, _BOTTOM_RIGHT)
