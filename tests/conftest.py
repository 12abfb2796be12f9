"""Shared test doubles for the display boundary."""

import time

import pytest

from term_snake.display import Event, EventType, Key


class ScriptedDisplay:
    """In-memory display that replays scripted input.

    Each script entry is ``(predicate, item)``. The item is handed out by
    :meth:`poll_event` once ``predicate(display)`` holds (``None`` means
    immediately). Exceptions in the script are raised instead of returned.
    """

    def __init__(self, script=()):
        self.script = list(script)
        self.cells = {}
        self.snapshot = {}
        self.frames = 0
        self.initialised = False
        self.closed = False

    def init(self):
        self.initialised = True

    def close(self):
        self.closed = True

    def clear(self):
        self.cells = {}

    def set_cell(self, x, y, glyph):
        self.cells[(x, y)] = glyph

    def flush(self):
        self.frames += 1
        self.snapshot = dict(self.cells)

    def poll_event(self):
        if self.script:
            predicate, item = self.script[0]
            if predicate is None or predicate(self):
                self.script.pop(0)
                if isinstance(item, Exception):
                    raise item
                return item
        time.sleep(0.001)
        return None

    def row_text(self, y):
        """Return the flushed glyphs on row *y*, left to right."""
        cells = self.snapshot
        return "".join(g for (x, row), g in sorted(cells.items()) if row == y)


def key(k):
    return Event(EventType.KEY, k)


@pytest.fixture()
def escape_display():
    """A display whose player presses ESC straight away."""
    return ScriptedDisplay([(None, key(Key.ESCAPE))])


@pytest.fixture()
def make_display():
    """Factory for :class:`ScriptedDisplay` instances."""
    return ScriptedDisplay
