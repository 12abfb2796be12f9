"""Terminal display boundary and its curses implementation."""

from __future__ import annotations

import curses
import enum
import logging
import os
import threading
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

# Board frame plus the HUD rows above and below it.
MIN_COLUMNS = 62
MIN_ROWS = 24

_POLL_TIMEOUT_MS = 10
_ESCAPE_CODE = 27


class DisplayError(RuntimeError):
    """The terminal could not be set up for drawing."""


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    OTHER = "other"


class EventType(enum.Enum):
    KEY = "key"
    RESIZE = "resize"
    ERROR = "error"


@dataclass(frozen=True)
class Event:
    """A single input event from the display."""

    type: EventType
    key: Key | None = None
    error: BaseException | None = None


class Display(Protocol):
    """Minimal drawing surface and input source used by the game."""

    def init(self) -> None: ...

    def close(self) -> None: ...

    def clear(self) -> None: ...

    def set_cell(self, x: int, y: int, glyph: str) -> None: ...

    def flush(self) -> None: ...

    def poll_event(self) -> Event | None: ...


_KEY_CODES: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    _ESCAPE_CODE: Key.ESCAPE,
}


def translate_key(code: int) -> Event | None:
    """Map a curses key code to an :class:`Event`.

    Returns ``None`` when no key was pressed within the poll timeout.
    """
    if code == -1:
        return None
    if code == curses.KEY_RESIZE:
        return Event(EventType.RESIZE)
    return Event(EventType.KEY, _KEY_CODES.get(code, Key.OTHER))


class CursesDisplay:
    """A :class:`Display` drawn with the standard library's curses module.

    Input is polled from another thread than the one drawing, so every
    curses call goes through a lock.
    """

    def __init__(self, poll_timeout_ms: int = _POLL_TIMEOUT_MS) -> None:
        self.poll_timeout_ms = poll_timeout_ms
        self._screen: curses.window | None = None
        self._lock = threading.Lock()

    def init(self) -> None:
        """Switch the terminal into raw drawing mode."""
        # Report a lone ESC quickly instead of waiting for an escape sequence.
        os.environ.setdefault("ESCDELAY", "25")
        try:
            screen = curses.initscr()
        except curses.error as exc:
            raise DisplayError(f"Could not initialise terminal: {exc}") from exc

        self._screen = screen
        try:
            curses.noecho()
            curses.cbreak()
            screen.keypad(True)
            screen.timeout(self.poll_timeout_ms)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor.")
            rows, columns = screen.getmaxyx()
        except curses.error as exc:
            self.close()
            raise DisplayError(f"Could not configure terminal: {exc}") from exc

        if rows < MIN_ROWS or columns < MIN_COLUMNS:
            self.close()
            raise DisplayError(
                f"Terminal is {columns}x{rows}; "
                f"at least {MIN_COLUMNS}x{MIN_ROWS} is needed.",
            )
        logger.debug("Curses display ready (%dx%d).", columns, rows)

    def close(self) -> None:
        """Restore the terminal. Safe to call more than once."""
        with self._lock:
            screen, self._screen = self._screen, None
            if screen is None:
                return
            try:
                screen.keypad(False)
                curses.nocbreak()
                curses.echo()
            except curses.error:
                logger.debug("Terminal mode reset failed.", exc_info=True)
            curses.endwin()

    def clear(self) -> None:
        with self._lock:
            self._require_screen().erase()

    def set_cell(self, x: int, y: int, glyph: str) -> None:
        with self._lock:
            try:
                self._require_screen().addstr(y, x, glyph)
            except curses.error:
                # curses reports an error after writing the last screen cell.
                pass

    def flush(self) -> None:
        with self._lock:
            self._require_screen().refresh()

    def poll_event(self) -> Event | None:
        """Wait up to the poll timeout for a key press."""
        with self._lock:
            code = self._require_screen().getch()
        return translate_key(code)

    def _require_screen(self) -> curses.window:
        if self._screen is None:
            raise DisplayError("Display is not initialised.")
        return self._screen
