"""Control loop merging clock ticks with keyboard input."""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable

from term_snake.display import Display, Event, EventType, Key
from term_snake.engine import GameEngine, GamePhase, Outcome
from term_snake.render import Renderer
from term_snake.snake import Direction

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You Won the Game!"
LOSE_MESSAGE = "Game Over!"

_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class InputError(RuntimeError):
    """The input source failed while the game was running."""


class Ticker:
    """Periodic clock built from explicit wake deadlines.

    The loop blocks until :meth:`remaining` has elapsed and then calls
    :meth:`fire`. A ticker keeps one interval for its whole life; a new one
    is made when the speed changes.
    """

    def __init__(
        self,
        interval_ms: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval_ms < 1:
            raise ValueError("interval_ms must be at least 1.")
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self.deadline = clock() + self.interval

    def due(self) -> bool:
        return self._clock() >= self.deadline

    def remaining(self) -> float:
        """Seconds left until the next tick, never negative."""
        return max(0.0, self.deadline - self._clock())

    def fire(self) -> None:
        """Schedule the following tick."""
        now = self._clock()
        self.deadline += self.interval
        # Drop missed ticks instead of firing them in a burst.
        if self.deadline <= now:
            self.deadline = now + self.interval


class InputPoller:
    """Background thread forwarding display events onto a queue."""

    def __init__(self, display: Display, events: queue.Queue[Event]) -> None:
        self.display = display
        self.events = events
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="input-poller", daemon=True,
        )

    def start(self) -> None:
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        self._stop.set()
        if self._thread.is_alive():
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                event = self.display.poll_event()
            except Exception as exc:
                if self._stop.is_set():
                    return
                logger.exception("Input polling failed.")
                self.events.put(Event(EventType.ERROR, error=exc))
                return
            if event is not None:
                self.events.put(event)


class GameLoop:
    """Runs a game from the first level to the end screen.

    Input events and clock ticks are handled one at a time on the thread
    that calls :meth:`run`, which is the only thread touching the engine.
    Only ticks advance the snake; arrow keys just steer it.
    """

    def __init__(
        self,
        engine: GameEngine,
        display: Display,
        renderer: Renderer | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.engine = engine
        self.display = display
        self.renderer = renderer if renderer is not None else Renderer(display)
        self.events: queue.Queue[Event] = queue.Queue()
        self._clock = clock

    def run(self) -> Outcome | None:
        """Play until the game ends or the player presses ESC.

        Returns the final outcome, or ``None`` when the player quit early.
        """
        poller = InputPoller(self.display, self.events)
        poller.start()
        try:
            outcome = self._play()
            if outcome is None:
                logger.info(
                    "Player quit at level %d with score %d.",
                    self.engine.level, self.engine.score,
                )
                return None
            self._show_result(outcome)
            return outcome
        finally:
            poller.stop()

    def _play(self) -> Outcome | None:
        engine = self.engine
        while True:
            engine.start_level()
            ticker = Ticker(engine.speed_ms, self._clock)
            self.renderer.draw(engine)

            while engine.phase == GamePhase.RUNNING:
                event = self._next_event(ticker)
                if event is None:
                    ticker.fire()
                    engine.step()
                elif not self._apply(event):
                    return None
                self.renderer.draw(engine)

            if engine.phase != GamePhase.LEVEL_WON:
                return engine.outcome

    def _next_event(self, ticker: Ticker) -> Event | None:
        """Block for the next input event, or ``None`` when a tick is due."""
        if ticker.due():
            return None
        try:
            return self.events.get(timeout=ticker.remaining())
        except queue.Empty:
            return None

    def _apply(self, event: Event) -> bool:
        """Handle one input event. Returns False when the player quits."""
        if event.type == EventType.ERROR:
            raise InputError("Input source failed.") from event.error
        if event.type != EventType.KEY:
            return True
        if event.key == Key.ESCAPE:
            return False
        direction = _KEY_DIRECTIONS.get(event.key)
        if direction is not None:
            self.engine.set_direction(direction)
        return True

    def _show_result(self, outcome: Outcome) -> None:
        message = WIN_MESSAGE if outcome == Outcome.WIN else LOSE_MESSAGE
        self.renderer.draw(self.engine, message)
        while True:
            event = self.events.get()
            if event.type == EventType.ERROR:
                raise InputError("Input source failed.") from event.error
            if event.type == EventType.RESIZE:
                self.renderer.draw(self.engine, message)
            elif event.key == Key.ESCAPE:
                return
