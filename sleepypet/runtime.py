"""Screen geometry, a virtual clock, timers and movement used by the pet."""

from __future__ import annotations

import heapq
import itertools
import random
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class Point:
    """An integer screen position."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    @property
    def is_null(self) -> bool:
        return self.x == 0 and self.y == 0


@dataclass(frozen=True)
class Rect:
    """A rectangle whose right and bottom edges are inclusive pixels."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    def contains(self, point: Point) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom


@dataclass
class Window:
    """The pet's window: its top-left position and size."""

    x: int = 0
    y: int = 0
    width: int = 128
    height: int = 130

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)

    def move(self, x: int, y: int) -> None:
        self.x = int(x)
        self.y = int(y)


@dataclass
class Sprite:
    """What the pet currently shows: a frame number, possibly mirrored."""

    frame: int | None = None
    flipped: bool = False
    history: list[tuple[int, bool]] = field(default_factory=list)

    def show(self, frame: int, flipped: bool = False) -> None:
        self.frame = frame
        self.flipped = flipped
        self.history.append((frame, flipped))


class Scheduler:
    """A virtual millisecond clock that runs callbacks when time is advanced."""

    def __init__(self) -> None:
        self.now: float = 0
        self._queue: list[tuple[float, int, Callable[[], object]]] = []
        self._pending: set[int] = set()
        self._ids = itertools.count()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def call_later(self, delay_ms: float, callback: Callable[[], object]) -> int:
        if delay_ms < 0:
            raise ValueError("delay must not be negative")
        handle = next(self._ids)
        heapq.heappush(self._queue, (self.now + delay_ms, handle, callback))
        self._pending.add(handle)
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.discard(handle)

    def advance(self, ms: float) -> int:
        """Move the clock forward, running due callbacks in order; return how many ran."""
        if ms < 0:
            raise ValueError("cannot move the clock backwards")
        target = self.now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, handle, callback = heapq.heappop(self._queue)
            if handle not in self._pending:
                continue
            self._pending.discard(handle)
            self.now = due
            callback()
            fired += 1
        self.now = target
        return fired


class Timer:
    """A repeating timer with a single callback."""

    def __init__(self, scheduler: Scheduler) -> None:
        self.scheduler = scheduler
        self.interval: float | None = None
        self._callback: Callable[[], object] | None = None
        self._handle: int | None = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def set_callback(self, callback: Callable[[], object] | None) -> None:
        self._callback = callback

    def start(self, interval_ms: float) -> None:
        if interval_ms <= 0:
            raise ValueError("timer interval must be positive")
        self.stop()
        self.interval = interval_ms
        self._schedule()

    def stop(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def _schedule(self) -> None:
        self._handle = self.scheduler.call_later(self.interval, self._fire)

    def _fire(self) -> None:
        self._schedule()
        if self._callback is not None:
            self._callback()


class MoveAnimation:
    """Moves a window in a straight line over a given time."""

    def __init__(self, window: Window, scheduler: Scheduler, tick_ms: float = 16) -> None:
        self.window = window
        self.scheduler = scheduler
        self.tick_ms = tick_ms
        self.start_pos: Point | None = None
        self.end_pos: Point | None = None
        self.duration: float = 0
        self._listeners: list[Callable[[], object]] = []
        self._handle: int | None = None
        self._started_at: float = 0

    @property
    def running(self) -> bool:
        return self._handle is not None

    def configure(self, start: Point, end: Point, duration_ms: float) -> None:
        if duration_ms < 0:
            raise ValueError("duration must not be negative")
        self.start_pos = start
        self.end_pos = end
        self.duration = duration_ms

    def on_finished(self, callback: Callable[[], object]) -> None:
        """Add a listener for the end of a run; adding the same one twice has no effect."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def start(self) -> None:
        if self.start_pos is None or self.end_pos is None:
            raise RuntimeError("animation has not been configured")
        self.stop()
        self.window.move(self.start_pos.x, self.start_pos.y)
        self._started_at = self.scheduler.now
        self._handle = self.scheduler.call_later(min(self.tick_ms, self.duration), self._step)

    def stop(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def _step(self) -> None:
        elapsed = self.scheduler.now - self._started_at
        if elapsed >= self.duration:
            self._handle = None
            self.window.move(self.end_pos.x, self.end_pos.y)
            for listener in list(self._listeners):
                listener()
            return
        fraction = elapsed / self.duration
        x = round(self.start_pos.x + (self.end_pos.x - self.start_pos.x) * fraction)
        y = round(self.start_pos.y + (self.end_pos.y - self.start_pos.y) * fraction)
        self.window.move(x, y)
        remaining = self.duration - elapsed
        self._handle = self.scheduler.call_later(min(self.tick_ms, remaining), self._step)


class Stage:
    """Everything a state acts on: screen, window, sprite, clock, timer and mover."""

    def __init__(
        self,
        screen: Rect | None = None,
        window: Window | None = None,
        rng: random.Random | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.screen = screen if screen is not None else Rect(0, 0, 1920, 1080)
        self.window = window if window is not None else Window()
        self.rng = rng if rng is not None else random.Random()
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.sprite = Sprite()
        self.timer = Timer(self.scheduler)
        self.mover = MoveAnimation(self.window, self.scheduler)