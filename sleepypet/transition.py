"""Random choice of the next transition event and of walk targets."""

from __future__ import annotations

import itertools
import random
from collections.abc import Sequence

from .enums import TransitionEvent
from .runtime import Point, Rect, Window


class TransitionChooser:
    """Picks a follow-up event, optionally weighted, never the ignored one."""

    def __init__(
        self,
        events: Sequence[TransitionEvent],
        weights: Sequence[int] | None = None,
    ) -> None:
        self.events = list(events)
        self._ranges: list[tuple[int, int]] = []
        self._total = 0
        if weights is not None:
            weights = list(weights)
            if len(weights) != len(self.events):
                raise ValueError("one weight is needed for each event")
            if any(weight < 0 for weight in weights):
                raise ValueError("weights must not be negative")
            bounds = [0, *itertools.accumulate(weights)]
            self._ranges = list(zip(bounds, bounds[1:]))
            self._total = bounds[-1]

    def choose(
        self,
        rng: random.Random,
        ignore: TransitionEvent = TransitionEvent.NONE,
    ) -> TransitionEvent:
        if self._total > 0:
            roll = rng.randint(1, self._total)
            for event, (low, high) in zip(self.events, self._ranges):
                if low < roll <= high and event != ignore:
                    return event
        candidates = [event for event in self.events if event != ignore]
        if not candidates:
            raise ValueError("no transition event left to choose from")
        return rng.choice(candidates)


def _clamp_x(x: int, window: Window, screen: Rect) -> int:
    return max(screen.left, min(x, screen.right - window.width))


def random_left_point(window: Window, screen: Rect, rng: random.Random) -> Point:
    """A point 300 to 399 pixels left of the window, kept on screen."""
    dx = rng.randrange(300, 400)
    return Point(_clamp_x(window.x - dx, window, screen), window.y)


def random_right_point(window: Window, screen: Rect, rng: random.Random) -> Point:
    """A point 300 to 399 pixels right of the window, kept on screen."""
    dx = rng.randrange(300, 400)
    return Point(_clamp_x(window.x + dx, window, screen), window.y)