"""States in which the pet is on the ground or clinging to a wall."""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from .animation import FrameAnimation
from .enums import State, TransitionEvent
from .factory import register_state
from .runtime import Point, Rect, Stage, Window
from .state import PetState
from .transition import TransitionChooser, random_left_point, random_right_point

_MIN_WAIT_MS = 5000
_MAX_WAIT_MS = 12000


def _near_edge(window: Window, screen: Rect) -> bool:
    """Whether the window is within two widths of either side of the screen."""
    margin = 2 * window.width
    return window.x <= margin or window.x >= screen.width - margin


class _GroundState(PetState):
    """A state that may fire one delayed action and stops the mover on exit."""

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self._pending: int | None = None

    def exit(self) -> None:
        super().exit()
        self._require_stage().mover.stop()
        self._cancel_pending()

    def _after_random_delay(self, callback: Callable[[], object]) -> None:
        stage = self._require_stage()
        self._cancel_pending()
        delay = stage.rng.randrange(_MIN_WAIT_MS, _MAX_WAIT_MS)

        def fire() -> None:
            self._pending = None
            callback()

        self._pending = stage.scheduler.call_later(delay, fire)

    def _cancel_pending(self) -> None:
        if self._pending is not None and self.stage is not None:
            self.stage.scheduler.cancel(self._pending)
        self._pending = None


class _RestingState(_GroundState):
    """Stands still for a while, then picks a random follow-up behaviour."""

    events: ClassVar[tuple[TransitionEvent, ...]] = ()

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.animation = FrameAnimation(interval=20)
        self.animation.set_range(1, 2)
        self.transitions = TransitionChooser(self.events)

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        self._play_animation()
        self._after_random_delay(self._auto_transition)

    def update(self) -> None:
        stage = self._require_stage()
        stage.sprite.show(self.animation.current, self.previous == State.WALK_RIGHT)

    def _auto_transition(self) -> None:
        stage = self._require_stage()
        if _near_edge(stage.window, stage.screen):
            self._trigger(self.transitions.choose(stage.rng))
        self._trigger(self.transitions.choose(stage.rng, TransitionEvent.TO_JUMP))


@register_state(State.IDLE)
class IdleState(_RestingState):
    """Standing still; jumping is only chosen near a screen edge."""

    events = (
        TransitionEvent.TO_WALK_LEFT,
        TransitionEvent.TO_WALK_RIGHT,
        TransitionEvent.TO_SLEEP,
        TransitionEvent.TO_JUMP,
    )


@register_state(State.CRAWL)
class CrawlState(_RestingState):
    """Crawling; moves on to sleep, or to a jump near a screen edge."""

    events = (
        TransitionEvent.TO_SLEEP,
        TransitionEvent.TO_JUMP,
    )


class _WalkState(_GroundState):
    """Walks sideways to a random point, then decides what to do next."""

    duration_ms: ClassVar[int] = 2000
    flipped: ClassVar[bool] = False

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.animation = FrameAnimation(interval=200)
        self.animation.set_range(1, 4)
        self.transitions = TransitionChooser(
            (TransitionEvent.TO_IDLE, TransitionEvent.TO_JUMP)
        )

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        target = self._target(stage)
        stage.mover.configure(stage.window.pos, target, self.duration_ms)
        stage.mover.on_finished(self._arrived)
        self._play_animation()
        stage.mover.start()

    def update(self) -> None:
        self._require_stage().sprite.show(self.animation.current, self.flipped)
        self.animation.step_cycle(restart=1)

    def _target(self, stage: Stage) -> Point:
        raise NotImplementedError

    def _at_edge(self, stage: Stage) -> bool:
        raise NotImplementedError

    def _arrived(self) -> None:
        if not self.is_current:
            return
        stage = self._require_stage()
        if self._at_edge(stage):
            self._trigger(self.transitions.choose(stage.rng))
            return
        self._trigger(TransitionEvent.TO_IDLE)


@register_state(State.WALK_LEFT)
class WalkLeftState(_WalkState):
    """Walking to the left."""

    duration_ms = 2000
    flipped = False

    def _target(self, stage: Stage) -> Point:
        return random_left_point(stage.window, stage.screen, stage.rng)

    def _at_edge(self, stage: Stage) -> bool:
        return stage.window.x <= 2 * stage.window.width


@register_state(State.WALK_RIGHT)
class WalkRightState(_WalkState):
    """Walking to the right, shown mirrored."""

    duration_ms = 3000
    flipped = True

    def _target(self, stage: Stage) -> Point:
        return random_right_point(stage.window, stage.screen, stage.rng)

    def _at_edge(self, stage: Stage) -> bool:
        return stage.window.x >= stage.screen.width - 2 * stage.window.width


@register_state(State.SLEEP)
class SleepState(_GroundState):
    """Sleeping for a while, then going idle."""

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.animation = FrameAnimation(interval=20)
        self.animation.set_range(11, 12)

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        self._play_animation()
        self._after_random_delay(lambda: self._trigger(TransitionEvent.TO_IDLE))

    def update(self) -> None:
        self._require_stage().sprite.show(self.animation.current)


@register_state(State.PASTIME)
class PastimeState(PetState):
    """Dancing along to music until told to stop."""

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.animation = FrameAnimation(interval=100)
        self.animation.set_range(15, 18)

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        self._play_animation()

    def update(self) -> None:
        self._require_stage().sprite.show(self.animation.current)
        self.animation.step_cycle()


@register_state(State.CRAWL_IDLE)
class CrawlIdleState(_GroundState):
    """Clinging to a screen edge, facing away from it."""

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.animation = FrameAnimation(interval=20)
        self.animation.set_range(12, 13)
        self.transitions = TransitionChooser(
            (TransitionEvent.TO_CRAWL, TransitionEvent.TO_CRAWL_IDLE)
        )

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        self._play_animation()
        self._after_random_delay(
            lambda: self._trigger(self.transitions.choose(self._require_stage().rng))
        )

    def update(self) -> None:
        stage = self._require_stage()
        flipped = stage.window.x > stage.screen.width // 2
        stage.sprite.show(self.animation.current, flipped)