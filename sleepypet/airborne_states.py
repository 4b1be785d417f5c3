"""States in which the pet is off the ground: dragged, falling or jumping."""

from __future__ import annotations

from typing import ClassVar

from .animation import FrameAnimation
from .enums import State, TransitionEvent
from .factory import register_state
from .runtime import Point, Stage, Timer
from .state import PetState


class _DragState(PetState):
    """Plays a short frame sequence once and holds its last frame."""

    frames: ClassVar[tuple[int, ...]] = ()

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.animation = FrameAnimation(interval=50)
        self.animation.set_sequence(self.frames)

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        self._play_animation()

    def update(self) -> None:
        self._require_stage().sprite.show(self.animation.current)
        self.animation.step_sequence()


@register_state(State.DRAG_LEFT)
class DragLeftState(_DragState):
    """Being dragged towards the left."""

    frames = (6, 8, 10)


@register_state(State.DRAG_RIGHT)
class DragRightState(_DragState):
    """Being dragged towards the right."""

    frames = (5, 7, 9)


@register_state(State.FALL)
class FallState(PetState):
    """Drops straight down to the bottom of the screen, then goes idle."""

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.fall_speed = 20
        self.animation = FrameAnimation(interval=10)
        self.animation.set_range(4, 5)

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        window, screen = stage.window, stage.screen
        floor = screen.height - window.height
        distance = floor - window.y
        duration = max(0, int(distance / self.fall_speed) * 100)
        stage.mover.configure(window.pos, Point(window.x, floor), duration)
        stage.mover.on_finished(self._landed)
        self._play_animation()
        stage.mover.start()

    def exit(self) -> None:
        super().exit()
        self._require_stage().mover.stop()

    def update(self) -> None:
        self._require_stage().sprite.show(self.animation.current)

    def _landed(self) -> None:
        if self.is_current:
            self._trigger(TransitionEvent.TO_IDLE)


@register_state(State.JUMP)
class JumpState(PetState):
    """Leaps along a parabola towards the nearer screen edge, then clings there."""

    move_interval_ms: ClassVar[int] = 20
    time_step: ClassVar[float] = 0.016

    def __init__(self, machine) -> None:
        super().__init__(machine)
        self.animation = FrameAnimation(interval=20)
        self.animation.set_range(12, 13)
        self.current_time = 0.0
        self.start_point = Point()
        self.high_point = Point()
        self.is_right_jump = False
        self._move_timer: Timer | None = None

    def enter(self, stage: Stage, previous: State) -> None:
        super().enter(stage, previous)
        self._ready_jump()
        self._play_animation()
        if self._move_timer is None or self._move_timer.scheduler is not stage.scheduler:
            self._move_timer = Timer(stage.scheduler)
            self._move_timer.set_callback(self._step_jump)
        self._move_timer.start(self.move_interval_ms)

    def exit(self) -> None:
        super().exit()
        self._require_stage().mover.stop()
        if self._move_timer is not None:
            self._move_timer.stop()

    def update(self) -> None:
        stage = self._require_stage()
        flipped = stage.window.x > stage.screen.width // 2
        stage.sprite.show(self.animation.current, flipped)

    def _ready_jump(self) -> None:
        stage = self._require_stage()
        window, screen = stage.window, stage.screen
        self.current_time = 0.0
        self.start_point = window.pos
        top = screen.height - window.height * 2
        if window.x > screen.width // 2:
            self.is_right_jump = True
            self.high_point = Point(screen.width - window.width // 2, top)
        else:
            self.is_right_jump = False
            self.high_point = Point(screen.left - window.width // 2, top)

    def _step_jump(self) -> None:
        stage = self._require_stage()
        self.current_time += self.time_step
        t = self.current_time
        h, k = self.high_point.x, self.high_point.y
        x_start, y_start = self.start_point.x, self.start_point.y
        a = 0.0 if x_start == h else (y_start - k) / (x_start - h) ** 2
        new_x = x_start + t * (h - x_start) * 2
        new_y = a * (new_x - h) ** 2 + k
        if (self.is_right_jump and new_x >= h) or (not self.is_right_jump and new_x <= h):
            self._trigger(TransitionEvent.TO_CRAWL_IDLE)
        stage.window.move(int(new_x), int(new_y))