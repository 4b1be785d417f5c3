"""A behaviour-tree leaf that wanders the window sideways."""

from __future__ import annotations

import random

from .behavior_tree import Action, Status
from .runtime import MoveAnimation, Point, Rect, Scheduler, Window


class MoveNode(Action):
    """Steps the window towards a random horizontal target on each tick."""

    def __init__(
        self,
        window: Window,
        screen: Rect,
        scheduler: Scheduler,
        rng: random.Random | None = None,
        step: int = 1,
    ) -> None:
        super().__init__()
        self.window = window
        self.screen = screen
        self.rng = rng if rng is not None else random.Random()
        self.step = step
        self.target: Point | None = None
        self.can_move = True
        self.animation = MoveAnimation(window, scheduler)
        self.animation.on_finished(self._stop_moving)

    def move_towards_target(self) -> bool:
        """Move one step towards the target; True if it was already reached."""
        pos = self.window.pos
        dx = self.target.x - pos.x
        if dx == 0:
            return True
        direction = 1 if dx > 0 else -1
        self.window.move(pos.x + direction * min(self.step, abs(dx)), pos.y)
        return False

    def on_update(self) -> Status:
        pos = self.window.pos
        if self.target is None or self.target.is_null or pos == self.target:
            dx = self.rng.choice((-1, 1)) * self.rng.randint(50, 149)
            x = max(self.screen.left, min(pos.x + dx, self.screen.right - self.window.width))
            self.target = Point(x, pos.y)
        if self.move_towards_target():
            return Status.SUCCESS
        return Status.RUNNING

    def on_terminate(self) -> None:
        self.can_move = True
        end = self.target if self.target is not None else self.window.pos
        self.animation.configure(self.window.pos, end, 2000)
        self.animation.start()

    def _stop_moving(self) -> None:
        self.can_move = False