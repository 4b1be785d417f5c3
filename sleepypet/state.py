"""Base class for the pet's behaviour states."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from .animation import FrameAnimation
from .enums import State, TransitionEvent
from .runtime import Stage

if TYPE_CHECKING:
    from .machine import StateMachine


class PetState(ABC):
    """One behaviour of the pet: what it shows and how it moves while active."""

    state: ClassVar[State] = State.NONE

    def __init__(self, machine: StateMachine | None) -> None:
        self.machine = machine
        self.state_type: State = type(self).state
        self.animation: FrameAnimation | None = None
        self.stage: Stage | None = None
        self.previous: State | None = None

    @property
    def is_current(self) -> bool:
        """Whether the owning machine is in this state right now."""
        return self.machine is not None and self.machine.current is self

    def enter(self, stage: Stage, previous: State) -> None:
        """Take over the stage; `previous` is the state the machine came from."""
        self.stage = stage
        self.previous = previous

    def exit(self) -> None:
        """Stop the frame timer and rewind the animation."""
        stage = self._require_stage()
        stage.timer.stop()
        if self.animation is not None:
            self.animation.reset()

    @abstractmethod
    def update(self) -> None:
        """Show the current frame; run on every tick of the frame timer."""

    def _require_stage(self) -> Stage:
        if self.stage is None:
            raise RuntimeError(f"{type(self).__name__} has not been entered")
        return self.stage

    def _play_animation(self) -> None:
        stage = self._require_stage()
        if self.animation is None:
            raise RuntimeError(f"{type(self).__name__} has no animation")
        stage.timer.set_callback(self.update)
        stage.timer.start(self.animation.interval)

    def _trigger(self, event: TransitionEvent) -> bool:
        if self.machine is None:
            raise RuntimeError(f"{type(self).__name__} belongs to no state machine")
        return self.machine.trigger(event)