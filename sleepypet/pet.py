"""The desktop pet: window, mouse handling, music and the state machine behind it."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence

from . import airborne_states, ground_states  # noqa: F401  (registers the states)
from .enums import State, TransitionEvent
from .machine import StateMachine
from .runtime import Point, Rect, Stage

LONG_PRESS_MS = 1000
START_X = 1100
MUSIC_SUFFIX = ".mp3"


def build_transition_table() -> dict[tuple[State, TransitionEvent], State]:
    """Which state each (state, event) pair leads to."""
    E = TransitionEvent
    return {
        (State.IDLE, E.TO_WALK_LEFT): State.WALK_LEFT,
        (State.IDLE, E.TO_WALK_RIGHT): State.WALK_RIGHT,
        (State.IDLE, E.TO_DRAG_LEFT): State.DRAG_LEFT,
        (State.IDLE, E.TO_DRAG_RIGHT): State.DRAG_RIGHT,
        (State.IDLE, E.TO_PASTIME): State.PASTIME,
        (State.IDLE, E.TO_SLEEP): State.SLEEP,
        (State.IDLE, E.TO_JUMP): State.JUMP,
        (State.WALK_LEFT, E.TO_IDLE): State.IDLE,
        (State.WALK_LEFT, E.TO_DRAG_LEFT): State.DRAG_LEFT,
        (State.WALK_LEFT, E.TO_DRAG_RIGHT): State.DRAG_RIGHT,
        (State.WALK_LEFT, E.TO_JUMP): State.JUMP,
        (State.WALK_RIGHT, E.TO_IDLE): State.IDLE,
        (State.WALK_RIGHT, E.TO_DRAG_LEFT): State.DRAG_LEFT,
        (State.WALK_RIGHT, E.TO_DRAG_RIGHT): State.DRAG_RIGHT,
        (State.WALK_RIGHT, E.TO_JUMP): State.JUMP,
        (State.JUMP, E.TO_CRAWL_IDLE): State.CRAWL_IDLE,
        (State.CRAWL_IDLE, E.TO_DRAG_LEFT): State.DRAG_LEFT,
        (State.CRAWL_IDLE, E.TO_DRAG_RIGHT): State.DRAG_RIGHT,
        (State.DRAG_LEFT, E.TO_DRAG_RIGHT): State.DRAG_RIGHT,
        (State.DRAG_LEFT, E.TO_FALL): State.FALL,
        (State.DRAG_RIGHT, E.TO_DRAG_LEFT): State.DRAG_LEFT,
        (State.DRAG_RIGHT, E.TO_FALL): State.FALL,
        (State.FALL, E.TO_IDLE): State.IDLE,
        (State.PASTIME, E.TO_IDLE): State.IDLE,
        (State.SLEEP, E.TO_IDLE): State.IDLE,
    }


class _RecordingPlayer:
    """A music player that only remembers what it was asked to play."""

    def __init__(self) -> None:
        self.source: str | None = None
        self.playing = False

    def play(self, path: str) -> None:
        self.source = path
        self.playing = True

    def stop(self) -> None:
        self.playing = False


def _is_music(path: str) -> bool:
    return str(path).lower().endswith(MUSIC_SUFFIX)


class Pet:
    """The pet window: dragged with a long left press, dances to dropped music."""

    def __init__(self, stage: Stage | None = None, player=None, start_x: int = START_X) -> None:
        self.stage = stage if stage is not None else Stage()
        self.player = player if player is not None else _RecordingPlayer()
        window = self.stage.window
        window.move(start_x, self.stage.screen.height - window.height)
        self.machine = StateMachine(self.stage, State.IDLE, build_transition_table())
        self.can_move = False
        self.can_behavior = True
        self.is_free = True
        self._long_press: int | None = None
        self._offset = Point()
        self._mouse = Point()

    @property
    def state(self) -> State:
        return self.machine.current_state

    @property
    def window(self):
        return self.stage.window

    def press(self, x: int, y: int) -> bool:
        """A mouse button went down at a screen position."""
        here = Point(x, y)
        self._mouse = here
        self._offset = here - self.window.pos
        self._cancel_long_press()
        self._long_press = self.stage.scheduler.call_later(LONG_PRESS_MS, self._long_press_done)
        self._stop_behavior()
        return True

    def move_mouse(self, x: int, y: int, left_down: bool) -> bool:
        """The mouse moved; drags the pet once a long press has allowed it."""
        if not (left_down and self.can_move):
            return False
        here = Point(x, y)
        target = here - self._offset
        self.window.move(target.x, target.y)
        horizontal = self._mouse.x - here.x
        if horizontal > 0:
            self.machine.trigger(TransitionEvent.TO_DRAG_LEFT)
        elif horizontal < 0:
            self.machine.trigger(TransitionEvent.TO_DRAG_RIGHT)
        self._mouse = here
        return True

    def release(self, left: bool = True) -> bool:
        """A mouse button came up; letting go of the left one drops the pet."""
        if not left:
            return False
        self._cancel_long_press()
        self.can_move = False
        self.machine.trigger(TransitionEvent.TO_FALL)
        return True

    def allow_move(self) -> None:
        self.can_move = True

    def drag_enter(self, paths: Iterable[str]) -> bool:
        """Files are dragged over the pet; accepted if any of them is music."""
        accepted = False
        for path in paths:
            if _is_music(path):
                self._stop_behavior()
                accepted = True
        return accepted

    def drop_files(self, paths: Iterable[str]) -> bool:
        """Files are dropped on the pet; music is played and the pet dances."""
        played = False
        for path in paths:
            if _is_music(path):
                self.player.play(str(path))
                self._stop_behavior()
                self.machine.trigger(TransitionEvent.TO_PASTIME)
                played = True
        return played

    def stop_music(self) -> None:
        self.player.stop()
        self.machine.trigger(TransitionEvent.TO_IDLE)

    def start_move_to_bottom(self) -> bool:
        return self.machine.trigger(TransitionEvent.TO_FALL)

    def _stop_behavior(self) -> None:
        self.machine.trigger(TransitionEvent.TO_IDLE)
        self.can_behavior = False

    def _long_press_done(self) -> None:
        self._long_press = None
        self.allow_move()

    def _cancel_long_press(self) -> None:
        if self._long_press is not None:
            self.stage.scheduler.cancel(self._long_press)
            self._long_press = None


def _screen_size(text: str) -> tuple[int, int]:
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("screen size must be positive")
    return width, height


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sleepypet", description="Run the pet on a virtual screen and report its states."
    )
    parser.add_argument("--seconds", type=float, default=60.0, help="how long to run")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--screen", type=_screen_size, default=(1920, 1080), help="screen size as WIDTHxHEIGHT"
    )
    args = parser.parse_args(argv)
    if args.seconds < 0:
        parser.error("--seconds must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    width, height = args.screen
    stage = Stage(screen=Rect(0, 0, width, height), rng=random.Random(args.seed))
    pet = Pet(stage)
    step_ms = 100
    total_ms = args.seconds * 1000
    last = pet.state
    print(f"{0.0:7.1f}s  {last.name.lower()}")
    elapsed = 0.0
    while elapsed < total_ms:
        delta = min(step_ms, total_ms - elapsed)
        stage.scheduler.advance(delta)
        elapsed += delta
        if pet.state is not last:
            last = pet.state
            print(f"{elapsed / 1000:7.1f}s  {last.name.lower()}")
    return 0