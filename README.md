# sleepypet

A desktop pet whose behaviour is driven by a finite state machine. The pet
idles, walks left and right, sleeps, jumps towards the nearer screen edge and
clings there, can be dragged with the mouse and falls back to the bottom of
the screen when released. If an `.mp3` file is dropped on it, it dances until
the music is stopped.

Everything runs on a virtual screen with a virtual millisecond clock, so the
pet's behaviour can be driven and checked step by step.

## Installation

```
pip install .
```

## The command

```
sleepypet
```

This places the pet near the bottom of a virtual 1920x1080 screen, runs it
for 60 simulated seconds and prints each state it enters, with the simulated
time, for example:

```
    0.0s  idle
    7.3s  walk_left
    9.3s  idle
```

The clock is virtual: the run finishes at once and does not wait in real
time. Options:

- `--seconds N`: how many simulated seconds to run (default 60, must not be
  negative).
- `--seed N`: seed for the random generator, for repeatable runs.
- `--screen WIDTHxHEIGHT`: size of the virtual screen (default `1920x1080`).

Run `sleepypet --help` to see them.

## Using it as a library

- `sleepypet.pet.Pet` is the pet. It takes mouse input through
  `press(x, y)`, `move_mouse(x, y, left_down)` and `release(left)`; a press
  held for 1000 ms (or a call to `allow_move()`) lets the mouse drag it, and
  releasing the left button makes it fall. `drag_enter(paths)` and
  `drop_files(paths)` react to `.mp3` files (case-insensitive); a drop asks
  the player to play the file and switches the pet to dancing.
  `stop_music()` stops the player and returns the pet to idle, and
  `start_move_to_bottom()` makes it fall. A `Pet` accepts any player object
  with `play(path)` and `stop()` methods.
- `sleepypet.pet.build_transition_table()` returns the
  `(State, TransitionEvent) -> State` table the pet uses, and
  `sleepypet.pet.main(argv=None)` is the command above.
- `sleepypet.machine.StateMachine` keeps one instance of every state named in
  a transition table and switches between them; `trigger(event)` returns
  whether a transition happened, and `current_state` gives the active state.
- `sleepypet.enums` defines `State` and `TransitionEvent`.
- `sleepypet.state.PetState` is the base class of a behaviour, with `enter`,
  `exit` and `update`. The built-in behaviours live in
  `sleepypet.ground_states` (`IdleState`, `WalkLeftState`, `WalkRightState`,
  `SleepState`, `PastimeState`, `CrawlState`, `CrawlIdleState`) and
  `sleepypet.airborne_states` (`DragLeftState`, `DragRightState`,
  `FallState`, `JumpState`).
- `sleepypet.factory.register_state(state)` is a class decorator that
  registers a state class with the factory returned by `default_factory()`;
  `StateFactory.create(state, machine)` builds one and raises `KeyError` for
  an unregistered state. The built-in states are registered when their
  modules are imported, which `sleepypet.pet` does.
- `sleepypet.transition.TransitionChooser(events, weights=None)` picks a
  random follow-up event with `choose(rng, ignore)`, optionally weighted, and
  never the ignored one. `random_left_point` and `random_right_point` give a
  walk target 300 to 399 pixels to either side, kept on screen.
- `sleepypet.animation.FrameAnimation` steps through a frame range
  (`step_cycle`) or a fixed frame sequence (`step_sequence`);
  `frame_name(frame)` gives the image file name of a frame, such as
  `shime4.png`.
- `sleepypet.behavior_tree` provides `Sequence`, `Selector`,
  `RandomSelector`, `Repeat` and `Action` nodes and a `BehaviorTree` to tick
  them; `sleepypet.move_node.MoveNode` is a leaf that steps a window towards
  random horizontal targets.
- `sleepypet.runtime` provides `Point`, `Rect`, `Window`, `Sprite`, a
  deterministic `Scheduler` (advanced by hand with `advance(ms)`), a
  repeating `Timer`, a straight-line `MoveAnimation`, and `Stage`, which
  bundles them for the states.

## What it does not do

The package does not open a real window, draw images or read the mouse; the
pet lives on the virtual screen, and what it shows is recorded in
`Stage.sprite` as frame numbers. It does not play audio either: the default
player only remembers the file it was asked to play, so actual playback
needs a player object supplied to `Pet`. There is no chat or assistant
feature.

## Tests

```
pip install .[test]
pytest
```