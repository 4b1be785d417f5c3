import pytest

from sleepypet import airborne_states
from sleepypet.enums import State, TransitionEvent
from sleepypet.factory import StateFactory
from sleepypet.machine import StateMachine
from sleepypet.runtime import Stage
from sleepypet.state import PetState


class Recording(PetState):
    def __init__(self, machine, state):
        super().__init__(machine)
        self.state_type = state
        self.log = []

    def enter(self, stage, previous):
        super().enter(stage, previous)
        self.log.append(("enter", previous))

    def exit(self):
        super().exit()
        self.log.append(("exit", None))

    def update(self):
        self._require_stage().sprite.show(0)


TABLE = {
    (State.IDLE, TransitionEvent.TO_SLEEP): State.SLEEP,
    (State.SLEEP, TransitionEvent.TO_IDLE): State.IDLE,
    (State.IDLE, TransitionEvent.TO_WALK_LEFT): State.WALK_LEFT,
}


def make_factory(created):
    factory = StateFactory()
    for state in State:
        def creator(machine, state=state):
            created.append(state)
            return Recording(machine, state)

        factory.register(state, creator)
    return factory


def make_machine(initial=State.IDLE):
    created = []
    machine = StateMachine(Stage(), initial, TABLE, make_factory(created))
    return machine, created


def test_initial_state_entered_from_idle():
    machine, _ = make_machine(State.SLEEP)
    assert machine.current_state is State.SLEEP
    assert machine.current.log == [("enter", State.IDLE)]


def test_one_instance_per_state():
    machine, created = make_machine()
    states = {s for key in TABLE for s in (key[0], TABLE[key])}
    assert sorted(created, key=lambda s: s.value) == sorted(states, key=lambda s: s.value)
    assert set(machine.pool) == states


def test_trigger_follows_table():
    machine, _ = make_machine()
    idle = machine.current
    assert machine.trigger(TransitionEvent.TO_SLEEP) is True
    assert machine.current_state is State.SLEEP
    assert idle.log[-1] == ("exit", None)
    assert machine.current.log[-1] == ("enter", State.IDLE)


def test_trigger_without_entry_changes_nothing():
    machine, _ = make_machine()
    before = machine.current
    assert machine.trigger(TransitionEvent.TO_FALL) is False
    assert machine.current is before
    assert before.log == [("enter", State.IDLE)]


def test_states_are_reused():
    machine, _ = make_machine()
    idle = machine.current
    machine.trigger(TransitionEvent.TO_SLEEP)
    machine.trigger(TransitionEvent.TO_IDLE)
    assert machine.current is idle
    assert machine.current.previous is State.SLEEP


def test_states_know_their_machine():
    machine, _ = make_machine()
    assert all(state.machine is machine for state in machine.pool.values())
    assert machine.current.is_current


def test_initial_state_must_be_in_table():
    with pytest.raises(KeyError):
        make_machine(State.JUMP)


def test_unregistered_state_raises():
    with pytest.raises(KeyError):
        StateMachine(Stage(), State.IDLE, TABLE, StateFactory())


def test_default_factory_builds_registered_states():
    table = {
        (State.DRAG_LEFT, TransitionEvent.TO_DRAG_RIGHT): State.DRAG_RIGHT,
        (State.DRAG_RIGHT, TransitionEvent.TO_DRAG_LEFT): State.DRAG_LEFT,
    }
    machine = StateMachine(Stage(), State.DRAG_LEFT, table)
    assert type(machine.current) is airborne_states.DragLeftState
    assert machine.trigger(TransitionEvent.TO_DRAG_RIGHT)
    assert type(machine.current) is airborne_states.DragRightState