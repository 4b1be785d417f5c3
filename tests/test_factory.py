import pytest

from sleepypet import airborne_states
from sleepypet.enums import State
from sleepypet.factory import StateFactory, default_factory, register_state
from sleepypet.state import PetState


class Plain(PetState):
    def update(self):
        self._require_stage().sprite.show(0)


def test_register_and_create():
    factory = StateFactory()
    factory.register(State.IDLE, Plain)
    marker = object()
    created = factory.create(State.IDLE, marker)
    assert isinstance(created, Plain)
    assert created.machine is marker
    assert State.IDLE in factory


def test_unknown_state_raises():
    with pytest.raises(KeyError):
        StateFactory().create(State.JUMP, None)


def test_register_replaces_creator():
    factory = StateFactory()
    built = []
    factory.register(State.SLEEP, lambda m: built.append("first") or Plain(m))
    factory.register(State.SLEEP, lambda m: built.append("second") or Plain(m))
    factory.create(State.SLEEP, None)
    assert built == ["second"]


def test_default_factory_is_shared():
    first = default_factory()
    second = default_factory()
    assert first is second
    fall = airborne_states.FallState.state
    assert fall in first
    assert type(second.create(fall, None)) is airborne_states.FallState


def test_register_state_decorator():
    try:

        @register_state(State.NONE)
        class Marked(Plain):
            pass

        assert Marked.state is State.NONE
        created = default_factory().create(State.NONE, None)
        assert isinstance(created, Marked)
        assert created.state_type is State.NONE
    finally:
        default_factory().registry.pop(State.NONE, None)


@pytest.mark.parametrize(
    "cls",
    [
        airborne_states.DragLeftState,
        airborne_states.DragRightState,
        airborne_states.FallState,
        airborne_states.JumpState,
    ],
)
def test_builtin_states_are_registered(cls):
    created = default_factory().create(cls.state, None)
    assert type(created) is cls
    assert created.state_type is cls.state