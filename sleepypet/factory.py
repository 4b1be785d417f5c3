"""Registry that builds behaviour states by their enum value."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from .enums import State
from .state import PetState

if TYPE_CHECKING:
    from .machine import StateMachine

Creator = Callable[["StateMachine | None"], PetState]
_S = TypeVar("_S", bound=type[PetState])


class StateFactory:
    """Maps each state to a function that builds it for a machine."""

    def __init__(self) -> None:
        self.registry: dict[State, Creator] = {}

    def __contains__(self, state: object) -> bool:
        return state in self.registry

    def register(self, state: State, creator: Creator) -> None:
        self.registry[state] = creator

    def create(self, state: State, machine: StateMachine | None) -> PetState:
        try:
            creator = self.registry[state]
        except KeyError:
            raise KeyError(f"no state registered for {state.name}") from None
        return creator(machine)


_default = StateFactory()


def default_factory() -> StateFactory:
    """The factory that the built-in states register themselves in."""
    return _default


def register_state(state: State) -> Callable[[_S], _S]:
    """Class decorator: give the class its state and register it by default."""

    def decorator(cls: _S) -> _S:
        cls.state = state
        _default.register(state, cls)
        return cls

    return decorator