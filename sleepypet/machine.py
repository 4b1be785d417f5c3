"""State machine that moves the pet between behaviours through a transition table."""

from __future__ import annotations

from collections.abc import Mapping

from .enums import State, TransitionEvent
from .factory import StateFactory, default_factory
from .runtime import Stage
from .state import PetState

TransitionTable = Mapping[tuple[State, TransitionEvent], State]


class StateMachine:
    """Holds one instance of every state in the table and switches between them."""

    def __init__(
        self,
        stage: Stage,
        initial: State,
        table: TransitionTable,
        factory: StateFactory | None = None,
    ) -> None:
        self.stage = stage
        self.table: dict[tuple[State, TransitionEvent], State] = dict(table)
        factory = factory if factory is not None else default_factory()
        self.pool: dict[State, PetState] = {}
        for (source, _event), target in self.table.items():
            for state in (source, target):
                if state not in self.pool:
                    self.pool[state] = factory.create(state, self)
        if initial not in self.pool:
            raise KeyError(f"initial state {initial.name} is not in the transition table")
        self.current: PetState = self.pool[initial]
        self.current.enter(stage, State.IDLE)

    @property
    def current_state(self) -> State:
        return self.current.state_type

    def trigger(self, event: TransitionEvent) -> bool:
        """Follow the table from the current state; return whether a transition happened."""
        target = self.table.get((self.current.state_type, event))
        if target is None:
            return False
        previous = self.current.state_type
        self.current.exit()
        self.current = self.pool[target]
        self.current.enter(self.stage, previous)
        return True