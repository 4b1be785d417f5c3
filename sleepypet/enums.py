"""States of the pet and the events that move it between them."""

from enum import Enum


class State(Enum):
    """Behaviour state the pet can be in."""

    NONE = 0
    IDLE = 1
    WALK_LEFT = 2
    WALK_RIGHT = 3
    DRAG_LEFT = 4
    DRAG_RIGHT = 5
    FALL = 6
    PASTIME = 7
    SLEEP = 8
    JUMP = 9
    CRAWL_IDLE = 10
    CRAWL = 11


class TransitionEvent(Enum):
    """Event that asks the state machine to change state."""

    NONE = 0
    TO_WALK_LEFT = 1
    TO_WALK_RIGHT = 2
    TO_DRAG_LEFT = 3
    TO_DRAG_RIGHT = 4
    TO_FALL = 5
    TO_PASTIME = 6
    TO_IDLE = 7
    TO_SLEEP = 8
    TO_JUMP = 9
    TO_CRAWL_IDLE = 10
    TO_CRAWL = 11