"""A desktop pet driven by a state machine of animated behaviours, on a virtual screen and clock."""

__version__ = "0.1.0"
__all__ = [
    "airborne_states",
    "animation",
    "behavior_tree",
    "enums",
    "factory",
    "ground_states",
    "machine",
    "move_node",
    "pet",
    "runtime",
    "state",
    "transition",
]