"""A small behaviour tree: composites, decorators and action leaves."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from enum import Enum


class Status(Enum):
    """Result of ticking a node."""

    SUCCESS = "success"
    FAILURE = "failure"
    RUNNING = "running"
    ABORTED = "aborted"
    INVALID = "invalid"


class Node(ABC):
    """Base node: runs its hooks around each tick."""

    def __init__(self) -> None:
        self.status = Status.INVALID

    @property
    def is_running(self) -> bool:
        return self.status is Status.RUNNING

    @property
    def is_failure(self) -> bool:
        return self.status is Status.FAILURE

    @property
    def is_success(self) -> bool:
        return self.status is Status.SUCCESS

    @property
    def is_terminated(self) -> bool:
        return self.status is Status.ABORTED

    def tick(self) -> Status:
        if not self.is_running:
            self.on_initialize()
        self.status = self.on_update()
        if not self.is_running:
            self.on_terminate()
        return self.status

    def reset(self) -> None:
        self.status = Status.INVALID

    def abort(self) -> None:
        self.on_terminate()
        self.status = Status.ABORTED

    def add_child(self, child: Node) -> None:
        raise TypeError(f"{type(self).__name__} cannot hold children")

    def on_initialize(self) -> None:
        """Called before a tick that does not continue a running one."""

    def on_terminate(self) -> None:
        """Called after a tick that leaves the node no longer running."""

    @abstractmethod
    def on_update(self) -> Status:
        """Do the node's work and report its status."""


class Composite(Node):
    """A node with an ordered list of children."""

    def __init__(self, children: Iterable[Node] = ()) -> None:
        super().__init__()
        self.children: list[Node] = list(children)

    def add_child(self, child: Node) -> None:
        self.children.append(child)

    def add_children(self, children: Iterable[Node]) -> None:
        """Replace the children."""
        self.children = list(children)


class Sequence(Composite):
    """Ticks children in order until one does not succeed."""

    def __init__(self, children: Iterable[Node] = ()) -> None:
        super().__init__(children)
        self._index = 0

    def on_initialize(self) -> None:
        self._index = 0

    def on_update(self) -> Status:
        while self._index < len(self.children):
            status = self.children[self._index].tick()
            if status is not Status.SUCCESS:
                return status
            self._index += 1
        return Status.SUCCESS


class Selector(Sequence):
    """Ticks children in order until one does not fail."""

    def on_update(self) -> Status:
        while self._index < len(self.children):
            status = self.children[self._index].tick()
            if status is not Status.FAILURE:
                return status
            self._index += 1
        return Status.FAILURE


class RandomSelector(Sequence):
    """Ticks one random child, staying with it while it runs."""

    def __init__(self, children: Iterable[Node] = (), rng: random.Random | None = None) -> None:
        super().__init__(children)
        self.rng = rng if rng is not None else random.Random()

    def on_update(self) -> Status:
        if not self.children:
            return Status.FAILURE
        if self._index < len(self.children) and self.children[self._index].is_running:
            return self.children[self._index].tick()
        self._index = self.rng.randrange(len(self.children))
        return self.children[self._index].tick()


class Decorator(Node):
    """A node wrapping a single child."""

    def __init__(self, child: Node | None = None) -> None:
        super().__init__()
        self.child = child

    def set_child(self, child: Node) -> None:
        self.child = child

    def _require_child(self) -> Node:
        if self.child is None:
            raise RuntimeError(f"{type(self).__name__} has no child")
        return self.child


class Repeat(Decorator):
    """Repeats its child `limit` times; a limit of -1 repeats without end."""

    def __init__(self, limit: int, child: Node | None = None) -> None:
        if limit != -1 and limit < 1:
            raise ValueError("limit must be -1 or a positive count")
        super().__init__(child)
        self.limit = limit
        self.count = 0

    def on_initialize(self) -> None:
        self.count = 0

    def on_update(self) -> Status:
        child = self._require_child()
        while True:
            child.tick()
            if child.is_running:
                return Status.RUNNING
            if child.is_failure:
                return Status.FAILURE
            if child.is_success and self.limit == -1:
                continue
            self.count += 1
            if self.count == self.limit:
                return Status.SUCCESS


class Action(Node):
    """A leaf that runs a callable returning a status."""

    def __init__(self, action: Callable[[], Status] | None = None) -> None:
        super().__init__()
        self.action = action

    def set_action(self, action: Callable[[], Status]) -> None:
        self.action = action

    def on_update(self) -> Status:
        if self.action is None:
            raise RuntimeError("action node has no action")
        return self.action()


class BehaviorTree:
    """Holds a root node and ticks it."""

    def __init__(self, root: Node | None) -> None:
        self.root = root

    def tick(self) -> Status | None:
        if self.root is None:
            return None
        return self.root.tick()