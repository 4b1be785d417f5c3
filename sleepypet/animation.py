"""Frame bookkeeping for the pet's sprite animations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


def frame_name(frame: int) -> str:
    """File name of the image for a frame number."""
    return f"shime{frame}.png"


@dataclass
class FrameAnimation:
    """Current frame of an animation played as a range or as a fixed sequence."""

    interval: float
    use_sequence: bool = False
    begin: int = 0
    end: int = 0
    sequence: list[int] = field(default_factory=list)
    intervals: list[float] = field(default_factory=list)
    current: int = 0
    cursor: int = 0

    def set_range(self, begin: int, end: int) -> None:
        self.begin = begin
        self.current = begin
        self.end = end

    def set_sequence(self, sequence: Sequence[int]) -> None:
        """Use a fixed frame sequence; an empty one changes nothing."""
        if sequence:
            self.sequence = list(sequence)
            self.current = self.sequence[0]
            self.cursor = 0

    def reset(self) -> None:
        if self.sequence:
            self.current = self.sequence[0]
            self.cursor = 0
        else:
            self.current = self.begin

    def step_sequence(self) -> int:
        """Advance along the sequence, holding on its last frame."""
        if not self.sequence:
            raise ValueError("animation has no frame sequence")
        self.cursor = min(self.cursor + 1, len(self.sequence) - 1)
        self.current = self.sequence[self.cursor]
        return self.current

    def step_cycle(self, restart: int | None = None) -> int:
        """Advance within the range, wrapping to `restart` (default: the first frame)."""
        if self.end == 0:
            raise ValueError("animation range has no end")
        self.current = (self.current + 1) % self.end
        if self.current == 0:
            self.current = self.begin if restart is None else restart
        return self.current