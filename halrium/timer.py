"""The round timer, counted in frames at sixty frames per second."""

from __future__ import annotations

from typing import Iterable

from .score import digits as _digits
from .seiza import MAX_SEIZA, Constellation

FRAMES_PER_SECOND = 60
NUM_PLACE = 3
DEFAULT_SECONDS = 999
_MAX_SECONDS = 10**NUM_PLACE


class GameTimer:
    """Counts down the round and ends it when time runs out or every constellation is done."""

    def __init__(self):
        self.frames = DEFAULT_SECONDS * FRAMES_PER_SECOND
        self.enabled = True
        self.time_out = False
        self.shown_digits = self.digits()

    def update(self, constellations: Iterable[Constellation]) -> bool:
        """Advance one frame; return True on the frame the round ends."""
        ended = False
        if not self.time_out:
            tracked = list(constellations)[:MAX_SEIZA]
            if all(c.is_connected for c in tracked):
                self.time_out = True
                ended = True

        if not self.time_out:
            self.frames -= 1
            if self.frames < 0:
                self.time_out = True
                ended = True
            if self.frames < 0:
                self.frames = 0
            elif self.frames // FRAMES_PER_SECOND >= _MAX_SECONDS:
                self.frames = (_MAX_SECONDS - 1) * FRAMES_PER_SECOND

        self.shown_digits = self.digits()
        return ended

    def reset(self, seconds: int = DEFAULT_SECONDS) -> None:
        """Set the remaining time to ``seconds``."""
        self.frames = seconds * FRAMES_PER_SECOND

    def enable(self, flag: bool) -> None:
        """Switch the timer on or off."""
        self.enabled = flag

    def digits(self) -> list[int]:
        """Remaining whole seconds, rounded up, as digits most significant first."""
        seconds = (self.frames + FRAMES_PER_SECOND - 1) // FRAMES_PER_SECOND
        return _digits(seconds, NUM_PLACE)