"""The bar of constellation slots along the bottom of the screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .geometry import Rect
from .seiza import MAX_SEIZA, Constellation, Zodiac

STACK_MAX = 12

FRAME_ALPHA = 155
ZODIAC_ALPHA = 205
BACKGROUND_ALPHA = 95


@dataclass
class StackSlot:
    """One slot: whether its background is shown and which colour (0 red, 1 blue)."""

    active: bool = False
    tex_num: int = 0


class StackBar:
    """Twelve slots showing which constellations are complete and who owns them."""

    def __init__(self, screen_width: float, screen_height: float):
        self.size = screen_width / 12.0
        self.pos_x = 0.0
        self.pos_y = screen_height - self.size
        self.slots = [StackSlot() for _ in range(STACK_MAX)]

    def update(self, constellations: Iterable[Constellation]) -> None:
        """Mark the slots of completed constellations in their owner's colour."""
        for slot, constellation in zip(self.slots[:MAX_SEIZA], constellations):
            if not constellation.is_connected:
                continue
            slot.active = True
            if constellation.belong == Zodiac.PLAYER_ONE:
                slot.tex_num = 0
            elif constellation.belong == Zodiac.PLAYER_TWO:
                slot.tex_num = 1

    def slot_rect(self, index: int) -> Rect:
        """Screen rectangle of slot ``index``."""
        if not 0 <= index < STACK_MAX:
            raise IndexError(f"slot {index} is out of range")
        left = self.pos_x + self.size * index
        return Rect(left, self.pos_y, left + self.size, self.pos_y + self.size)