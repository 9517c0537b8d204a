"""Glow markers placed on stars that a player has selected."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vec3

MAX_STAR_EFFECTS = 240
STAR_EFFECT_SIZE = 3.5 - 0.7


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float
    g: float
    b: float
    a: float


PLAYER_ONE_COLOR = Color(1.0, 0.0, 0.0, 0.4)
PLAYER_TWO_COLOR = Color(0.0, 0.0, 1.0, 0.4)


@dataclass
class StarEffect:
    """One glow marker."""

    pos: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    active: bool = False
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0, 0.5))


class StarEffects:
    """A fixed pool of glow markers."""

    def __init__(self):
        self.effects = [StarEffect() for _ in range(MAX_STAR_EFFECTS)]

    def place(self, pos: Vec3, player_index: int) -> int | None:
        """Put a marker at ``pos`` in the player's colour; return its slot or None if full."""
        for index, effect in enumerate(self.effects):
            if effect.active:
                continue
            effect.active = True
            effect.pos = pos
            effect.color = PLAYER_ONE_COLOR if player_index == 0 else PLAYER_TWO_COLOR
            return index
        return None

    def remove(self, index: int) -> None:
        """Free the marker in slot ``index``; slots outside the pool are ignored."""
        if 0 <= index < MAX_STAR_EFFECTS:
            self.effects[index].active = False

    def active(self) -> list[tuple[int, StarEffect]]:
        """Slots and markers currently shown."""
        return [(i, e) for i, e in enumerate(self.effects) if e.active]