"""Constellations: stars, the lines between them, and completion scoring."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field, replace
from typing import Optional

from .geometry import Vec3
from .score import ScoreBoard
from .score_effect import BezierParticles
from .star_effect import Color

MAX_SEIZA = 12
SIZE_STAR = 3.5
SIZE_LINE = 1.0

WHITE = Color(1.0, 1.0, 1.0, 1.0)
HALF_WHITE = Color(1.0, 1.0, 1.0, 0.5)
PINK = Color(1.0, 0.6, 1.0, 1.0)
RED = Color(1.0, 0.4, 1.0, 0.8)
CYAN = Color(0.6, 1.0, 1.0, 1.0)
BLUE = Color(0.3, 1.0, 1.0, 0.8)

_ALPHA_MAX = 0.8
_ALPHA_MIN = 0.3
_X_AXIS = Vec3(1.0, 0.0, 0.0)


class Zodiac(enum.IntEnum):
    """The twelve constellations, followed by the owners a constellation can have."""

    ARI = 0
    TAU = 1
    GEM = 2
    CAN = 3
    LEO = 4
    VIR = 5
    LIB = 6
    SCO = 7
    SAG = 8
    CAP = 9
    AQU = 10
    PIS = 11
    PLAYER_ONE = 12
    PLAYER_TWO = 13
    DEFAULT = 14


@dataclass
class Star:
    """A star, or a line segment between two stars."""

    pos: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    color: Color = WHITE
    fade: float = 0.01
    radius: float = 0.0
    rot: float = 0.0
    is_light: bool = False
    effect_idx: int = -1


def random_float(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """A random value in ``[low, high)`` with a resolution of 1/10000; ``low`` if the range is empty."""
    if low >= high:
        return low
    source = rng if rng is not None else random
    fraction = source.randrange(10000) * 0.0001
    return fraction * (high - low) + low


def random_vector(low: Vec3, high: Vec3, rng: Optional[random.Random] = None) -> Vec3:
    """A vector whose components are drawn independently between ``low`` and ``high``."""
    return Vec3(
        random_float(low.x, high.x, rng),
        random_float(low.y, high.y, rng),
        random_float(low.z, high.z, rng),
    )


def distance(a: Vec3, b: Vec3) -> float:
    """Distance between two points."""
    return (a - b).length()


class Constellation:
    """A set of stars joined by line segments, owned by whoever completes it."""

    def __init__(self, name: Zodiac, num_stars: int, num_edges: int):
        if num_stars < 0:
            raise ValueError("a constellation cannot have a negative number of stars")
        self.name = name
        self.belong = Zodiac.DEFAULT
        self.num_stars = num_stars
        self.num_edges = num_edges
        self.stars = [Star() for _ in range(num_stars)]
        self.lines: dict[tuple[int, int], Star] = {}
        self.is_connected = False

    def _key(self, v1: int, v2: int) -> tuple[int, int]:
        for v in (v1, v2):
            if not 0 <= v < self.num_stars:
                raise IndexError(f"star {v} is not in this constellation")
        return (v1, v2) if v1 <= v2 else (v2, v1)

    def set_line(self, v1: int, v2: int) -> Star:
        """Join stars ``v1`` and ``v2`` and lay the segment out between them."""
        low, high = self._key(v1, v2)
        start = self.stars[low].pos
        end = self.stars[high].pos
        edge = end - start
        line = self.lines.setdefault((low, high), Star())
        line.scale = Vec3(edge.length(), line.scale.y, line.scale.z)
        direction = edge.normalized()
        angle = math.acos(max(-1.0, min(1.0, direction.dot(_X_AXIS))))
        line.rot = angle if direction.y > 0 else -angle
        line.pos = (end + start) / 2.0
        return line

    def has_line(self, v1: int, v2: int) -> bool:
        """Whether stars ``v1`` and ``v2`` are joined."""
        return self._key(v1, v2) in self.lines

    def update(
        self,
        score: int,
        scoreboard: Optional[ScoreBoard],
        particles: Optional[BezierParticles],
    ) -> bool:
        """Advance one frame; return True on the frame the constellation becomes complete."""
        for star in self.stars:
            if star.is_light and not self.is_connected:
                continue
            alpha = min(_ALPHA_MAX, max(_ALPHA_MIN, star.color.a + star.fade))
            star.color = replace(star.color, a=alpha)
            if alpha in (_ALPHA_MAX, _ALPHA_MIN):
                star.fade = -star.fade

        for (i, j), line in self.lines.items():
            line.is_light = self.stars[i].is_light and self.stars[j].is_light

        if self.is_connected:
            return False
        self.is_connected = all(star.is_light for star in self.stars)
        if not self.is_connected:
            return False

        if scoreboard is not None:
            if self.belong == Zodiac.PLAYER_ONE:
                scoreboard.change_player(score)
            elif self.belong == Zodiac.PLAYER_TWO:
                scoreboard.change_enemy(score)
        if particles is not None:
            for star in self.stars:
                particles.spawn(star.pos)
        return True