"""Particles that fly along cubic Bezier curves from a finished constellation to the score."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from .geometry import Vec3

MAX_PARTICLES = 256
PARTICLE_SIZE = 5.0
SCORE_SCREEN_POS = Vec3(940.0, 80.0, 0.0)

_GATHER_OFFSET = Vec3(10.0, 50.0, 0.0)

Matrix = Sequence[Sequence[float]]


@dataclass
class BezierParticle:
    """One particle and the curve it travels along."""

    pos: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(0.4, 0.4, 0.4))
    size_x: float = PARTICLE_SIZE
    size_y: float = PARTICLE_SIZE
    active: bool = False
    frame: int = 0
    frame_count: int = 0
    click_count: int = 0
    start: Vec3 = field(default_factory=Vec3)
    control1: Vec3 = field(default_factory=Vec3)
    control2: Vec3 = field(default_factory=Vec3)


def cubic_bezier(p0: Vec3, p1: Vec3, p2: Vec3, p3: Vec3, t: float) -> Vec3:
    """Point at parameter ``t`` of the cubic Bezier curve through the four control points."""
    u = 1.0 - t
    return (u * u * u) * p0 + (3 * u * u * t) * p1 + (3 * u * t * t) * p2 + (t * t * t) * p3


def _identity() -> list[list[float]]:
    return [[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)]


def _multiply(a: Matrix, b: Matrix) -> list[list[float]]:
    return [[sum(a[r][k] * b[k][c] for k in range(4)) for c in range(4)] for r in range(4)]


def _inverse(matrix: Matrix) -> list[list[float]]:
    work = [list(map(float, row)) + unit for row, unit in zip(matrix, _identity())]
    for col in range(4):
        pivot = max(range(col, 4), key=lambda r: abs(work[r][col]))
        if abs(work[pivot][col]) < 1e-12:
            raise ValueError("matrix is singular")
        work[col], work[pivot] = work[pivot], work[col]
        scale = work[col][col]
        work[col] = [value / scale for value in work[col]]
        for r in range(4):
            if r != col and work[r][col] != 0.0:
                factor = work[r][col]
                work[r] = [a - factor * b for a, b in zip(work[r], work[col])]
    return [row[4:] for row in work]


def _transform_coord(point: Vec3, matrix: Matrix) -> Vec3:
    row = (point.x, point.y, point.z, 1.0)
    x, y, z, w = (sum(row[k] * matrix[k][c] for k in range(4)) for c in range(4))
    if w == 0.0:
        raise ValueError("point maps to infinity")
    return Vec3(x / w, y / w, z / w)


def unproject(
    screen_pos: Vec3,
    view: Matrix,
    projection: Matrix,
    screen_width: float,
    screen_height: float,
) -> Vec3:
    """World position of a screen point, for row-vector view and projection matrices."""
    viewport = _identity()
    viewport[0][0] = screen_width / 2.0
    viewport[1][1] = -screen_height / 2.0
    viewport[3][0] = screen_width / 2.0
    viewport[3][1] = screen_height / 2.0
    to_screen = _multiply(_multiply(view, projection), viewport)
    return _transform_coord(screen_pos, _inverse(to_screen))


class BezierParticles:
    """A fixed pool of particles that gather at the score display."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self.particles = [BezierParticle() for _ in range(MAX_PARTICLES)]

    def spawn(self, pos: Vec3) -> int | None:
        """Start a particle at ``pos``; return its slot, or None when the pool is full."""
        for index, particle in enumerate(self.particles):
            if particle.active:
                continue
            particle.start = pos
            offset_x = self._rng.randrange(1200) / 10
            offset_y = self._rng.randrange(1200) / 10
            particle.control1 = Vec3(offset_x, offset_y, 0.0) + pos
            particle.control2 = _GATHER_OFFSET + pos
            particle.frame_count = 0
            particle.click_count = 0
            particle.active = True
            particle.frame = self._rng.randrange(50) + 80
            return index
        return None

    def update(self, target: Vec3) -> None:
        """Advance every active particle one frame towards ``target``."""
        for particle in self.particles:
            if not particle.active:
                continue
            particle.frame_count += 1
            particle.click_count += 1
            t = particle.frame_count / particle.frame
            particle.pos = cubic_bezier(
                particle.start, particle.control1, particle.control2, target, t
            )
            if particle.pos == target:
                particle.active = False

    def active(self) -> list[tuple[int, BezierParticle]]:
        """Slots and particles currently in flight."""
        return [(i, p) for i, p in enumerate(self.particles) if p.active]