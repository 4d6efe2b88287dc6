"""Two-dimensional geometry primitives: positions, sizes, rectangles and directions."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

SCREEN_WIDTH = 320
"""Width of the screen, ignoring zoom."""

SCREEN_HEIGHT = 200
"""Height of the screen, ignoring zoom."""

VIEWPORT_HEIGHT = 144
"""Height of the room section of the screen."""

CONTROL_PANE_HEIGHT = 56
"""Height of the control pane of the screen."""


class Direction(enum.IntEnum):
    """A direction in 2D space."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Size:
    """A 2D size."""

    w: int = 0
    h: int = 0

    def flip_h(self) -> Size:
        """Return the size with its width negated."""
        return Size(-self.w, self.h)

    def __str__(self) -> str:
        return f"(W:{self.w}, H:{self.h})"


@dataclass(frozen=True)
class Position:
    """A 2D position with integer coordinates."""

    x: int = 0
    y: int = 0

    def add(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def sub(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def above(self, h: int) -> Position:
        """Return the position h units above this one."""
        return Position(self.x, self.y - h)

    def distance(self, other: Position) -> Size:
        """Return the absolute horizontal and vertical distance to another position."""
        return Size(abs(other.x - self.x), abs(other.y - self.y))

    def direction_to(self, other: Position) -> Direction:
        """Return the dominant direction from this position to another."""
        dist = self.distance(other)
        if dist.w > dist.h:
            return Direction.LEFT if other.x < self.x else Direction.RIGHT
        return Direction.UP if other.y < self.y else Direction.DOWN

    def to_posf(self) -> Positionf:
        return Positionf(float(self.x), float(self.y))

    def __str__(self) -> str:
        return f"(X:{self.x}, Y:{self.y})"


@dataclass(frozen=True)
class Positionf:
    """A 2D position with floating point coordinates."""

    x: float = 0.0
    y: float = 0.0

    def to_pos(self) -> Position:
        """Convert to an integer position, truncating towards zero."""
        return Position(int(self.x), int(self.y))

    def scale(self, s: float) -> Positionf:
        return Positionf(self.x * s, self.y * s)

    def scale_by(self, other: Positionf) -> Positionf:
        return Positionf(self.x * other.x, self.y * other.y)

    def add(self, other: Positionf) -> Positionf:
        return Positionf(self.x + other.x, self.y + other.y)

    def sub(self, other: Positionf) -> Positionf:
        return Positionf(self.x - other.x, self.y - other.y)

    def move(self, to: Positionf, speed: Positionf) -> Positionf:
        """Move towards another position by at most the given speed on each axis."""
        return Positionf(
            _step(self.x, to.x, speed.x),
            _step(self.y, to.y, speed.y),
        )

    def cross_product(self, p1: Positionf, p2: Positionf) -> float:
        """2D cross product of the vectors self->p1 and p1->p2."""
        return (p1.x - self.x) * (p2.y - p1.y) - (p1.y - self.y) * (p2.x - p1.x)

    def is_intersecting(self, p1: Positionf, p2: Positionf) -> bool:
        """Whether a horizontal ray from this point crosses the segment p1->p2."""
        if (p1.y > self.y) != (p2.y > self.y):
            return self.x < (p2.x - p1.x) * (self.y - p1.y) / (p2.y - p1.y) + p1.x
        return False

    def distance(self, other: Positionf) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def closest_point_on_segment(self, p1: Positionf, p2: Positionf) -> Positionf:
        """Return the point of segment p1->p2 closest to this point."""
        if p1 == p2:
            return p1
        px = self.x - p1.x
        py = self.y - p1.y
        vx = p2.x - p1.x
        vy = p2.y - p1.y
        length_sq = vx * vx + vy * vy
        t = max(0.0, min(1.0, (px * vx + py * vy) / length_sq))
        return Positionf(p1.x + t * vx, p1.y + t * vy)

    def __str__(self) -> str:
        return f"(X:{self.x:.2f}, Y:{self.y:.2f})"


def _step(current: float, target: float, speed: float) -> float:
    delta = target - current
    if delta > 0:
        return current + speed if speed < delta else target
    if delta < 0:
        return current - speed if speed < -delta else target
    return current


@dataclass(frozen=True)
class Rectangle:
    """A 2D rectangle."""

    pos: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)

    def is_zero(self) -> bool:
        return self.pos == Position() and self.size == Size()

    def left_edge(self) -> int:
        return self.pos.x

    def right_edge(self) -> int:
        return self.pos.x + self.size.w

    def top_edge(self) -> int:
        return self.pos.y

    def bottom_edge(self) -> int:
        return self.pos.y + self.size.h

    def contains(self, pos: Position) -> bool:
        """Whether the position lies inside; right and bottom edges are exclusive."""
        return (
            self.left_edge() <= pos.x < self.right_edge()
            and self.top_edge() <= pos.y < self.bottom_edge()
        )

    def __str__(self) -> str:
        return f"(Pos:{self.pos}, Size:{self.size})"


def new_rect(x: int, y: int, w: int, h: int) -> Rectangle:
    """Create a rectangle from its origin and size."""
    return Rectangle(Position(x, y), Size(w, h))


VIEWPORT_RECT = new_rect(0, 0, SCREEN_WIDTH, VIEWPORT_HEIGHT)
CONTROL_PANE_RECT = new_rect(0, 0, SCREEN_WIDTH, CONTROL_PANE_HEIGHT)