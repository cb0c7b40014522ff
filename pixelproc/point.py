"""2D points, rotations and lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass(frozen=True)
class Rotation:
    """A fixed rotation, caching the sine and cosine of its angle."""

    sin_theta: float
    cos_theta: float

    @classmethod
    def from_angle(cls, theta: float) -> Rotation:
        """A rotation of ``theta`` radians."""
        return cls(math.sin(theta), math.cos(theta))


@dataclass(frozen=True)
class Point(Generic[T]):
    """A point at (x, y)."""

    x: T
    y: T

    def __add__(self, other: Point[T]) -> Point[T]:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point[T]) -> Point[T]:
        return Point(self.x - other.x, self.y - other.y)

    def to_float(self) -> Point[float]:
        """Return this point with float coordinates."""
        return Point(float(self.x), float(self.y))

    def to_int(self) -> Point[int]:
        """Return this point with coordinates truncated towards zero."""
        return Point(int(self.x), int(self.y))

    def rotate(self, rotation: Rotation) -> Point[float]:
        """Apply ``rotation`` to this point."""
        x = self.x * rotation.cos_theta + self.y * rotation.sin_theta
        y = self.y * rotation.cos_theta - self.x * rotation.sin_theta
        return Point(x, y)

    def invert_rotation(self, rotation: Rotation) -> Point[float]:
        """Undo ``rotation`` on this point."""
        x = self.x * rotation.cos_theta - self.y * rotation.sin_theta
        y = self.y * rotation.cos_theta + self.x * rotation.sin_theta
        return Point(x, y)


def distance_sq(p: Point, q: Point) -> float:
    """Return the squared Euclidean distance between two points."""
    p, q = p.to_float(), q.to_float()
    return (p.x - q.x) ** 2 + (p.y - q.y) ** 2


def distance(p: Point, q: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.sqrt(distance_sq(p, q))


@dataclass(frozen=True)
class Line:
    """A line of the form ``a*x + b*y + c = 0``."""

    a: float
    b: float
    c: float

    @classmethod
    def from_points(cls, p: Point, q: Point) -> Line:
        """Return the line passing through ``p`` and ``q``."""
        return cls(p.y - q.y, q.x - p.x, p.x * q.y - q.x * p.y)

    def distance_from_point(self, point: Point) -> float:
        """Return the shortest distance from this line to ``point``."""
        return abs(self.a * point.x + self.b * point.y + self.c) / math.hypot(
            self.a, self.b
        )