"""Two-dimensional vector used for positions, velocities and accelerations."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real

logger = logging.getLogger(__name__)

_INDEX_ERROR = "The index can be 0 (x) or 1 (y); anything else is out of range"


@dataclass
class Vector:
    """A mutable 2D vector with x and y components."""

    x: float = 0.0
    y: float = 0.0

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def dot(self, other: Vector) -> float:
        """Dot product with another vector."""
        return other.x * self.x + other.y * self.y

    def normalized(self) -> Vector:
        """Unit vector in the same direction; the zero vector if the length is 0."""
        length = self.magnitude
        if length == 0:
            logger.warning("Vector's magnitude is 0; cannot be normalized.")
            return Vector(0.0, 0.0)
        return Vector(self.x / length, self.y / length)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(scalar * self.x, scalar * self.y)

    def __rmul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(_INDEX_ERROR)

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError(_INDEX_ERROR)

    def __str__(self) -> str:
        return f"<{self.x:g},{self.y:g}> Magnitude: {self.magnitude:g}"


def parse_vector(text: str) -> Vector:
    """Read a vector from two whitespace-separated numbers."""
    parts = text.split()
    if len(parts) < 2:
        raise ValueError(f"expected two numbers, got {text!r}")
    return Vector(float(parts[0]), float(parts[1]))


def find_angle(v1: Vector, v2: Vector) -> float:
    """Angle between two vectors in degrees."""
    denominator = abs(v1.magnitude) * abs(v2.magnitude)
    if denominator == 0:
        raise ValueError("cannot find the angle of a zero-length vector")
    cosine = max(-1.0, min(1.0, v1.dot(v2) / denominator))
    return math.degrees(math.acos(cosine))