"""Three-dimensional tuples, points and vectors with tolerant comparison."""

from __future__ import annotations

import math
import sys
from typing import Iterator

_DBL_EPSILON = sys.float_info.epsilon
_FLT_EPSILON = 2.0 ** -23


def is_approx(a: float, b: float) -> bool:
    """Compare two doubles using combined absolute and relative error."""
    return abs(a - b) <= _DBL_EPSILON * max(1.0, abs(a), abs(b))


def is_approx_float(a: float, b: float) -> bool:
    """Compare two values with single-precision tolerance."""
    return abs(a - b) <= _FLT_EPSILON * max(1.0, abs(a), abs(b))


class Tuple3D:
    """A mutable triple of coordinates that may be flagged invalid."""

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self._valid = True

    @classmethod
    def _copy_of(cls, other: Tuple3D):
        result = cls(other.x, other.y, other.z)
        result._valid = other._valid
        return result

    def add(self, other: Tuple3D) -> None:
        """Add ``other`` component-wise, in place."""
        self.x += other.x
        self.y += other.y
        self.z += other.z

    def sub(self, other: Tuple3D) -> None:
        """Subtract ``other`` component-wise, in place."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z

    def scale(self, s: float) -> None:
        """Multiply every component by ``s``, in place."""
        self.x *= s
        self.y *= s
        self.z *= s

    def is_valid(self) -> bool:
        return self._valid

    @classmethod
    def invalid(cls):
        """Return an instance at the origin marked as invalid."""
        result = cls()
        result._valid = False
        return result

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple3D):
            return NotImplemented
        return (
            is_approx(self.x, other.x)
            and is_approx(self.y, other.y)
            and is_approx(self.z, other.z)
            and self._valid == other._valid
        )

    def __lt__(self, other: Tuple3D) -> bool:
        if not isinstance(other, Tuple3D):
            return NotImplemented
        return (self.x + self.y + self.z) < (other.x + other.y + other.z)

    def __hash__(self) -> int:
        return hash(self.x) + hash(self.y) + hash(self.z)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


class Point3D(Tuple3D):
    """A location in space."""

    def distance(self, other: Tuple3D) -> float:
        """Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)


class Vector3D(Tuple3D):
    """A direction with magnitude."""

    def cross(self, other: Tuple3D) -> Vector3D:
        """Return the cross product ``self x other``."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Tuple3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalise(self) -> None:
        """Scale to unit length, in place."""
        length = self.length()
        self.x /= length
        self.y /= length
        self.z /= length

    def angle(self, other: Vector3D) -> float:
        """Angle in radians between this vector and ``other``."""
        cosine = self.dot(other) / (self.length() * other.length())
        cosine = min(1.0, max(-1.0, cosine))
        return math.acos(cosine)


class LineOnPlane(Point3D):
    """An intersection result that is a line rather than a single point."""

    def __init__(self, start: Tuple3D, direction: Tuple3D, distance: float) -> None:
        super().__init__(start.x, start.y, start.z)
        self._valid = start.is_valid()
        self.direction = Tuple3D._copy_of(direction)
        self.distance = float(distance)