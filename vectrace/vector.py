"""Vector and point arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Coord, RealCoord, TracingError

_EPSILON = 0.00001
_USHORT = 0xFFFF


def _epsilon_equal(a: float, b: float) -> bool:
    return abs(a - b) <= _EPSILON


def _lround(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


@dataclass(frozen=True)
class Vector:
    """A displacement along the three axes."""

    dx: float
    dy: float
    dz: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.dx * self.dx + self.dy * self.dy + self.dz * self.dz)

    def normalized(self) -> "Vector":
        """Return the unit vector; a zero vector is returned unchanged."""
        m = self.magnitude()
        if m > 0.0:
            return Vector(self.dx / m, self.dy / m, self.dz / m)
        return self

    def dot(self, other: "Vector") -> float:
        return self.dx * other.dx + self.dy * other.dy + self.dz * other.dz

    def scaled(self, factor: float) -> "Vector":
        return Vector(self.dx * factor, self.dy * factor, self.dz * factor)

    def angle(self, other: "Vector") -> float:
        """Angle between the two vectors in degrees, from 0 to 180."""
        cosine = other.normalized().dot(self.normalized())
        if _epsilon_equal(cosine, 1.0):
            cosine = 1.0
        elif _epsilon_equal(cosine, -1.0):
            cosine = -1.0
        try:
            return math.degrees(math.acos(cosine))
        except ValueError as exc:
            raise TracingError(str(exc)) from exc

    def absolute(self) -> "Vector":
        return Vector(abs(self.dx), abs(self.dy), abs(self.dz))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.dx + other.dx, self.dy + other.dy, self.dz + other.dz)


def make_vector(coord: RealCoord) -> Vector:
    """Treat a point as a vector from the origin."""
    return Vector(coord.x, coord.y, coord.z)


def vector_to_point(vector: Vector) -> RealCoord:
    """Treat a vector as a displacement from the origin in the plane."""
    return RealCoord(vector.dx, vector.dy)


def add_point(coord: RealCoord, vector: Vector) -> RealCoord:
    return RealCoord(coord.x + vector.dx, coord.y + vector.dy, coord.z + vector.dz)


def subtract_point(coord: RealCoord, vector: Vector) -> RealCoord:
    return RealCoord(coord.x - vector.dx, coord.y - vector.dy, coord.z - vector.dz)


def add_int_point(coord: Coord, vector: Vector) -> Coord:
    """Add a vector to an integer point, rounding the result."""
    return Coord(
        _lround(coord.x + vector.dx) & _USHORT,
        _lround(coord.y + vector.dy) & _USHORT,
    )


def point_add(first: RealCoord, second: RealCoord) -> RealCoord:
    return RealCoord(first.x + second.x, first.y + second.y, first.z + second.z)


def point_scale(coord: RealCoord, factor: float) -> RealCoord:
    return RealCoord(coord.x * factor, coord.y * factor, coord.z * factor)


def point_subtract(first: RealCoord, second: RealCoord) -> Vector:
    return Vector(first.x - second.x, first.y - second.y, first.z - second.z)


def int_subtract(first: Coord, second: Coord) -> Vector:
    return Vector(float(first.x - second.x), float(first.y - second.y), 0.0)


def int_subtract_point(first: Coord, second: Coord) -> Coord:
    return Coord((first.x - second.x) & _USHORT, (first.y - second.y) & _USHORT)


def int_add(first: Coord, second: Coord) -> Coord:
    return Coord((first.x + second.x) & _USHORT, (first.y + second.y) & _USHORT)


def int_scale(coord: Coord, factor: int) -> Coord:
    return Coord((coord.x * factor) & _USHORT, (coord.y * factor) & _USHORT)


def int_scale_real(coord: Coord, factor: float) -> RealCoord:
    return RealCoord(coord.x * factor, coord.y * factor)