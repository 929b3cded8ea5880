"""Core data types: coordinates, colours, splines, spline lists and bitmaps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Optional


class TracingError(Exception):
    """Raised when tracing or output cannot proceed."""


@dataclass(frozen=True)
class Coord:
    """An integer point on the bitmap grid (unsigned 16-bit components)."""

    x: int
    y: int


@dataclass(frozen=True)
class RealCoord:
    """A point with real components."""

    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    r: int
    g: int
    b: int


class PolynomialDegree(IntEnum):
    """Degree of the curve a spline describes."""

    LINEAR = 1
    QUADRATIC = 2
    CUBIC = 3
    PARALLEL_ELLIPSE = 4
    ELLIPSE = 5
    CIRCLE = 6


@dataclass
class Spline:
    """A Bezier segment given by its start, two control points and end."""

    start_point: RealCoord
    control1: RealCoord
    control2: RealCoord
    end_point: RealCoord
    degree: PolynomialDegree = PolynomialDegree.CUBIC
    linearity: float = 0.0

    @property
    def points(self) -> tuple[RealCoord, RealCoord, RealCoord, RealCoord]:
        return (self.start_point, self.control1, self.control2, self.end_point)

    def evaluate(self, t: float) -> RealCoord:
        """Evaluate the spline at ``t`` with de Casteljau's algorithm."""
        degree = int(self.degree)
        if degree > 3:
            raise ValueError(f"cannot evaluate a spline of degree {degree}")
        one_minus_t = 1.0 - t
        level = list(self.points[: degree + 1])
        while len(level) > 1:
            level = [
                RealCoord(
                    a.x * one_minus_t + b.x * t,
                    a.y * one_minus_t + b.y * t,
                    a.z * one_minus_t + b.z * t,
                )
                for a, b in zip(level, level[1:])
            ]
        return level[0]

    def format(self) -> str:
        """Return a human-readable one-line description of the spline."""
        s, c1, c2, e = self.points
        if self.degree == PolynomialDegree.LINEAR:
            return f"({s.x:.3f},{s.y:.3f})--({e.x:.3f},{e.y:.3f})."
        if self.degree == PolynomialDegree.CUBIC:
            return (
                f"({s.x:.3f},{s.y:.3f})..ctrls({c1.x:.3f},{c1.y:.3f})"
                f"&({c2.x:.3f},{c2.y:.3f})..({e.x:.3f},{e.y:.3f})."
            )
        raise ValueError(f"cannot format a spline of degree {int(self.degree)}")


@dataclass
class SplineList:
    """The splines making up one outline, with its colour."""

    splines: list[Spline] = field(default_factory=list)
    color: Color = Color(0, 0, 0)
    open: bool = False

    def append(self, spline: Spline) -> None:
        self.splines.append(spline)

    def extend(self, other: Iterable[Spline]) -> None:
        """Append every spline of ``other``; ``other`` is left unchanged."""
        self.splines.extend(list(other))

    def __len__(self) -> int:
        return len(self.splines)

    def __iter__(self) -> Iterator[Spline]:
        return iter(self.splines)

    def __getitem__(self, index: int) -> Spline:
        return self.splines[index]


@dataclass
class SplineListArray:
    """All outlines of a traced image."""

    lists: list[SplineList] = field(default_factory=list)
    centerline: bool = False
    background_color: Optional[Color] = None

    def append(self, spline_list: SplineList) -> None:
        self.lists.append(spline_list)

    def __len__(self) -> int:
        return len(self.lists)

    def __iter__(self) -> Iterator[SplineList]:
        return iter(self.lists)

    def __getitem__(self, index: int) -> SplineList:
        return self.lists[index]


class Bitmap:
    """A raster image of ``planes`` bytes per pixel, stored row by row."""

    def __init__(self, width: int, height: int, planes: int = 1, bits: Optional[bytes] = None):
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        if planes < 1:
            raise ValueError("a bitmap needs at least one plane")
        size = width * height * planes
        if bits is None:
            data = bytearray(size)
        else:
            data = bytearray(bits)
            if len(data) != size:
                raise ValueError(f"expected {size} bytes of pixel data, got {len(data)}")
        self.width = width
        self.height = height
        self.planes = planes
        self.bits = data

    def _offset(self, row: int, col: int) -> int:
        if not self.is_valid_pixel(row, col):
            raise IndexError(f"pixel ({row}, {col}) is outside the bitmap")
        return (row * self.width + col) * self.planes

    def get_color(self, row: int, col: int) -> Color:
        offset = self._offset(row, col)
        if self.planes >= 3:
            r, g, b = self.bits[offset : offset + 3]
            return Color(r, g, b)
        value = self.bits[offset]
        return Color(value, value, value)

    def set_color(self, row: int, col: int, color: Color) -> None:
        offset = self._offset(row, col)
        if self.planes >= 3:
            self.bits[offset : offset + 3] = bytes((color.r, color.g, color.b))
            return
        if not color.r == color.g == color.b:
            raise ValueError("a single-plane bitmap holds only grey values")
        self.bits[offset] = color.r

    def is_valid_pixel(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def copy(self) -> "Bitmap":
        return Bitmap(self.width, self.height, self.planes, bytes(self.bits))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.planes == other.planes
            and self.bits == other.bits
        )

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height}, planes={self.planes})"