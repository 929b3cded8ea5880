"""Output of traced shapes as HPGL plotter files."""

from __future__ import annotations

from typing import Sequence, TextIO

from .geometry import Color, PolynomialDegree, RealCoord, SplineListArray

# Points used to approximate each cubic segment.
_CURVE_POINTS = 8

# Plotter units per inch and the assumed logical resolution of the image.
_PLOTTER_UNITS_PER_INCH = 1016
_LOGICAL_PIXELS_PER_INCH = 120

# Pen colours; index 0 is never chosen.
_PEN_COLORS = (
    Color(0, 0, 0),
    Color(0, 0, 0),
    Color(0xFF, 0, 0),
    Color(0, 0xFF, 0),
    Color(0xFF, 0xFF, 0),
    Color(0, 0, 0xFF),
    Color(0xB8, 0, 0x80),
    Color(0, 0xFF, 0xFF),
    Color(0xFF, 0x84, 0),
)


def nearest_pen(red: int, green: int, blue: int) -> int:
    """Index of the pen whose colour is closest to the given RGB value."""
    best_distance = 3 * (0xFF * 0xFF)
    best_index = 0
    for index, pen in enumerate(_PEN_COLORS[1:], start=1):
        distance = (red - pen.r) ** 2 + (green - pen.g) ** 2 + (blue - pen.b) ** 2
        if distance < best_distance:
            best_distance = distance
            best_index = index
    return best_index


def bezier_points(points: Sequence[RealCoord], count: int) -> list[RealCoord]:
    """Sample ``count`` points evenly in t along the cubic Bezier ``points``.

    The first and last samples are exactly the first and last control points.
    """
    if len(points) != 4:
        raise ValueError("a cubic Bezier needs exactly four points")
    if count < 2:
        raise ValueError("at least two sample points are needed")
    p0, p1, p2, p3 = points

    bx = 3 * (p1.x - p0.x)
    cx = 3 * (p2.x - p1.x) - bx
    dx = (p3.x - p0.x) - (bx + cx)
    by = 3 * (p1.y - p0.y)
    cy = 3 * (p2.y - p1.y) - by
    dy = (p3.y - p0.y) - (by + cy)

    samples: list[RealCoord] = []
    for step in range(count):
        if step == 0:
            samples.append(p0)
        elif step == count - 1:
            samples.append(p3)
        else:
            t = step / (count - 1)
            samples.append(
                RealCoord(
                    p0.x + t * (bx + t * (cx + t * dx)),
                    p0.y + t * (by + t * (cy + t * dy)),
                )
            )
    return samples


def _pen_down(point: RealCoord) -> str:
    return f"PD{int(point.x)} {int(point.y)};"


def _pen_up(point: RealCoord) -> str:
    return f"PU{int(point.x)} {int(point.y)};"


def write_plt(stream: TextIO, name: str, llx: int, lly: int, urx: int, ury: int, shape: SplineListArray) -> None:
    """Write ``shape`` as HPGL, flattening curves into short line segments."""
    scale = _PLOTTER_UNITS_PER_INCH / _LOGICAL_PIXELS_PER_INCH

    stream.write("IN;")
    stream.write(f"IP {int(scale * llx)} {int(scale * lly)} {int(scale * urx)} {int(scale * ury)};")
    stream.write(f"SC {llx} {urx} {lly} {ury};")

    last_point = RealCoord(0.0, 0.0)
    last_color: Color | None = None
    for index, spline_list in enumerate(shape):
        color = spline_list.color
        if index == 0 or color != last_color:
            stream.write(f"SP{nearest_pen(color.r, color.g, color.b)};")
            last_color = color

        last_point = spline_list[0].start_point
        stream.write(_pen_up(last_point))

        for spline in spline_list:
            if spline.degree == PolynomialDegree.LINEAR:
                last_point = spline.end_point
                stream.write(_pen_down(last_point))
            else:
                samples = bezier_points(
                    (last_point, spline.control1, spline.control2, spline.end_point), _CURVE_POINTS
                )
                for point in samples[1:]:
                    stream.write(_pen_down(point))
                last_point = samples[-1]

    stream.write(_pen_up(last_point))