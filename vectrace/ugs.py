"""Output of traced shapes as UGS font glyph outlines.

Cubic segments are approximated by pairs of quadratic segments, written
as on-curve and off-curve points on an integer grid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TextIO

from .geometry import PolynomialDegree, RealCoord, SplineListArray


@dataclass
class UgsGlyph:
    """Metrics of the glyph being written."""

    charcode: int = 0
    design_pixels: int = 0
    advance_width: int = 0
    left_bearing: int = 0
    descend: int = 0
    max_col: int = 0
    max_row: int = 0


def _lround(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _determinant(a: float, b: float, c: float, d: float) -> tuple[float, bool]:
    """The determinant of a 2x2 matrix and whether it is usable."""
    det = a * d - b * c
    lensq = (a * a + b * b) * (c * c + d * d)
    return det, not (lensq < 1 or det * det * 4000000 < lensq)


def _twist(a: float, b: float, c: float, d: float) -> float | None:
    tw1 = -a + 2 * b - c
    tw2 = -a + 3 * b - 3 * c + d
    if tw2 < 0:
        tw1, tw2 = -tw1, -tw2
    if 0.001 < tw1 < tw2:
        return tw1 / tw2
    return None


def cubic_to_quadratic(
    a: RealCoord, b: RealCoord, c: RealCoord, d: RealCoord
) -> tuple[RealCoord, RealCoord, RealCoord]:
    """Split the cubic ``a b c d`` into two quadratics.

    Returns ``(f, e, g)``: ``e`` is the on-curve split point, ``f`` the
    control point of the first quadratic and ``g`` that of the second.
    """
    t = _twist(a.x, b.x, c.x, d.x)
    if t is None:
        t = _twist(a.y, b.y, c.y, d.y)
    if t is None:
        t = 0.5
    t1 = 1 - t

    ex = a.x * t1 * t1 * t1 + 3 * b.x * t * t1 * t1 + 3 * c.x * t * t * t1 + d.x * t * t * t
    ey = a.y * t1 * t1 * t1 + 3 * b.y * t * t1 * t1 + 3 * c.y * t * t * t1 + d.y * t * t * t

    tanx = 3 * (-a.x * t1 * t1 + b.x * t1 * (1 - 3 * t) + c.x * t * (2 - 3 * t) + d.x * t * t)
    tany = 3 * (-a.y * t1 * t1 + b.y * t1 * (1 - 3 * t) + c.y * t * (2 - 3 * t) + d.y * t * t)

    # F: intersection of AB with the tangent at E.
    det, ok = _determinant(b.x - a.x, b.y - a.y, tanx, tany)
    if ok:
        s, _ = _determinant(ex - a.x, ey - a.y, tanx, tany)
        s = max(s / det, 0.0)
        f = RealCoord(b.x * s + a.x * (1 - s), b.y * s + a.y * (1 - s))
    else:
        f = RealCoord(ex, ey)

    # G: intersection of CD with the tangent at E.
    det, ok = _determinant(c.x - d.x, c.y - d.y, -tanx, -tany)
    if ok:
        s, _ = _determinant(ex - d.x, ey - d.y, -tanx, -tany)
        s = max(s / det, 0.0)
        g = RealCoord(c.x * s + d.x * (1 - s), c.y * s + d.y * (1 - s))
    else:
        g = RealCoord(ex, ey)

    return f, RealCoord(ex, ey), g


class _Bounds:
    def __init__(self, lowerx: int, lowery: int, upperx: int, uppery: int):
        self.lowerx, self.lowery, self.upperx, self.uppery = lowerx, lowery, upperx, uppery

    def include(self, x: int, y: int) -> None:
        self.lowerx = min(self.lowerx, x)
        self.lowery = min(self.lowery, y)
        self.upperx = max(self.upperx, x)
        self.uppery = max(self.uppery, y)


def _write_splines(stream: TextIO, shape: SplineListArray, glyph: UgsGlyph, bounds: _Bounds) -> None:
    dx, dy = glyph.left_bearing, glyph.descend

    def shifted(point: RealCoord) -> RealCoord:
        return RealCoord(point.x + dx, point.y + dy)

    stream.write("\tcontour\n")
    for spline_list in shape:
        current = shifted(spline_list[0].start_point)
        ix1, iy1 = _lround(current.x), _lround(current.y)
        stream.write("\t\tpath\n")
        stream.write(f"\t\t\tdot-on {ix1} {iy1}\n")
        bounds.include(ix1, iy1)

        for spline in spline_list:
            end = shifted(spline.end_point)
            ix3, iy3 = _lround(end.x), _lround(end.y)
            ix1, iy1 = _lround(current.x), _lround(current.y)
            if spline.degree == PolynomialDegree.LINEAR:
                if (ix3, iy3) != (ix1, iy1):
                    stream.write(f"\t\t\tdot-on {ix3} {iy3}\n")
                bounds.include(ix3, iy3)
            else:
                f, e, g = cubic_to_quadratic(current, shifted(spline.control1), shifted(spline.control2), end)
                fi = (_lround(f.x), _lround(f.y))
                ei = (_lround(e.x), _lround(e.y))
                gi = (_lround(g.x), _lround(g.y))

                if fi != (ix1, iy1) and fi != ei:
                    stream.write(f"\t\t\tdot-off {fi[0]} {fi[1]}\n")
                stream.write(f"\t\t\tdot-on {ei[0]} {ei[1]}\n")
                if gi != ei and gi != (ix3, iy3):
                    stream.write(f"\t\t\tdot-off {gi[0]} {gi[1]}\n")
                stream.write(f"\t\t\tdot-on {ix3} {iy3}\n")

                for x, y in (fi, ei, gi, (ix3, iy3)):
                    bounds.include(x, y)
            current = end
        stream.write("\t\tend path\n")
    stream.write("\tend contour\n")


def _alt_hex(value: int) -> str:
    value %= 1 << 64
    return hex(value) if value else "0"


def write_ugs(
    stream: TextIO,
    name: str,
    llx: int,
    lly: int,
    urx: int,
    ury: int,
    shape: SplineListArray,
    glyph: UgsGlyph | None = None,
) -> None:
    """Write ``shape`` as one UGS symbol with the metrics of ``glyph``.

    The bearings and ascent written are widened to cover every point.
    """
    glyph = glyph if glyph is not None else UgsGlyph()
    stream.write(f"symbol {_alt_hex(glyph.charcode)} design-size {glyph.design_pixels}\n")
    stream.write(f"\tadvance-width {glyph.advance_width}\n")

    bounds = _Bounds(
        lowerx=glyph.left_bearing,
        lowery=glyph.descend,
        upperx=glyph.advance_width - glyph.max_col - 1,
        uppery=glyph.max_row,
    )
    _write_splines(stream, shape, glyph, bounds)

    stream.write(f"\tleft-bearing {bounds.lowerx}\n")
    stream.write(f"\tright-bearing {glyph.advance_width - bounds.upperx - 1}\n")
    stream.write(f"\tascend {bounds.uppery + 1}\n")
    stream.write(f"\tdescend {bounds.lowery}\n")
    stream.write("end symbol\n\n")