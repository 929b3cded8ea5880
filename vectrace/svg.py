"""Output of traced shapes as SVG paths."""

from __future__ import annotations

from typing import TextIO

from .geometry import Color, PolynomialDegree, SplineListArray


def _g(value: float) -> str:
    return "%g" % value


def write_svg(stream: TextIO, name: str, llx: int, lly: int, urx: int, ury: int, shape: SplineListArray) -> None:
    """Write ``shape`` as an SVG document, one path per run of a colour.

    The y axis is flipped so the image is not upside down.
    """
    width = urx - llx
    height = ury - lly
    stream.write('<?xml version="1.0" standalone="yes"?>\n')
    stream.write(f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">\n')

    last_color = Color(0, 0, 0)
    stroke = False
    for index, spline_list in enumerate(shape):
        first = spline_list[0]
        stroke = shape.centerline or spline_list.open
        color = spline_list.color

        if index == 0 or color != last_color:
            if index > 0:
                if not stroke:
                    stream.write("z")
                stream.write('"/>\n')
            paint, other = ("stroke", "fill") if stroke else ("fill", "stroke")
            stream.write(
                f'<path style="{paint}:#{color.r:02x}{color.g:02x}{color.b:02x}; {other}:none;" d="'
            )

        start = first.start_point
        stream.write(f"M{_g(start.x)} {_g(height - start.y)}")
        for spline in spline_list:
            end = spline.end_point
            if spline.degree == PolynomialDegree.LINEAR:
                stream.write(f"L{_g(end.x)} {_g(height - end.y)}")
            else:
                c1, c2 = spline.control1, spline.control2
                stream.write(
                    f"C{_g(c1.x)} {_g(height - c1.y)} {_g(c2.x)} {_g(height - c2.y)} "
                    f"{_g(end.x)} {_g(height - end.y)}"
                )
            last_color = color

    if len(shape) > 0:
        if not stroke:
            stream.write("z")
        stream.write('"/>\n')
    stream.write("</svg>\n")