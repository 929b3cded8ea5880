"""Output of traced shapes as POV-Ray prisms."""

from __future__ import annotations

from typing import TextIO

from .geometry import Color, PolynomialDegree, SplineListArray, TracingError


def _pigment(color: Color) -> str:
    return f"  pigment {{rgb<{color.r / 255.0:.3f}, {color.g / 255.0:.3f}, {color.b / 255.0:.3f}>}}\n"


def _run_length(shape: SplineListArray, start: int) -> int:
    """Number of control points in the run of same-coloured lists from ``start``."""
    color = shape[start].color
    number = 0
    for spline_list in shape.lists[start:]:
        if spline_list.color != color:
            break
        number += len(spline_list) * 4
    return number


def write_pov(stream: TextIO, name: str, llx: int, lly: int, urx: int, ury: int, shape: SplineListArray) -> None:
    """Write ``shape`` as POV-Ray ``prism`` objects, one per run of a colour."""
    if shape.centerline:
        raise TracingError("Povray output currently not supported for centerline method")

    last_color = Color(0, 0, 0)
    for index, spline_list in enumerate(shape):
        if index > 0:
            if spline_list.color != last_color:
                stream.write("\n" + _pigment(last_color))
                stream.write("  translate <0.0, 0.0, 0.0>\n")
                stream.write("}\n")
            else:
                stream.write(",\n")

        if index == 0 or spline_list.color != last_color:
            stream.write("prism {\n")
            stream.write("  bezier_spline\n")
            stream.write(f"  {0.0:.1f}\n")
            stream.write(f"  {0.0001:.4f}\n")
            stream.write(f"  {_run_length(shape, index)}\n")
            last_color = spline_list.color

        for spline_index, spline in enumerate(spline_list):
            if spline_index > 0:
                stream.write(",\n")
            s, e = spline.start_point, spline.end_point
            if spline.degree == PolynomialDegree.LINEAR:
                c1, c2 = s, e
            else:
                c1, c2 = spline.control1, spline.control2
            stream.write(
                f"  <{s.x:.3f}, {s.y:.3f}>, <{c1.x:.3f}, {c1.y:.3f}>, "
                f"<{c2.x:.3f}, {c2.y:.3f}>, <{e.x:.3f}, {e.y:.3f}>"
            )

    if len(shape) > 0:
        stream.write("\n")
        stream.write(_pigment(shape[len(shape) - 1].color))
        stream.write("  translate <0.0, 0.0, 0.0>\n")
        stream.write("}\n")