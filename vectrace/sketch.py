"""Output of traced shapes in the Sketch drawing format."""

from __future__ import annotations

from typing import TextIO

from .geometry import PolynomialDegree, SplineListArray


def _g(value: float) -> str:
    return "%g" % value


def write_sk(stream: TextIO, name: str, llx: int, lly: int, urx: int, ury: int, shape: SplineListArray) -> None:
    """Write ``shape`` as a Sketch document with one bezier object per list."""
    stream.write("##Sketch 1 0\n")
    stream.write("document()\n")
    stream.write("layer('Layer 1',1,1,0,0)\n")
    stream.write("guess_cont()\n")

    for spline_list in shape:
        first = spline_list[0]
        stroke = shape.centerline or spline_list.open
        color = spline_list.color

        # Stroked paths get an outline colour and no fill; filled ones the reverse.
        stream.write(
            f"{'lp' if stroke else 'fp'}(({_g(color.r / 255.0)},{_g(color.g / 255.0)},{_g(color.b / 255.0)}))\n"
        )
        stream.write("fe()\n" if stroke else "le()\n")
        stream.write("b()\n")

        start = first.start_point
        stream.write(f"bs({_g(start.x)},{_g(start.y)},0)\n")
        for spline in spline_list:
            end = spline.end_point
            if spline.degree == PolynomialDegree.LINEAR:
                stream.write(f"bs({_g(end.x)},{_g(end.y)},0)\n")
            else:
                c1, c2 = spline.control1, spline.control2
                stream.write(
                    f"bc({_g(c1.x)},{_g(c1.y)},{_g(c2.x)},{_g(c2.y)},{_g(end.x)},{_g(end.y)},0)\n"
                )

        if not stroke:
            stream.write("bC()\n")