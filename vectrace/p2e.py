"""Output of traced shapes as flattened PostScript for pstoedit back ends."""

from __future__ import annotations

from typing import TextIO

from .geometry import Color, PolynomialDegree, SplineListArray

_PROLOG = (
    "%%Creator: pstoedit",
    "%%BoundingBox: (atend)",
    "%%Pages: (atend)",
    "%%EndComments",
    "%%BeginProlog",
    "/setPageSize { pop pop } def",
    "/ntranslate { neg exch neg exch translate } def",
    "/setshowparams { pop pop pop} def",
    "/awidthshowhex { dup /ASCIIHexDecode filter exch length 2 div cvi string readstring pop awidthshow } def",
    "/backendconstraints { pop pop } def",
    "/pstoedit.newfont { 80 string cvs  findfont  dup length dict begin {1 index /FID ne {def} {pop pop} ifelse} "
    "forall  /Encoding ISOLatin1Encoding def   dup 80 string cvs /FontName exch def  currentdict end  "
    "definefont pop } def",
    "/imagestring 1 string def",
    "%%EndProlog",
    "%%BeginSetup",
    "% textastext doflatten backendconstraints  ",
)

_PAGE_SETUP = (
    " 612 792 setPageSize",
    " 0 setlinecap",
    " 10.0 setmiterlimit",
    " 0 setlinejoin",
    " [ ] 0.0 setdash",
    " 1.0 setlinewidth",
)

_TRAILER = (
    "%%Page: 1 1",
    "% normal end reached by pstoedit.pro",
    "%%Trailer",
    "%%Pages: 1",
    "%%EOF",
)


def _real(value: float) -> str:
    value = float(value)
    return f"{value:.0f} " if value.is_integer() else f"{value:.3f} "


def _cmyk(color: Color) -> str:
    c = 255 - color.r
    m = 255 - color.g
    y = 255 - color.b
    k = min(c, m, y)
    c, m, y = c - k, m - k, y - k
    return f"{c / 255.0:.3f} {m / 255.0:.3f} {y / 255.0:.3f} {k / 255.0:.3f} setcmykcolor\n"


def _only_lines(shape: SplineListArray) -> bool:
    return all(spline.degree == PolynomialDegree.LINEAR for spline_list in shape for spline in spline_list)


def _write_header(stream: TextIO, name: str, shape: SplineListArray) -> None:
    stream.write("%!PS-Adobe-3.0\n")
    stream.write(f"%%Title: flattened PostScript generated by vectrace: {name}\n")
    for line in _PROLOG:
        stream.write(line + "\n")
    stream.write(f"{1 if _only_lines(shape) else 0} 0 backendconstraints\n")
    stream.write("%%EndSetup\n")


def _write_splines(stream: TextIO, shape: SplineListArray) -> None:
    for line in _PAGE_SETUP:
        stream.write(line + "\n")

    path_number = 1
    last_color = Color(0, 0, 0)
    stroke = False
    for index, spline_list in enumerate(shape):
        first = spline_list[0]
        stroke = shape.centerline or spline_list.open

        if index == 0 or spline_list.color != last_color:
            stream.write(("stroke" if stroke else "fill") + "\n")
            stream.write(f"\n\n% {path_number} pathnumber\n")
            stream.write(("% strokedpath" if stroke else "% filledpath") + "\n")
            path_number += 1
            stream.write(_cmyk(spline_list.color))
            last_color = spline_list.color

        stream.write("newpath\n")
        start = first.start_point
        stream.write(" " + _real(start.x) + _real(start.y) + "moveto\n")

        for spline in spline_list:
            end = spline.end_point
            if spline.degree == PolynomialDegree.LINEAR:
                stream.write(" " + _real(end.x) + _real(end.y) + "lineto\n")
            else:
                c1, c2 = spline.control1, spline.control2
                stream.write(
                    " " + _real(c1.x) + _real(c1.y)
                    + " " + _real(c2.x) + _real(c2.y)
                    + " " + _real(end.x) + _real(end.y)
                    + " curveto\n"
                )
        if not spline_list.open:
            stream.write("closepath\n")

    if len(shape) > 0:
        stream.write(("stroke" if stroke else "fill") + "\n")


def write_p2e(stream: TextIO, name: str, llx: int, lly: int, urx: int, ury: int, shape: SplineListArray) -> None:
    """Write ``shape`` as the flattened PostScript that pstoedit reads with ``-bo``."""
    _write_header(stream, name, shape)
    _write_splines(stream, shape)
    stream.write("showpage\n")
    stream.write(f"%%BoundingBox: {llx} {lly} {urx} {ury}\n")
    for line in _TRAILER:
        stream.write(line + "\n")