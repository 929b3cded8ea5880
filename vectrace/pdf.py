"""Output of traced shapes as a single-page PDF document."""

from __future__ import annotations

import math
from typing import TextIO

from .geometry import Color, PolynomialDegree, SplineListArray

# Byte offsets of the fixed objects and the length of the fixed parts of
# the page and content objects; they follow from the text written below.
_PAGE_FIXED_END = 366
_CONTENTS_FIXED_LENGTH = 50
_PROCSET_LENGTH = 25


def _lround(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _real(value: float) -> str:
    """Snap to a sixth of a unit and format without decimals when integral."""
    snapped = _lround(6.0 * value) / 6.0
    return f"{snapped:.0f} " if snapped == _lround(snapped) else f"{snapped:.3f} "


def _header(llx: int, lly: int, urx: int, ury: int) -> str:
    return (
        "%PDF-1.2\n"
        "1 0 obj\n"
        "   << /Type /Catalog\n"
        "      /Outlines 2 0 R\n"
        "      /Pages 3 0 R\n"
        "   >>\n"
        "endobj\n"
        "2 0 obj\n"
        "   << /Type /Outlines\n"
        "      /Count 0\n"
        "   >>\n"
        "endobj\n"
        "3 0 obj\n"
        "   << /Type /Pages\n"
        "      /Kids [4 0 R]\n"
        "      /Count 1\n"
        "   >>\n"
        "endobj\n"
        "4 0 obj\n"
        "   << /Type /Page\n"
        "      /Parent 3 0 R\n"
        f"      /MediaBox [{llx} {lly} {urx} {ury}]\n"
        "      /Contents 5 0 R\n"
        "      /Resources << /ProcSet 6 0 R >>\n"
        "   >>\n"
        "endobj\n"
    )


def _content(shape: SplineListArray) -> str:
    parts: list[str] = []
    last_color = Color(0, 0, 0)
    stroke = False
    for index, spline_list in enumerate(shape):
        first = spline_list[0]
        stroke = shape.centerline or spline_list.open

        if index == 0 or spline_list.color != last_color:
            if index > 0:
                # A stroke or fill closes the path implicitly.
                parts.append(("S" if stroke else "f") + "\n")
            color = spline_list.color
            parts.append(
                f"{color.r / 255.0:.3f} {color.g / 255.0:.3f} {color.b / 255.0:.3f} "
                f"{'RG' if stroke else 'rg'}\n"
            )
            last_color = color

        start = first.start_point
        parts.append(_real(start.x) + _real(start.y) + "m\n")

        for spline in spline_list:
            end = spline.end_point
            if spline.degree == PolynomialDegree.LINEAR:
                parts.append(_real(end.x) + _real(end.y) + "l\n")
            else:
                c1, c2 = spline.control1, spline.control2
                parts.append(
                    _real(c1.x) + _real(c1.y) + " "
                    + _real(c2.x) + _real(c2.y) + " "
                    + _real(end.x) + _real(end.y) + " c \n"
                )

    if len(shape) > 0:
        parts.append(("S" if stroke else "f") + "\n")
    return "".join(parts)


def _trailer(length: int, llx: int, lly: int, urx: int, ury: int) -> str:
    contents_offset = _PAGE_FIXED_END + sum(len(str(v)) for v in (llx, lly, urx, ury))
    procset_offset = contents_offset + _CONTENTS_FIXED_LENGTH + length + len(str(length))
    return (
        "6 0 obj\n"
        "   [/PDF]\n"
        "endobj\n"
        "xref\n"
        "0 7\n"
        "0000000000 65535 f \n"
        "0000000009 00000 n \n"
        "0000000092 00000 n \n"
        "0000000150 00000 n \n"
        "0000000225 00000 n \n"
        f"{contents_offset:010d} 00000 n \n"
        f"{procset_offset:010d} 00000 n \n"
        "trailer\n"
        "   << /Size 7\n"
        "      /Root 1 0 R\n"
        "   >>\n"
        "startxref\n"
        f"{procset_offset + _PROCSET_LENGTH}\n"
        "%%EOF\n"
    )


def write_pdf(stream: TextIO, name: str, llx: int, lly: int, urx: int, ury: int, shape: SplineListArray) -> None:
    """Write ``shape`` as a one-page PDF with the given media box."""
    content = _content(shape)
    length = len(content)
    stream.write(_header(llx, lly, urx, ury))
    stream.write("5 0 obj\n")
    stream.write(f"   << /Length {length} >>\n")
    stream.write("stream\n")
    stream.write(content)
    stream.write("endstream\n")
    stream.write("endobj\n")
    stream.write(_trailer(length, llx, lly, urx, ury))