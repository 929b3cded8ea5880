"""Thin the strokes of a bitmap to one pixel width.

Each colour other than the background is thinned separately with
Rosenfeld's parallel thinning algorithm, driven by neighbourhood maps.
"""

from __future__ import annotations

import logging
from typing import Hashable, Optional

from .geometry import Bitmap, Color, TracingError

logger = logging.getLogger(__name__)

_DEFAULT_BACKGROUND = Color(0xFF, 0xFF, 0xFF)

# Direction masks for the four sub-passes: north, south, west, east.
_MASKS = (0o200, 0o002, 0o040, 0o010)

# The neighbourhood map of a pixel is the nine bits abcdefghi for
#
#     a b c
#     d e f
#     g h i
#
# An entry is 1 when the pixel is 8-simple and not an end point, so that
# it may be deleted.  Only maps with the centre bit e set can be 1; these
# are the odd rows of sixteen entries, listed here by row number.
_ODD_ROWS = {
    1: "0001001101110011",
    3: "0011101100110011",
    5: "0000000011110011",
    7: "0000000000110011",
    9: "0000000011110011",
    11: "1011101111111111",
    13: "1000000011110011",
    15: "1011101111111111",
    17: "0000000000000000",
    19: "1011101100110011",
    21: "0000000000000000",
    23: "0000000000110011",
    25: "1000000011110011",
    27: "1011101111111111",
    29: "1000000011110011",
    31: "1011101111111111",
}

_TODELETE: tuple[bool, ...] = tuple(
    digit == "1"
    for row in range(32)
    for digit in _ODD_ROWS.get(row, "0" * 16)
)


def _grey_level(color: Color) -> int:
    """The single-plane value standing for ``color``."""
    if color.r == color.g == color.b:
        return color.r
    return int(color.r * 0.30 + color.g * 0.59 + color.b * 0.11 + 0.5) & 0xFF


def _thin_colour(
    cells: list[Hashable],
    width: int,
    height: int,
    colour: Hashable,
    background: Hashable,
    guarded: bool,
) -> None:
    """Thin the pixels of ``colour`` in ``cells``, replacing deleted ones.

    ``guarded`` selects the variant used for three-plane images, which
    leaves the left column in the west pass, the right column in the east
    pass and the bottom row in the south pass alone.
    """
    qb = [0] * width
    count = 1
    passes = 0
    last_row = width * (height - 1)

    while count:
        passes += 1
        count = 0

        for i, mask in enumerate(_MASKS):
            skip_left = guarded and i == 2

            # Build the initial previous-scanline buffer.
            p = int(cells[0] == colour)
            for x in range(width - 1):
                p = ((p << 1) & 0o006) | int(cells[x + 1] == colour)
                qb[x] = p & 0xFF

            # Scan the image for deletion candidates.
            for y in range(height - 1):
                row = y * width
                below = row + width
                p = ((qb[0] << 2) & 0o330) | int(cells[below] == colour)

                for x in range(width - 1):
                    q = qb[x]
                    p = ((p << 1) & 0o666) | ((q << 3) & 0o110) | int(cells[below + x + 1] == colour)
                    qb[x] = p & 0xFF
                    if not (skip_left and x == 0) and (p & mask) == 0 and _TODELETE[p]:
                        count += 1
                        cells[row + x] = background

                # Right edge pixel.
                p = (p << 1) & 0o666
                if not (guarded and i == 3) and (p & mask) == 0 and _TODELETE[p]:
                    count += 1
                    cells[row + width - 1] = background

            if guarded and i == 1:
                continue

            # Bottom scan line.
            p = (qb[0] << 2) & 0o330
            for x in range(width):
                q = qb[x]
                p = ((p << 1) & 0o666) | ((q << 3) & 0o110)
                if not (skip_left and x == 0) and (p & mask) == 0 and _TODELETE[p]:
                    count += 1
                    cells[last_row + x] = background

        logger.debug("thinning: pass %d, %d pixels deleted", passes, count)


def thin_image(bitmap: Bitmap, bg_color: Optional[Color] = None) -> None:
    """Thin every non-background colour of ``bitmap`` in place.

    The background defaults to white.  Only one- and three-plane bitmaps
    are supported; any other raises :class:`TracingError`.
    """
    background = bg_color if bg_color is not None else _DEFAULT_BACKGROUND
    width, height, planes = bitmap.width, bitmap.height, bitmap.planes

    if planes == 3:
        bits = bytes(bitmap.bits)
        cells: list[Hashable] = [bits[i : i + 3] for i in range(0, len(bits), 3)]
        bg_cell: Hashable = bytes((background.r, background.g, background.b))
        guarded = True
    elif planes == 1:
        cells = list(bitmap.bits)
        bg_cell = _grey_level(background)
        guarded = False
    else:
        logger.debug("thin_image: %d-plane images are not supported", planes)
        raise TracingError("thin_image: wrong plane images are passed")

    if width == 0 or height == 0:
        return

    # Colours in the order they are first met scanning from the last pixel.
    colours = [c for c in dict.fromkeys(reversed(cells)) if c != bg_cell]
    for colour in colours:
        logger.debug("Thinning colour %r", colour)
        _thin_colour(cells, width, height, colour, bg_cell, guarded)

    if planes == 3:
        bitmap.bits[:] = b"".join(cells)  # type: ignore[arg-type]
    else:
        bitmap.bits[:] = bytes(cells)  # type: ignore[arg-type]