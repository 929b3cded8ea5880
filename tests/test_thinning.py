import pytest

from vectrace.geometry import Bitmap, Color, TracingError
from vectrace.thinning import thin_image

WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def grey_bitmap(rows):
    """Build a one-plane bitmap from strings: '#' is black, '.' white."""
    height = len(rows)
    width = len(rows[0])
    bits = bytes(0 if ch == "#" else 255 for row in rows for ch in row)
    return Bitmap(width, height, 1, bits)


def rgb_bitmap(width, height, pixels):
    bitmap = Bitmap(width, height, 3, bytes([255]) * (width * height * 3))
    for (row, col), color in pixels.items():
        bitmap.set_color(row, col, color)
    return bitmap


def foreground(bitmap, bg=WHITE):
    return {
        (r, c)
        for r in range(bitmap.height)
        for c in range(bitmap.width)
        if bitmap.get_color(r, c) != bg
    }


def test_background_only_image_is_unchanged():
    bitmap = grey_bitmap(["....", "....", "...."])
    before = bitmap.copy()
    thin_image(bitmap)
    assert bitmap == before


def test_isolated_pixel_is_kept():
    bitmap = grey_bitmap([".....", "..#..", "....."])
    thin_image(bitmap)
    assert foreground(bitmap) == {(1, 2)}


def test_one_pixel_line_is_kept():
    bitmap = grey_bitmap([".....", ".###.", "....."])
    before = bitmap.copy()
    thin_image(bitmap)
    assert bitmap == before


def test_thick_block_shrinks_but_does_not_vanish():
    rows = [".......", ".#####.", ".#####.", ".#####.", ".#####.", "......."]
    bitmap = grey_bitmap(rows)
    original = foreground(bitmap)
    thin_image(bitmap)
    result = foreground(bitmap)
    assert result
    assert result < original


def test_thinning_is_idempotent():
    rows = ["........", ".######.", ".######.", ".######.", "........"]
    bitmap = grey_bitmap(rows)
    thin_image(bitmap)
    once = bitmap.copy()
    thin_image(bitmap)
    assert bitmap == once


def test_deleted_pixels_become_background():
    rows = ["......", ".####.", ".####.", ".####.", "......"]
    bitmap = grey_bitmap(rows)
    thin_image(bitmap)
    values = set(bitmap.bits)
    assert values <= {0, 255}


def test_rgb_colours_are_thinned_independently():
    red_block = {(r, c): RED for r in range(1, 4) for c in range(1, 4)}
    blue_block = {(r, c): BLUE for r in range(1, 4) for c in range(6, 9)}

    both = rgb_bitmap(10, 5, {**red_block, **blue_block})
    thin_image(both, WHITE)

    red_only = rgb_bitmap(10, 5, red_block)
    thin_image(red_only, WHITE)
    blue_only = rgb_bitmap(10, 5, blue_block)
    thin_image(blue_only, WHITE)

    assert foreground(both) == foreground(red_only) | foreground(blue_only)
    for pos in foreground(red_only):
        assert both.get_color(*pos) == RED
    for pos in foreground(blue_only):
        assert both.get_color(*pos) == BLUE


def test_rgb_result_is_subset_of_original():
    block = {(r, c): RED for r in range(1, 5) for c in range(1, 6)}
    bitmap = rgb_bitmap(7, 6, block)
    thin_image(bitmap)
    result = foreground(bitmap)
    assert result
    assert result <= set(block)
    assert len(result) < len(block)


def test_custom_background_colour():
    bitmap = Bitmap(3, 3, 3, bytes([0, 0, 255]) * 9)
    bitmap.set_color(1, 1, RED)
    thin_image(bitmap, BLUE)
    assert bitmap.get_color(1, 1) == RED
    assert bitmap.get_color(0, 0) == BLUE


def test_unsupported_plane_count_raises():
    bitmap = Bitmap(2, 2, 2)
    with pytest.raises(TracingError):
        thin_image(bitmap)