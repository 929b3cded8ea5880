import io

from vectrace.geometry import Color, PolynomialDegree, RealCoord, Spline, SplineList, SplineListArray
from vectrace.svg import write_svg

P = RealCoord


def line(x0, y0, x1, y1):
    return Spline(P(x0, y0), P(x0, y0), P(x1, y1), P(x1, y1), PolynomialDegree.LINEAR)


def render(shape, llx=0, lly=0, urx=0, ury=0):
    out = io.StringIO()
    write_svg(out, "name", llx, lly, urx, ury, shape)
    return out.getvalue()


def test_empty_document():
    text = render(SplineListArray(), 0, 0, 40, 30)
    assert text == (
        '<?xml version="1.0" standalone="yes"?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" width="40" height="30">\n'
        "</svg>\n"
    )


def test_filled_path_is_closed():
    shape = SplineListArray([SplineList([line(10, 20, 30, 40)], Color(0xFF, 0, 0))])
    text = render(shape, 0, 0, 100, 100)
    assert '<path style="fill:#ff0000; stroke:none;" d="M10 80L30 60z"/>\n' in text
    assert text.endswith("</svg>\n")


def test_open_path_is_stroked_and_not_closed():
    shape = SplineListArray([SplineList([line(1, 2, 3, 4)], Color(0, 0, 0xFF), open=True)])
    text = render(shape)
    assert 'style="stroke:#0000ff; fill:none;"' in text
    assert "z" not in text.split('d="')[1]


def test_same_colour_lists_share_a_path():
    shape = SplineListArray([SplineList([line(0, 0, 1, 1)]), SplineList([line(2, 2, 3, 3)])])
    text = render(shape)
    assert text.count("<path") == 1
    assert text.count("M") == 2


def test_colour_change_starts_new_path():
    shape = SplineListArray(
        [SplineList([line(0, 0, 1, 1)]), SplineList([line(2, 2, 3, 3)], Color(0, 0xFF, 0))]
    )
    text = render(shape)
    assert text.count("<path") == 2
    assert text.count('"/>\n') == 2


def test_curve_command_flips_y():
    curve = Spline(P(0, 0), P(1, 2), P(3, 4), P(5, 6))
    shape = SplineListArray([SplineList([curve])])
    text = render(shape)
    assert "M0 0C1 -2 3 -4 5 -6z" in text