import io

from vectrace.geometry import Color, PolynomialDegree, RealCoord, Spline, SplineList, SplineListArray
from vectrace.sketch import write_sk


def _line(x0, y0, x1, y1):
    a, b = RealCoord(x0, y0), RealCoord(x1, y1)
    return Spline(a, a, b, b, PolynomialDegree.LINEAR)


def _curve(x0, y0, x1, y1, x2, y2, x3, y3):
    return Spline(RealCoord(x0, y0), RealCoord(x1, y1), RealCoord(x2, y2), RealCoord(x3, y3))


def _render(shape):
    out = io.StringIO()
    write_sk(out, "shape", 0, 0, 10, 10, shape)
    return out.getvalue().splitlines()


def test_header_for_empty_shape():
    assert _render(SplineListArray()) == [
        "##Sketch 1 0",
        "document()",
        "layer('Layer 1',1,1,0,0)",
        "guess_cont()",
    ]


def test_filled_list():
    shape = SplineListArray([SplineList([_line(0.5, 2, 3, 2), _line(3, 2, 0.5, 2)], color=Color(255, 0, 0))])
    lines = _render(shape)[4:]
    assert lines == [
        "fp((1,0,0))",
        "le()",
        "b()",
        "bs(0.5,2,0)",
        "bs(3,2,0)",
        "bs(0.5,2,0)",
        "bC()",
    ]


def test_open_list_is_stroked_and_not_closed():
    shape = SplineListArray([SplineList([_line(0, 0, 1, 1)], open=True)])
    lines = _render(shape)[4:]
    assert lines[0].startswith("lp((")
    assert lines[1] == "fe()"
    assert "bC()" not in lines


def test_centerline_shape_is_stroked():
    shape = SplineListArray([SplineList([_line(0, 0, 1, 1)])], centerline=True)
    lines = _render(shape)
    assert "fe()" in lines
    assert "le()" not in lines
    assert "bC()" not in lines


def test_curve_written_as_bc():
    shape = SplineListArray([SplineList([_curve(0, 0, 1, 2, 3, 4, 5, 6)])])
    lines = _render(shape)
    assert "bc(1,2,3,4,5,6,0)" in lines
    assert lines.count("bs(0,0,0)") == 1


def test_one_object_per_list():
    shape = SplineListArray([
        SplineList([_line(0, 0, 1, 1)], color=Color(0, 0, 0)),
        SplineList([_line(2, 2, 3, 3)], color=Color(0, 0, 0)),
        SplineList([_line(4, 4, 5, 5)], color=Color(0, 255, 0), open=True),
    ])
    lines = _render(shape)
    assert lines.count("b()") == 3
    assert lines.count("bC()") == 2
    assert sum(1 for line in lines if line.startswith(("fp((", "lp(("))) == 3