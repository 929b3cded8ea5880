import pytest

from vectrace.geometry import Coord, RealCoord
from vectrace.vector import (
    Vector,
    add_int_point,
    add_point,
    int_add,
    int_scale,
    int_scale_real,
    int_subtract,
    int_subtract_point,
    make_vector,
    point_add,
    point_scale,
    point_subtract,
    subtract_point,
    vector_to_point,
)


def test_magnitude():
    assert Vector(3.0, 4.0).magnitude() == pytest.approx(5.0)


def test_normalized_has_unit_length():
    v = Vector(2.0, -7.0, 1.5)
    assert v.normalized().magnitude() == pytest.approx(1.0)


def test_normalized_zero_vector_unchanged():
    zero = Vector(0.0, 0.0, 0.0)
    assert zero.normalized() == zero


def test_dot_is_symmetric_and_matches_square_magnitude():
    a = Vector(1.5, -2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    assert a.dot(b) == pytest.approx(b.dot(a))
    assert a.dot(a) == pytest.approx(a.magnitude() ** 2)


def test_scaled_and_absolute():
    v = Vector(-1.0, 2.0, -3.0)
    assert v.scaled(2.0).magnitude() == pytest.approx(2 * v.magnitude())
    assert v.absolute() == Vector(1.0, 2.0, 3.0)


def test_angle_right_angle():
    assert Vector(1.0, 0.0).angle(Vector(0.0, 5.0)) == pytest.approx(90.0)


def test_angle_parallel_and_opposite():
    v = Vector(2.0, 3.0)
    assert v.angle(v.scaled(4.0)) == pytest.approx(0.0)
    assert v.angle(v.scaled(-1.0)) == pytest.approx(180.0)


def test_angle_is_symmetric():
    a = Vector(1.0, 2.0)
    b = Vector(-3.0, 0.5)
    assert a.angle(b) == pytest.approx(b.angle(a))


def test_vector_addition():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-1.0, -2.0, -3.0)
    assert a + b == Vector(0.0, 0.0, 0.0)


def test_make_vector_round_trip():
    c = RealCoord(1.25, -3.5)
    assert vector_to_point(make_vector(c)) == c


def test_add_and_subtract_point_round_trip():
    c = RealCoord(1.0, 2.0, 3.0)
    v = Vector(0.25, -0.5, 4.0)
    assert subtract_point(add_point(c, v), v) == c


def test_point_subtract_then_add():
    a = RealCoord(5.0, 7.0)
    b = RealCoord(1.0, 2.0)
    assert add_point(b, point_subtract(a, b)) == a


def test_point_add_and_scale():
    c = RealCoord(1.5, -2.0, 0.5)
    assert point_add(c, c) == point_scale(c, 2.0)


def test_add_int_point_rounds_half_away_from_zero():
    assert add_int_point(Coord(1, 1), Vector(0.5, -0.4)) == Coord(2, 1)


def test_int_subtract_point_wraps_like_unsigned_short():
    assert int_subtract_point(Coord(0, 3), Coord(1, 1)) == Coord(65535, 2)


def test_int_add_inverts_int_subtract_point():
    a = Coord(10, 4)
    b = Coord(3, 9)
    assert int_add(int_subtract_point(a, b), b) == a


def test_int_subtract_keeps_sign():
    v = int_subtract(Coord(1, 5), Coord(4, 2))
    assert v == Vector(-3.0, 3.0, 0.0)
    assert make_vector(int_scale_real(Coord(1, 5), 1.0)) == int_subtract(Coord(1, 5), Coord(0, 0))


def test_int_scale_matches_repeated_add():
    c = Coord(7, 11)
    assert int_scale(c, 2) == int_add(c, c)


def test_int_scale_real():
    c = Coord(4, 6)
    scaled = int_scale_real(c, 0.5)
    assert point_scale(scaled, 2.0) == RealCoord(4.0, 6.0)