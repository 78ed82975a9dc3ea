import math

import pytest

from projsim.vector import Vector, find_angle, parse_vector


def test_default_is_zero_vector():
    v = Vector()
    assert (v.x, v.y) == (0.0, 0.0)
    assert v.magnitude == 0.0


def test_dot_with_itself_is_squared_magnitude():
    v = Vector(1.5, -2.5)
    assert v.dot(v) == pytest.approx(v.magnitude ** 2)


def test_dot_is_symmetric():
    a, b = Vector(1.0, 2.0), Vector(-3.0, 0.5)
    assert a.dot(b) == pytest.approx(b.dot(a))


def test_normalized_has_unit_length_and_same_direction():
    v = Vector(7.0, -2.0)
    unit = v.normalized()
    assert unit.magnitude == pytest.approx(1.0)
    assert find_angle(v, unit) == pytest.approx(0.0, abs=1e-6)


def test_normalized_zero_vector_returns_zero():
    assert Vector(0, 0).normalized() == Vector(0, 0)


def test_add_and_sub_are_inverse():
    a, b = Vector(1.25, -4.0), Vector(3.5, 2.0)
    result = (a + b) - b
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_negation_twice_is_identity():
    v = Vector(2.0, -3.0)
    assert -(-v) == v
    assert (v + -v) == Vector(0, 0)


def test_scalar_multiplication_both_sides():
    v = Vector(1.5, -2.0)
    assert 2 * v == v + v
    assert v * 2 == v + v


def test_division_undoes_multiplication():
    v = Vector(3.0, -6.0)
    assert (v * 4) / 4 == v


def test_multiply_by_vector_is_type_error():
    with pytest.raises(TypeError):
        Vector(1, 2) * Vector(3, 4)


def test_equality_compares_components():
    assert Vector(1, 2) == Vector(1.0, 2.0)
    assert not (Vector(1, 2) == Vector(2, 1))


def test_getitem_returns_components():
    v = Vector(8.0, 9.0)
    assert v[0] == 8.0
    assert v[1] == 9.0


def test_setitem_updates_component_and_magnitude():
    v = Vector(0.0, 0.0)
    v[0] = 3.0
    v[1] = 4.0
    assert (v.x, v.y) == (3.0, 4.0)
    assert v.magnitude == pytest.approx(5.0)


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_index_out_of_range(index):
    v = Vector(1, 2)
    with pytest.raises(IndexError):
        _ = v[index]
    with pytest.raises(IndexError):
        v[index] = 1.0
    assert (v.x, v.y) == (1.0, 2.0)
    assert v.magnitude == pytest.approx(math.sqrt(5.0))


def test_str_format():
    assert str(Vector(3, 4)) == "<3,4> Magnitude: 5"


def test_parse_vector_round_trip():
    assert parse_vector("1.5 -2") == Vector(1.5, -2.0)
    v = Vector(0.25, 12.0)
    assert parse_vector(f"{v.x} {v.y}") == v


def test_parse_vector_needs_two_numbers():
    with pytest.raises(ValueError):
        parse_vector("1.0")
    with pytest.raises(ValueError):
        parse_vector("a b")


def test_find_angle_perpendicular_and_parallel():
    assert find_angle(Vector(1, 0), Vector(0, 2)) == pytest.approx(90.0)
    assert find_angle(Vector(2, 2), Vector(5, 5)) == pytest.approx(0.0, abs=1e-6)


def test_find_angle_opposite_is_straight():
    v = Vector(1.0, 3.0)
    assert find_angle(v, -v) == pytest.approx(math.degrees(math.pi))


def test_find_angle_zero_vector_raises():
    with pytest.raises(ValueError):
        find_angle(Vector(0, 0), Vector(1, 1))