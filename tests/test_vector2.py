import math

import pytest

from utilkit.geometry.vector2 import Vector2


def test_zero_and_defaults():
    assert Vector2.zero() == Vector2() == Vector2(0, 0)


def test_directional_moves_mutate_and_chain():
    v = Vector2(1, 1)
    same = v.up(3).right(2)
    assert same is v
    assert v == Vector2(3, -2)

    v.down(2).left(3)
    assert v == Vector2(0, 0)


def test_arithmetic_returns_new_instances():
    a, b = Vector2(1, 2), Vector2(3, 5)

    assert a + b == Vector2(4, 7)
    assert b - a == Vector2(2, 3)
    assert a.add(b) == a + b
    assert a.subtract(b) == a - b
    assert a * 2 == Vector2(2, 4)
    assert 2 * a == Vector2(2, 4)
    assert a.scale(0.5) == Vector2(0.5, 1)
    assert b / 2 == Vector2(1.5, 2.5)
    assert a == Vector2(1, 2)


def test_operators_reject_unrelated_types():
    with pytest.raises(TypeError):
        Vector2(1, 1) + 1
    with pytest.raises(TypeError):
        Vector2(1, 1) * Vector2(1, 1)


def test_length_and_normalize():
    v = Vector2(3, 4)
    assert v.length == 5
    n = v.normalize()
    assert n == Vector2(0.6, 0.8)
    assert math.isclose(n.length, 1.0)


def test_normalize_zero_vector():
    assert Vector2.zero().normalize() == Vector2.zero()


def test_dot_and_distance():
    assert Vector2(1, 2).dot(Vector2(3, 4)) == 11
    assert Vector2(0, 0).distance_to(Vector2(3, 4)) == 5


@pytest.mark.parametrize("other, degrees", [
    (Vector2(1, 0), 0.0),
    (Vector2(0, 1), 90.0),
    (Vector2(-2, 0), 180.0),
    (Vector2(1, 1), 45.0),
])
def test_angle_between(other, degrees):
    assert math.isclose(Vector2(1, 0).angle_between(other), degrees, abs_tol=1e-9)


def test_clamp():
    assert Vector2.clamp_value(5, 0, 3) == 3
    assert Vector2.clamp_value(-1, 0, 3) == 0
    assert Vector2(-5, 10).clamp(0, 4, 0, 4) == Vector2(0, 4)


def test_clone_is_independent():
    v = Vector2(1, 2)
    c = v.clone()
    c.right(1)
    assert v == Vector2(1, 2)
    assert c == Vector2(2, 2)


def test_equality_and_hashing():
    assert Vector2(1, 2) != Vector2(1, 2.0000001)
    assert Vector2(1, 2) != (1, 2)
    assert hash(Vector2(1, 2)) == hash(Vector2(1.0, 2.0))


def test_vectors_work_as_dict_keys():
    visited = {Vector2(0, 0): "origin", Vector2(1, 2): "spot"}
    assert visited[Vector2(1, 2)] == "spot"
    assert Vector2(0, 0) in visited
    assert len({Vector2(3, 4), Vector2(3, 4), Vector2(4, 3)}) == 2


def test_str():
    assert str(Vector2(1.5, -2.0)) == "(1.5, -2.0)"
