"""Tests for the pure vector operations.

Why these tests exist:
- Each free function documents which vector type it returns
- Inputs must never be modified
"""

import math

import pytest

from steerecs import InvalidArgumentError, MutableVector2D, Vector2D
from steerecs.core.vector import operations as vec

EPS = 1e-9


def test_vector_factory_defaults_to_immutable_zero():
    v = vec.vector()
    assert isinstance(v, Vector2D)
    assert v == Vector2D(0.0, 0.0)
    assert isinstance(vec.vector(1, 2, mutable=True), MutableVector2D)


@pytest.mark.parametrize("mutable", [True, False])
def test_copy_selects_type(mutable):
    source = Vector2D(1.0, 2.0)
    copied = vec.copy(source, mutable=mutable)
    assert copied == source
    assert copied is not source
    assert copied.is_mutable is mutable


def test_copy_without_flag_keeps_source_type():
    assert isinstance(vec.copy(MutableVector2D(1, 2)), MutableVector2D)
    assert isinstance(vec.copy(Vector2D(1, 2)), Vector2D)


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (vec.add(Vector2D(1, 2), Vector2D(3, 4)), Vector2D(4, 6)),
        (vec.add_scaled(Vector2D(1, 2), Vector2D(1, 1), 3.0), Vector2D(4, 5)),
        (vec.subtract(Vector2D(1, 2), Vector2D(3, 4)), Vector2D(-2, -2)),
        (vec.multiply(Vector2D(1, 2), 2.5), Vector2D(2.5, 5)),
    ],
    ids=["add", "add_scaled", "subtract", "multiply"],
)
def test_scratch_operations_return_mutable(result, expected):
    """add/subtract/multiply hand back fresh scratch vectors."""
    assert isinstance(result, MutableVector2D)
    assert result == expected


def test_scratch_operations_leave_inputs_alone():
    first = MutableVector2D(1.0, 1.0)
    second = MutableVector2D(2.0, 2.0)
    vec.add(first, second)
    vec.subtract(first, second)
    vec.multiply(first, 10.0)
    assert first == Vector2D(1.0, 1.0)
    assert second == Vector2D(2.0, 2.0)


@pytest.mark.parametrize("cls", [Vector2D, MutableVector2D])
def test_divide_and_normalise_inherit_input_type(cls):
    source = cls(3.0, 4.0)

    divided = vec.divide(source, 2.0)
    assert type(divided) is cls
    assert divided == Vector2D(1.5, 2.0)

    unit = vec.normalise(source)
    assert type(unit) is cls
    assert unit.roughly_equals(Vector2D(0.6, 0.8), EPS)

    assert source == Vector2D(3.0, 4.0)


def test_divide_by_zero_rejected():
    with pytest.raises(InvalidArgumentError):
        vec.divide(Vector2D(1.0, 1.0), 0.0)


def test_rotate_and_wrap_are_pure():
    source = Vector2D(1.0, 0.0)
    assert vec.rotate(source, math.pi).roughly_equals(Vector2D(-1.0, 0.0), EPS)
    assert vec.wrap(Vector2D(-5.0, 15.0), 10.0, 10.0) == Vector2D(5.0, 5.0)
    assert source == Vector2D(1.0, 0.0)


def test_scalar_product_returns_dot_product():
    assert vec.scalar_product(Vector2D(1, 2), Vector2D(3, 4)) == 11.0


def test_distance_and_direction_between():
    assert vec.distance(Vector2D(0, 0), Vector2D(0, 7)) == 7.0
    direction = vec.direction_between(Vector2D(0, 0), Vector2D(0, 7))
    assert direction.roughly_equals(Vector2D(0.0, 1.0), EPS)


def test_to_cartesian_uses_radius_then_angle():
    """Polar vectors hold (r, theta): x = r cos(theta), y = r sin(theta)."""
    cartesian = vec.to_cartesian(Vector2D(2.0, math.pi / 2))
    assert cartesian.roughly_equals(Vector2D(0.0, 2.0), EPS)


@pytest.mark.parametrize(
    "point",
    [Vector2D(3.0, 4.0), Vector2D(-3.0, 4.0), Vector2D(-1.0, -1.0), Vector2D(0.0, -2.0)],
)
def test_to_polar_inverts_to_cartesian(point):
    """to_polar uses atan2, so every quadrant converts back exactly."""
    polar = vec.to_polar(point)
    assert math.isclose(polar.r, point.magnitude())
    assert vec.to_cartesian(polar).roughly_equals(point, EPS)


def test_polar_conversions_inherit_input_type():
    assert isinstance(vec.to_polar(MutableVector2D(1, 1)), MutableVector2D)
    assert isinstance(vec.to_cartesian(Vector2D(1, 0)), Vector2D)
