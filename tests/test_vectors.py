import dataclasses
import math

import pytest

from octaraster.vectors import Vector2, Vector3, Vector4


def test_vector2_defaults_to_zero():
    v = Vector2()
    assert (v.x, v.y) == (0.0, 0.0)
    assert v.is_zero()


def test_vector2_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 4.0)
    assert (a + b) - b == a


def test_vector2_scalar_multiplication_both_sides():
    v = Vector2(1.0, 2.0)
    assert v * 3 == 3 * v
    assert (v * 3).x == pytest.approx(3.0)


def test_vector2_equality_tolerance():
    assert Vector2(1.0, 1.0) == Vector2(1.0005, 0.9995)
    assert not Vector2(1.0, 1.0) == Vector2(1.002, 1.0)


def test_vector2_dot_matches_magnitude():
    v = Vector2(3.0, 4.0)
    assert Vector2.dot(v, v) == pytest.approx(v.magnitude() ** 2)


def test_vector2_normalize_has_unit_length():
    assert Vector2(3.0, -7.0).normalize().magnitude() == pytest.approx(1.0)


def test_vector2_normalize_tiny_vector_is_zero():
    assert Vector2(1e-7, 0.0).normalize().is_zero()


def test_vector2_distance_symmetric():
    a, b = Vector2(1.0, 2.0), Vector2(-4.0, 6.0)
    assert Vector2.distance(a, b) == pytest.approx(Vector2.distance(b, a))
    assert Vector2.distance(a, b) == pytest.approx((a - b).magnitude())


def test_vector2_angle_between():
    assert Vector2.angle_between(Vector2(1, 0), Vector2(0, 5)) == pytest.approx(math.pi / 2)
    assert Vector2.angle_between(Vector2(2, 2), Vector2(1, 1)) == pytest.approx(0.0, abs=1e-6)


def test_vector2_lerp_endpoints():
    a, b = Vector2(1.0, 2.0), Vector2(5.0, -3.0)
    assert Vector2.lerp(a, b, 0.0) == a
    assert Vector2.lerp(a, b, 1.0) == b


def test_vector2_project_onto_zero_returns_onto():
    assert Vector2(3.0, 4.0).project(Vector2()) == Vector2()


def test_vector2_project_onto_parallel_is_identity():
    v = Vector2(2.0, 6.0)
    assert v.project(Vector2(1.0, 3.0)) == v


def test_vector2_reflection_twice_returns_original():
    v = Vector2(3.0, -1.0)
    normal = Vector2(1.0, 1.0).normalize()
    assert v.reflection(normal).reflection(normal) == v


def test_vector3_add_sub_and_negation():
    a = Vector3(1.0, 2.0, 3.0)
    assert a + (-a) == Vector3()
    assert (a - a).is_zero()


def test_vector3_dot_matches_magnitude():
    v = Vector3(1.0, -2.0, 2.0)
    assert Vector3.dot(v, v) == pytest.approx(v.magnitude() ** 2)


def test_vector3_cross_of_axes():
    assert Vector3.cross(Vector3(1, 0, 0), Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_vector3_cross_is_orthogonal_to_first_axis():
    a = Vector3(1, 0, 0)
    b = Vector3(0, 1, 0)
    c = Vector3.cross(a, b)
    assert Vector3.dot(c, a) == pytest.approx(0.0)
    assert Vector3.dot(c, b) == pytest.approx(0.0)


def test_vector3_normalize():
    v = Vector3(2.0, -3.0, 6.0).normalize()
    assert v.magnitude() == pytest.approx(1.0)
    assert Vector3(0.0, 0.0, 0.0).normalize() == Vector3()


def test_vector3_equality_tolerance():
    assert Vector3(1, 2, 3) == Vector3(1.0005, 2, 3)
    assert not Vector3(1, 2, 3) == Vector3(1, 2, 3.01)


def test_vector3_is_zero_is_exact():
    assert Vector3().is_zero()
    assert not Vector3(0.0, 0.0, 1e-9).is_zero()


def test_vector3_component_and_with_component():
    v = Vector3(4.0, 5.0, 6.0)
    assert [v.component(i) for i in range(3)] == [4.0, 5.0, 6.0]
    assert v.component(3) == 0.0
    assert v.component(-1) == 0.0
    assert v.with_component(2, 9.0).z == 9.0
    assert v.with_component(2, 9.0).x == 4.0
    assert v.with_component(7, 9.0) == v


def test_vector3_lerp_midpoint_is_equidistant():
    a, b = Vector3(0.0, 1.0, 2.0), Vector3(4.0, -1.0, 8.0)
    mid = Vector3.lerp(a, b, 0.5)
    assert Vector3.distance(a, mid) == pytest.approx(Vector3.distance(mid, b))


def test_vector3_angle_between_perpendicular():
    assert Vector3.angle_between(Vector3(0, 0, 2), Vector3(3, 0, 0)) == pytest.approx(math.pi / 2)


def test_vector3_project_and_reflection():
    v = Vector3(1.0, 2.0, 3.0)
    axis = Vector3(0.0, 0.0, 1.0)
    projected = v.project(axis)
    assert projected.z == pytest.approx(v.z)
    assert projected.x == pytest.approx(0.0)
    assert v.reflection(axis).reflection(axis) == v


def test_vectors_are_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]
    assert v.x == 1.0


def test_vectors_compare_by_tolerance_not_hash():
    v = Vector3(1.0, 2.0, 3.0)
    assert Vector3(1.0005, 2.0, 3.0) in [v]
    assert Vector3(1.01, 2.0, 3.0) not in [v]
    with pytest.raises(TypeError):
        {v}


def test_vector4_from_vector3_is_point():
    v3 = Vector3(1.0, 2.0, 3.0)
    v4 = Vector4.from_vector3(v3)
    assert v4.w == 1.0
    assert v4.is_point()
    assert not v4.is_direction()
    assert v4.to_vector3() == v3


def test_vector4_direction():
    d = Vector4(1.0, 0.0, 0.0, 0.0)
    assert d.is_direction()
    assert not d.is_point()


def test_vector4_homogeneous_divide_round_trip():
    v3 = Vector3(1.0, -2.0, 3.0)
    scaled = Vector4.from_vector3(v3) * 4
    assert scaled.to_homogeneous_vector3() == v3


def test_vector4_homogeneous_with_zero_w_keeps_xyz():
    v = Vector4(1.0, 2.0, 3.0, 0.0)
    assert v.to_homogeneous_vector3() == v.to_vector3()


def test_vector4_magnitude_ignores_w():
    assert Vector4(3.0, 4.0, 0.0, 100.0).magnitude() == pytest.approx(
        Vector3(3.0, 4.0, 0.0).magnitude()
    )


def test_vector4_equality_ignores_w():
    assert Vector4(1, 2, 3, 0) == Vector4(1, 2, 3, 7)
    assert not Vector4(1, 2, 3, 0) == Vector4(1, 2, 4, 0)


def test_vector4_is_zero_ignores_w():
    assert Vector4(0, 0, 0, 5).is_zero()


def test_vector4_dot_includes_w():
    a = Vector4(0.0, 0.0, 0.0, 2.0)
    assert Vector4.dot(a, a) == pytest.approx(a.w * a.w)


def test_vector4_normalize_scales_w_too():
    n = Vector4(0.0, 0.0, 2.0, 2.0).normalize()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.w == pytest.approx(n.z)


def test_vector4_normalize_zero_xyz_gives_zero():
    n = Vector4(0.0, 0.0, 0.0, 3.0).normalize()
    assert n.w == 0.0
    assert n.is_zero()


def test_vector4_normalize_xyz():
    n = Vector4.normalize_xyz(Vector4(0.0, 5.0, 0.0, 9.0))
    assert n == Vector3(0.0, 1.0, 0.0)


def test_vector4_component_access():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert [v.component(i) for i in range(4)] == [1.0, 2.0, 3.0, 4.0]
    assert v.component(4) == 0.0
    assert v.with_component(3, 0.5).w == 0.5


def test_vector4_lerp_interpolates_w():
    a, b = Vector4(0, 0, 0, 0), Vector4(0, 0, 0, 2)
    assert Vector4.lerp(a, b, 0.5).w == pytest.approx(b.w / 2)


def test_vector4_project_onto_zero_returns_onto():
    zero = Vector4()
    assert Vector4(1.0, 2.0, 3.0, 1.0).project(zero) is zero


def test_vector4_distance_matches_difference():
    a, b = Vector4(1, 2, 3, 1), Vector4(4, 6, 3, 1)
    assert Vector4.distance(a, b) == pytest.approx((a - b).magnitude())
    assert Vector4.distance(a, b) == pytest.approx(Vector2.distance(Vector2(1, 2), Vector2(4, 6)))


def test_mixed_types_do_not_add():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) + Vector2(1, 2)  # type: ignore[operator]