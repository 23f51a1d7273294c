import math

import pytest

from gaemi.quaternion import Quaternion
from gaemi.vector import Vector3


def _q(q):
    return pytest.approx((q.x, q.y, q.z, q.w), abs=1e-9)


def _t(q):
    return (q.x, q.y, q.z, q.w)


def test_default_is_identity():
    assert Quaternion() == Quaternion.identity()
    assert _t(Quaternion.identity()) == (0.0, 0.0, 0.0, 1.0)


def test_identity_rotation_leaves_vector_unchanged():
    v = Vector3(1.0, -2.0, 3.0)
    assert Quaternion.identity().rotate(v) == v


def test_quarter_turn_about_z():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, math.pi / 2)
    result = q.rotate(Vector3.UNIT_X)
    assert result.as_tuple() == pytest.approx(Vector3.UNIT_Y.as_tuple(), abs=1e-9)


def test_axis_angle_is_unit_length():
    q = Quaternion.from_axis_angle(Vector3(1.0, 1.0, 0.0).normalized(), 1.3)
    assert q.length() == pytest.approx(1.0)
    assert q.dot(q) == pytest.approx(q.length_sq())


def test_normalized_has_unit_length_and_same_direction():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    n = q.normalized()
    assert n.length() == pytest.approx(1.0)
    assert _t(n) == pytest.approx(tuple(c / q.length() for c in _t(q)))


def test_conjugate_undoes_rotation():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Y, 0.8)
    v = Vector3(0.3, 1.0, -2.0)
    back = q.conjugated().rotate(q.rotate(v))
    assert back.as_tuple() == pytest.approx(v.as_tuple())


def test_concatenate_with_conjugate_is_identity():
    q = Quaternion.from_axis_angle(Vector3.UNIT_X, 1.1)
    assert _t(q.concatenate(q.conjugated())) == _q(Quaternion.identity())


def test_concatenate_applies_self_first():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.7)
    p = Quaternion.from_axis_angle(Vector3.UNIT_X, -0.4)
    v = Vector3(1.0, 2.0, 3.0)
    combined = q.concatenate(p).rotate(v)
    assert combined.as_tuple() == pytest.approx(p.rotate(q.rotate(v)).as_tuple())


def test_concatenate_same_axis_adds_angles():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.3)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.5)
    assert _t(a.concatenate(b)) == _q(Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.3 + 0.5))


def test_slerp_endpoints():
    a = Quaternion.identity()
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, math.pi / 2)
    assert _t(a.slerp(b, 0.0)) == _q(a)
    assert _t(a.slerp(b, 1.0)) == _q(b)


def test_slerp_halfway_halves_angle():
    a = Quaternion.identity()
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, math.pi / 2)
    expected = Quaternion.from_axis_angle(Vector3.UNIT_Z, math.pi / 4)
    assert _t(a.slerp(b, 0.5)) == _q(expected)


def test_slerp_takes_short_path_for_negated_target():
    a = Quaternion.identity()
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, math.pi / 2)
    negated = Quaternion(-b.x, -b.y, -b.z, -b.w)
    v = Vector3(1.0, 0.0, 0.0)
    assert a.slerp(negated, 0.5).rotate(v).as_tuple() == pytest.approx(
        a.slerp(b, 0.5).rotate(v).as_tuple()
    )


def test_slerp_of_equal_quaternions_uses_linear_fallback():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Y, 0.5)
    assert _t(q.slerp(q, 0.3)) == _q(q)


def test_lerp_endpoints_and_unit_length():
    a = Quaternion.identity()
    b = Quaternion.from_axis_angle(Vector3.UNIT_X, 1.0)
    assert _t(a.lerp(b, 0.0)) == _q(a)
    assert _t(a.lerp(b, 1.0)) == _q(b)
    assert a.lerp(b, 0.4).length() == pytest.approx(1.0)


def test_rotation_preserves_length():
    q = Quaternion.from_axis_angle(Vector3(1.0, 2.0, 2.0).normalized(), 2.2)
    v = Vector3(3.0, -1.0, 0.5)
    assert q.rotate(v).length() == pytest.approx(v.length())