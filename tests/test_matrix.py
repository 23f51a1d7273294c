import math

import pytest

from gaemi.matrix import (
    Matrix3,
    Matrix4,
    transform_vector2,
    transform_vector3,
    transform_with_persp_div,
)
from gaemi.quaternion import Quaternion
from gaemi.vector import Vector2, Vector3


def _approx_matrix(m):
    return pytest.approx(m.flat(), abs=1e-9)


def test_identity_rows():
    assert Matrix4.identity().rows == (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    assert Matrix3() == Matrix3.identity()


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        Matrix3(((1.0, 2.0),))
    with pytest.raises(ValueError):
        Matrix4(Matrix3.identity().rows)


def test_identity_is_neutral_for_product():
    m = Matrix4.create_rotation_x(0.3) * Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    assert m * Matrix4.identity() == m
    assert Matrix4.identity() * m == m


def test_matrix3_product_identity():
    m = Matrix3.create_rotation(0.7) * Matrix3.create_scale(2.0, 5.0)
    assert Matrix3.identity() * m == m


def test_matrix3_rotation_moves_unit_x_to_unit_y():
    result = transform_vector2(Vector2.UNIT_X, Matrix3.create_rotation(math.pi / 2))
    assert (result.x, result.y) == pytest.approx((Vector2.UNIT_Y.x, Vector2.UNIT_Y.y), abs=1e-9)


def test_matrix3_translation_affects_points_not_directions():
    trans = Vector2(4.0, -3.0)
    m = Matrix3.create_translation(trans)
    assert transform_vector2(Vector2.ZERO, m) == trans
    assert transform_vector2(Vector2.UNIT_X, m, 0.0) == Vector2.UNIT_X


def test_matrix3_scale_forms_agree():
    assert Matrix3.create_scale(Vector2(2.0, 2.0)) == Matrix3.create_scale(2.0)
    assert Matrix3.create_scale(2.0) == Matrix3.create_scale(2.0, 2.0)


def test_translation_round_trip():
    trans = Vector3(1.5, -2.0, 7.0)
    m = Matrix4.create_translation(trans)
    assert m.translation() == trans
    assert m.flat()[12:15] == trans.as_tuple()
    assert transform_vector3(Vector3.ZERO, m) == trans


def test_scale_round_trip():
    factors = Vector3(2.0, 3.0, 4.0)
    m = Matrix4.create_scale(factors)
    assert m.scale() == factors
    assert m.x_axis() == Vector3.UNIT_X
    assert m.y_axis() == Vector3.UNIT_Y
    assert m.z_axis() == Vector3.UNIT_Z
    assert Matrix4.create_scale(2.0, 3.0, 4.0) == m


def test_uniform_scale_and_partial_scale_error():
    assert Matrix4.create_scale(3.0) == Matrix4.create_scale(3.0, 3.0, 3.0)
    with pytest.raises(ValueError):
        Matrix4.create_scale(1.0, 2.0)


@pytest.mark.parametrize(
    "factory, source, expected",
    [
        (Matrix4.create_rotation_z, Vector3.UNIT_X, Vector3.UNIT_Y),
        (Matrix4.create_rotation_x, Vector3.UNIT_Y, Vector3.UNIT_Z),
        (Matrix4.create_rotation_y, Vector3.UNIT_Z, Vector3.UNIT_X),
    ],
)
def test_quarter_turn_rotations(factory, source, expected):
    result = transform_vector3(source, factory(math.pi / 2))
    assert result.as_tuple() == pytest.approx(expected.as_tuple(), abs=1e-9)


def test_rotation_preserves_length():
    v = Vector3(1.0, 2.0, 3.0)
    m = Matrix4.create_rotation_x(0.4) * Matrix4.create_rotation_y(1.1) * Matrix4.create_rotation_z(-0.8)
    assert transform_vector3(v, m).length() == pytest.approx(v.length())


def test_inverse_times_matrix_is_identity():
    m = (
        Matrix4.create_scale(2.0, 3.0, 0.5)
        * Matrix4.create_rotation_z(0.9)
        * Matrix4.create_translation(Vector3(5.0, -1.0, 2.0))
    )
    assert (m * m.inverted()).flat() == _approx_matrix(Matrix4.identity())
    assert (m.inverted() * m).flat() == _approx_matrix(Matrix4.identity())


def test_inverse_of_translation_undoes_it():
    trans = Vector3(3.0, 4.0, 5.0)
    inverse = Matrix4.create_translation(trans).inverted()
    assert inverse.translation().as_tuple() == pytest.approx((trans * -1.0).as_tuple())


def test_singular_matrix_cannot_be_inverted():
    with pytest.raises(ValueError):
        Matrix4.create_scale(1.0, 0.0, 1.0).inverted()


def test_ortho_unit_box_is_identity():
    assert Matrix4.create_ortho(2.0, 2.0, 0.0, 1.0) == Matrix4.identity()


def test_simple_view_proj_matches_translation_for_unit_box():
    assert Matrix4.create_simple_view_proj(2.0, 2.0) == Matrix4.create_translation(Vector3.UNIT_Z)


def test_perspective_maps_near_and_far_planes():
    m = Matrix4.create_perspective_fov(math.pi / 2, 800.0, 800.0, 1.0, 10.0)
    near_point = transform_with_persp_div(Vector3(0.0, 0.0, 1.0), m)
    far_point = transform_with_persp_div(Vector3(0.0, 0.0, 10.0), m)
    assert near_point.z == pytest.approx(0.0, abs=1e-9)
    assert far_point.z == pytest.approx(1.0)


def test_persp_div_skipped_when_w_near_zero():
    v = Vector3(1.0, 2.0, 3.0)
    assert transform_with_persp_div(v, Matrix4.identity(), 0.0) == v


def test_look_at_places_target_on_view_axis():
    eye = Vector3(1.0, 2.0, 3.0)
    target = Vector3(4.0, 2.0, 3.0)
    m = Matrix4.create_look_at(eye, target, Vector3.UNIT_Z)
    result = transform_vector3(target, m)
    assert result.as_tuple() == pytest.approx((0.0, 0.0, (target - eye).length()), abs=1e-9)
    assert transform_vector3(eye, m).as_tuple() == pytest.approx(Vector3.ZERO.as_tuple(), abs=1e-9)


def test_quaternion_matrix_matches_rotation_matrix():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.6)
    assert Matrix4.create_from_quaternion(q).flat() == _approx_matrix(Matrix4.create_rotation_z(0.6))


def test_identity_quaternion_gives_identity_matrix():
    assert Matrix4.create_from_quaternion(Quaternion.identity()) == Matrix4.identity()


def test_matrices_are_hashable_by_value():
    a = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    b = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    assert len({a, b}) == 1