import math

import numpy as np

from magpie.transform import Transform


def apply(matrix, point):
    return (matrix @ np.array([*point, 1.0]))[:3]


def test_default_is_identity():
    assert np.array_equal(Transform().matrix(), np.identity(4))


def test_position_translates():
    t = Transform()
    t.set_position((1.0, 2.0, 3.0))
    assert np.allclose(apply(t.matrix(), (0.0, 0.0, 0.0)), (1.0, 2.0, 3.0))


def test_rotation_about_y():
    t = Transform()
    t.set_rotation(math.pi / 2, (0.0, 1.0, 0.0))
    assert np.allclose(apply(t.matrix(), (1.0, 0.0, 0.0)), (0.0, 0.0, -1.0))


def test_rotation_preserves_length_and_volume():
    t = Transform()
    t.set_rotation(0.7, (0.0, 0.6, 0.8))
    m = t.matrix()
    point = np.array([3.0, -1.0, 2.0])
    assert math.isclose(np.linalg.norm(apply(m, point)), np.linalg.norm(point))
    assert math.isclose(np.linalg.det(m), 1.0)


def test_scale_determinant():
    t = Transform()
    scale = (2.0, 3.0, 4.0)
    t.set_scale(scale)
    assert math.isclose(np.linalg.det(t.matrix()), np.prod(scale))


def test_origin_maps_to_position():
    t = Transform()
    t.set_origin((1.0, 1.0, 1.0))
    t.set_rotation(1.2, (0.0, 0.0, 1.0))
    t.set_scale((5.0, 5.0, 5.0))
    t.set_position((-4.0, 2.0, 9.0))
    assert np.allclose(apply(t.matrix(), (1.0, 1.0, 1.0)), (-4.0, 2.0, 9.0))


def test_returned_matrix_is_a_copy():
    t = Transform()
    m = t.matrix()
    m[0, 0] = 42.0
    assert np.array_equal(t.matrix(), np.identity(4))


def test_rebuild_after_change():
    t = Transform()
    t.set_position((1.0, 0.0, 0.0))
    first = t.matrix()
    t.set_position((0.0, 1.0, 0.0))
    assert np.allclose(apply(t.matrix(), (0.0, 0.0, 0.0)), (0.0, 1.0, 0.0))
    assert not np.array_equal(first, t.matrix())