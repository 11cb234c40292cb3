import numpy as np
import pytest

from physics3d.shapes import Box, Plane, Shape


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_box_volume_is_product_of_dimensions():
    box = Box(2.0, 3.0, 4.0)
    assert box.volume() == pytest.approx(2.0 * 3.0 * 4.0)


def test_box_volume_follows_scale():
    box = Box(2.0, 3.0, 4.0)
    base = box.volume()
    box.scale = (2.0, 1.0, 1.0)
    assert box.volume() == pytest.approx(2 * base)


def test_box_default_dimensions_are_unit():
    assert np.allclose(Box().dimensions, [1.0, 1.0, 1.0])
    assert Box.type_name == "Box"


def test_box_inertia_is_diagonal_and_linear_in_mass():
    box = Box(1.0, 2.0, 3.0)
    t1 = box.inertia_tensor(1.0)
    t5 = box.inertia_tensor(5.0)
    assert np.allclose(t5, 5 * t1)
    assert np.allclose(t1, np.diag(np.diag(t1)))
    assert np.all(np.diag(t1) > 0)


def test_cube_inertia_is_isotropic():
    t = Box(2.0, 2.0, 2.0).inertia_tensor(3.0)
    d = np.diag(t)
    assert d[0] == pytest.approx(d[1]) == pytest.approx(d[2])


def test_box_inertia_triangle_inequality():
    ixx, iyy, izz = np.diag(Box(1.0, 4.0, 2.5).inertia_tensor(2.0))
    assert ixx + iyy >= izz
    assert iyy + izz >= ixx
    assert ixx + izz >= iyy


def test_box_inertia_axis_ordering():
    # Longest side along y: rotation about y is easiest.
    ixx, iyy, izz = np.diag(Box(1.0, 5.0, 1.0).inertia_tensor(1.0))
    assert iyy < ixx
    assert ixx == pytest.approx(izz)


def test_box_bounding_box_is_symmetric():
    box = Box(2.0, 3.0, 4.0)
    assert np.allclose(box.bounding_box_max(), [1.0, 1.5, 2.0])
    assert np.allclose(box.bounding_box_min(), -box.bounding_box_max())
    assert np.allclose(box.center(), [0.0, 0.0, 0.0])


def test_box_contains_point_is_inclusive():
    box = Box(2.0, 2.0, 2.0)
    assert box.contains_point((0.0, 0.0, 0.0))
    assert box.contains_point((1.0, -1.0, 1.0))
    assert not box.contains_point((1.01, 0.0, 0.0))
    assert not box.contains_point((0.0, 0.0, -1.5))


def test_box_contains_point_rejects_bad_vector():
    with pytest.raises(ValueError):
        Box().contains_point((1.0, 2.0))


def test_box_mesh_sizes_and_index_range():
    box = Box(2.0, 4.0, 6.0)
    vertices = box.vertices()
    assert len(vertices) == 24 * 3
    assert len(box.normals()) == 24 * 3
    indices = box.indices()
    assert len(indices) == 36
    assert indices.max() == 23
    assert indices.min() == 0


def test_box_mesh_vertices_lie_on_corners():
    box = Box(2.0, 4.0, 6.0)
    corners = box.vertices().reshape(-1, 3)
    assert np.allclose(np.abs(corners), box.bounding_box_max())


def test_box_normals_are_unit():
    normals = Box().normals().reshape(-1, 3)
    assert np.allclose(np.linalg.norm(normals, axis=1), 1.0)


def test_box_face_triangulation_pattern():
    indices = Box().indices()
    assert list(indices[:6]) == [0, 1, 2, 0, 2, 3]
    assert list(indices[6:12]) == [4, 5, 6, 4, 6, 7]


def test_box_set_dimensions_regenerates_mesh():
    box = Box(1.0, 1.0, 1.0)
    before = box.vertices().copy()
    box.set_dimensions((2.0, 2.0, 2.0))
    assert np.allclose(box.vertices(), before * 2)
    assert box.volume() == pytest.approx(8.0)


def test_box_set_dimensions_requires_three_components():
    with pytest.raises(ValueError):
        Box().set_dimensions((1.0, 2.0))


def test_box_mesh_is_read_only():
    with pytest.raises(ValueError):
        Box().vertices()[0] = 5.0


def test_plane_has_no_volume():
    assert Plane(3.0, 4.0).volume() == 0.0
    assert Plane.type_name == "Plane"


def test_plane_inertia_is_large_and_isotropic():
    t = Plane().inertia_tensor(2.0)
    assert np.allclose(t, np.eye(3) * 2e6)


def test_plane_bounding_box_has_thin_y():
    plane = Plane(4.0, 6.0)
    assert np.allclose(plane.bounding_box_min(), [-2.0, -0.01, -3.0])
    assert np.allclose(plane.bounding_box_max(), [2.0, 0.01, 3.0])


def test_plane_bounding_box_ignores_y_scale():
    plane = Plane(4.0, 6.0)
    before = plane.bounding_box_max()
    plane.scale = (1.0, 10.0, 1.0)
    assert np.allclose(plane.bounding_box_max(), before)


def test_plane_contains_point():
    plane = Plane(4.0, 6.0)
    assert plane.contains_point((2.0, 0.0, -3.0))
    assert plane.contains_point((0.0, 0.01, 0.0))
    assert not plane.contains_point((0.0, 0.05, 0.0))
    assert not plane.contains_point((2.5, 0.0, 0.0))


def test_plane_mesh():
    plane = Plane(4.0, 6.0)
    vertices = plane.vertices().reshape(-1, 3)
    assert vertices.shape == (4, 3)
    assert np.allclose(vertices[:, 1], 0.0)
    assert np.allclose(np.abs(vertices[:, [0, 2]]), [2.0, 3.0])
    assert list(plane.indices()) == [0, 1, 2, 0, 2, 3]


def test_plane_normals_follow_set_normal():
    plane = Plane()
    plane.set_normal((0.0, 0.0, 2.0))
    assert np.allclose(plane.normal, [0.0, 0.0, 1.0])
    assert np.allclose(plane.normals().reshape(-1, 3), [0.0, 0.0, 1.0])


def test_plane_zero_normal_rejected():
    with pytest.raises(ValueError):
        Plane().set_normal((0.0, 0.0, 0.0))


def test_plane_set_dimensions_regenerates_mesh():
    plane = Plane(2.0, 2.0)
    plane.vertices()
    plane.set_dimensions((6.0, 8.0))
    assert np.allclose(np.abs(plane.vertices().reshape(-1, 3)[:, [0, 2]]), [3.0, 4.0])
    with pytest.raises(ValueError):
        plane.set_dimensions((1.0, 2.0, 3.0))