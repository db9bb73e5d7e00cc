import numpy as np
import pytest

from coronascene.geometry import GeometryType
from coronascene.polyhedron import Polyhedron
from coronascene.xform import identity

CORNERS = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]


@pytest.fixture
def tetra():
    poly = Polyhedron()
    poly.add_tetrahedron(CORNERS)
    return poly


def test_type():
    assert Polyhedron().geometry_type is GeometryType.POLYHEDRON


def test_tetrahedron_has_four_triangles(tetra):
    assert len(tetra.faces) == 4
    assert all(len(face.edges) == 3 for face in tetra.faces)


def test_edges_form_closed_loops(tetra):
    for face in tetra.faces:
        for current, following in zip(face.edges, face.edges[1:] + face.edges[:1]):
            assert np.array_equal(current.second, following.first)


def test_normals_are_unit_and_outward(tetra):
    centroid = np.mean(np.array(CORNERS, dtype=float), axis=0)
    for face in tetra.faces:
        assert np.linalg.norm(face.normal) == pytest.approx(1.0)
        assert np.dot(face.normal, centroid - face.vertices[0]) < 0


def test_face_flipped_when_inner_point_above():
    poly = Polyhedron()
    face = poly.add_face([(0, 0, 0), (1, 0, 0), (0, 1, 0)], (0, 0, 1))
    assert np.allclose(face.normal, (0, 0, -1))


def test_face_kept_when_inner_point_below():
    poly = Polyhedron()
    face = poly.add_face([(0, 0, 0), (1, 0, 0), (0, 1, 0)], (0, 0, -1))
    assert np.allclose(face.normal, (0, 0, 1))


def test_aabb_of_tetrahedron(tetra):
    lo, hi = tetra.aabb(identity())
    assert np.allclose(lo, (0, 0, 0))
    assert np.allclose(hi, (1, 1, 1))


def test_bounding_sphere_encloses_corners(tetra):
    center, radius = tetra.bounding_sphere()
    for corner in CORNERS:
        assert np.linalg.norm(np.asarray(corner) - center) <= radius + 1e-9


def test_empty_aabb_is_inverted():
    lo, hi = Polyhedron().aabb(identity())
    expected_lo = np.full(3, np.finfo(np.float32).max, dtype=float)
    expected_hi = np.full(3, np.finfo(np.float32).min, dtype=float)
    np.testing.assert_array_equal(np.asarray(lo, dtype=float), expected_lo)
    np.testing.assert_array_equal(np.asarray(hi, dtype=float), expected_hi)


def test_too_few_vertices_rejected():
    with pytest.raises(ValueError):
        Polyhedron().add_face([(0, 0, 0), (1, 0, 0)], (0, 0, 1))
    with pytest.raises(ValueError):
        Polyhedron().add_tetrahedron(CORNERS[:3])