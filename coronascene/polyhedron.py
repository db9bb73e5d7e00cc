"""Polyhedra built from oriented triangular faces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .geometry import FLOAT_LOWEST, FLOAT_MAX, Geometry, GeometryType
from .xform import transform_aabb


@dataclass(eq=False)
class Edge:
    """Directed edge from first to second."""

    first: np.ndarray
    second: np.ndarray


@dataclass(eq=False)
class Face:
    """Face given by its edge loop and unit normal."""

    edges: list[Edge] = field(default_factory=list)
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))

    @property
    def vertices(self) -> list[np.ndarray]:
        return [edge.first for edge in self.edges]


def _normalized(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    return v / length if length != 0.0 else v


def _is_point_above_plane(vertices: list[np.ndarray], point: np.ndarray) -> bool:
    normal = np.cross(vertices[1] - vertices[0], vertices[2] - vertices[1])
    return float(np.dot(normal, point - vertices[0])) > 0.0


class Polyhedron(Geometry):
    """Closed polyhedron whose face normals point away from its interior."""

    def __init__(self) -> None:
        super().__init__(GeometryType.POLYHEDRON)
        self.faces: list[Face] = []

    def add_face(self, vertices: Sequence[Sequence[float]], inner_point: Sequence[float]) -> Face:
        """Add a face, ordering its vertices so the normal faces away from inner_point."""
        points = [np.asarray(v, dtype=float) for v in vertices]
        if len(points) < 3:
            raise ValueError("a face needs at least three vertices")
        if _is_point_above_plane(points, np.asarray(inner_point, dtype=float)):
            points.reverse()

        edges = [Edge(a, b) for a, b in zip(points, points[1:] + points[:1])]
        normal = _normalized(np.cross(points[1] - points[0], points[2] - points[1]))
        face = Face(edges, normal)
        self.faces.append(face)
        return face

    def add_tetrahedron(self, vertices: Sequence[Sequence[float]]) -> None:
        """Add the four faces of the tetrahedron with the given corners."""
        if len(vertices) != 4:
            raise ValueError("a tetrahedron needs exactly four vertices")
        a, b, c, d = (np.asarray(v, dtype=float) for v in vertices)
        self.add_face([a, b, c], d)
        self.add_face([a, b, d], c)
        self.add_face([c, d, b], a)
        self.add_face([a, d, c], b)

    def aabb(self, trans):
        corners = [edge.first for face in self.faces for edge in face.edges]
        if corners:
            stacked = np.vstack(corners)
            lo, hi = stacked.min(axis=0), stacked.max(axis=0)
        else:
            lo, hi = np.full(3, FLOAT_MAX), np.full(3, FLOAT_LOWEST)
        half_extents = (hi - lo) * 0.5
        return transform_aabb(half_extents, self.margin, trans, lo, hi)