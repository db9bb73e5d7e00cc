"""Collision geometry shapes and their bounding volumes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Sequence

import numpy as np

from .xform import identity, origin, transform_aabb

FLOAT_EPSILON = float(np.finfo(np.float32).eps)
FLOAT_MAX = float(np.finfo(np.float32).max)
FLOAT_LOWEST = float(np.finfo(np.float32).min)


class GeometryType(IntEnum):
    BOX = 0
    CAPSULE = 1
    CONE = 2
    CYLINDER = 3
    PLANE = 4
    POLYHEDRON = 5
    SPHERE = 6
    TRIANGLE = 7


class Geometry(ABC):
    """A shape with an axis-aligned bounding box."""

    def __init__(self, geometry_type: GeometryType) -> None:
        self.geometry_type = geometry_type
        self.margin = FLOAT_EPSILON

    @abstractmethod
    def aabb(self, trans: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Return (min, max) of the bounding box in the frame of trans."""

    def bounding_sphere(self) -> tuple[np.ndarray, float]:
        """Return (center, radius) of a sphere enclosing the untransformed box."""
        lo, hi = self.aabb(identity())
        radius = float(np.linalg.norm(hi - lo)) * 0.5
        center = (lo + hi) * 0.5
        return center, radius

    def angular_motion_disc(self) -> float:
        """Return the radius needed to bound the shape under rotation."""
        center, disc = self.bounding_sphere()
        return disc + float(np.linalg.norm(center))

    def temporal_aabb(self, cur_trans, linvel, angvel, time_step):
        """Return (min, max) conservatively enclosing the motion over time_step."""
        lo, hi = self.aabb(cur_trans)
        lo = np.array(lo, dtype=float)
        hi = np.array(hi, dtype=float)

        motion = np.asarray(linvel, dtype=float) * time_step
        forward = motion > 0.0
        hi[forward] += motion[forward]
        lo[~forward] += motion[~forward]

        angular = (
            float(np.linalg.norm(np.asarray(angvel, dtype=float)))
            * self.angular_motion_disc()
            * time_step
        )
        return lo - angular, hi + angular


class Box(Geometry):
    """Axis-aligned box given by its half extents."""

    def __init__(self, half_extents: Sequence[float]) -> None:
        super().__init__(GeometryType.BOX)
        self.half_extents = np.asarray(half_extents, dtype=float)

    def aabb(self, trans):
        return transform_aabb(self.half_extents, self.margin, trans, np.zeros(3), np.zeros(3))

    def dimension(self) -> np.ndarray:
        return self.half_extents * 2.0

    def dimension_with_margin(self) -> np.ndarray:
        return self.half_extents * 2.0 + self.margin

    def half_extents_with_margin(self) -> np.ndarray:
        return self.half_extents + self.margin


class Plane(Geometry):
    """Infinite plane given by its normal and intercept."""

    def __init__(self, normal: Sequence[float], intercept: float) -> None:
        super().__init__(GeometryType.PLANE)
        self.normal = np.asarray(normal, dtype=float)
        self.intercept = intercept

    def aabb(self, trans):
        return np.full(3, FLOAT_LOWEST), np.full(3, FLOAT_MAX)


class Sphere(Geometry):
    """Sphere of the given radius centred on the transform's origin."""

    def __init__(self, radius: float) -> None:
        super().__init__(GeometryType.SPHERE)
        self.radius = radius

    def aabb(self, trans):
        center = origin(trans)
        extent = np.full(3, self.margin)
        return center - extent, center + extent