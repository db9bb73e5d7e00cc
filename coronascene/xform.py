"""4x4 transform helpers using the row-vector convention (translation in row 3)."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.eye(4)


def translation(x: float, y: float, z: float) -> np.ndarray:
    """Return a matrix translating by (x, y, z)."""
    m = np.eye(4)
    m[3, :3] = (x, y, z)
    return m


def scaling(x: float, y: float, z: float) -> np.ndarray:
    """Return a matrix scaling each axis."""
    return np.diag([x, y, z, 1.0])


def rotation_quaternion(q: Sequence[float]) -> np.ndarray:
    """Return the rotation matrix of the quaternion (x, y, z, w)."""
    x, y, z, w = (float(c) for c in q)
    return np.array(
        [
            [1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * w * z, 2 * x * z - 2 * w * y, 0.0],
            [2 * x * y - 2 * w * z, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * w * x, 0.0],
            [2 * x * z + 2 * w * y, 2 * y * z - 2 * w * x, 1 - 2 * x * x - 2 * y * y, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """Return the rotation built from yaw (Y), pitch (X) and roll (Z) angles."""
    cy, sy = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cr, sr = math.cos(roll), math.sin(roll)
    return np.array(
        [
            [cr * cy + sr * sp * sy, sr * cp, cr * -sy + sr * sp * cy, 0.0],
            [-sr * cy + cr * sp * sy, cr * cp, sr * sy + cr * sp * cy, 0.0],
            [cp * sy, -sp, cp * cy, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_axis(axis: Sequence[float], angle: float) -> np.ndarray:
    """Return the rotation by angle around the given unit axis."""
    x, y, z = (float(c) for c in axis)
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0],
            [x * y * t - z * s, c + y * y * t, y * z * t + x * s, 0.0],
            [x * z * t + y * s, y * z * t - x * s, c + z * z * t, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(angle: float) -> np.ndarray:
    """Return the rotation by angle around the Y axis."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, 0.0, -s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def transform_coord(vector: Sequence[float], matrix: np.ndarray) -> np.ndarray:
    """Transform a point (w = 1) by matrix and return its x, y, z."""
    v = np.array([*vector, 1.0], dtype=float) @ np.asarray(matrix, dtype=float)
    return v[:3]


def origin(matrix: np.ndarray) -> np.ndarray:
    """Return the translation part of matrix."""
    return np.array(np.asarray(matrix, dtype=float)[3, :3])


def transform_aabb(half_extents, margin, trans, aabb_min, aabb_max):
    """Return the box bounds under trans.

    The given bounds are passed through unchanged; no transformation of the
    extents into the frame of trans is applied.
    """
    return np.array(aabb_min, dtype=float), np.array(aabb_max, dtype=float)