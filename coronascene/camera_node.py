"""Scene node carrying a camera and its look-at frame."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from .scene_node import SceneNode
from .xform import rotation_axis, rotation_y, transform_coord


def _normalized(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    return v / length if length != 0.0 else v


class SceneCameraNode(SceneNode):
    """A camera in the scene graph, keeping right, up and look axes."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.target = np.zeros(3)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.look = np.array([0.0, 0.0, 1.0])
        self.position = np.zeros(3)
        self.camera: Optional[Any] = None
        self.is_init = False

    def _initialize_axes(self) -> None:
        self.position = transform_coord(self.position, self.transform)
        self.look = _normalized(np.asarray(self.target, dtype=float) - self.position)
        self.right = np.cross(self.world_up, self.look)
        self.up = np.cross(self.look, self.right)
        self.is_init = True

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix, orthonormalising the camera axes first.

        On the first call the position is moved by the node's transform and
        the axes are aimed at the target.
        """
        if not self.is_init:
            self._initialize_axes()

        look = _normalized(np.asarray(self.look, dtype=float))
        up = _normalized(np.cross(look, self.right))
        right = np.cross(up, look)

        self.right, self.up, self.look = right, up, look

        position = np.asarray(self.position, dtype=float)
        result = np.eye(4)
        result[:3, 0] = right
        result[:3, 1] = up
        result[:3, 2] = look
        result[3, :3] = (
            -float(np.dot(position, right)),
            -float(np.dot(position, up)),
            -float(np.dot(position, look)),
        )
        return result

    def pitch(self, angle: float) -> None:
        """Rotate the up and look axes around the right axis."""
        r = rotation_axis(self.right, angle)
        self.up = transform_coord(self.up, r)
        self.look = transform_coord(self.look, r)

    def rotate_y(self, angle: float) -> None:
        """Rotate all three camera axes around the world Y axis."""
        r = rotation_y(angle)
        self.right = transform_coord(self.right, r)
        self.up = transform_coord(self.up, r)
        self.look = transform_coord(self.look, r)

    def _move_along(self, axis: Sequence[float], d: float) -> None:
        self.position = np.asarray(axis, dtype=float) * d + np.asarray(self.position, dtype=float)

    def strafe(self, d: float) -> None:
        """Move the camera by d along its right axis."""
        self._move_along(self.right, d)

    def walk(self, d: float) -> None:
        """Move the camera by d along its look axis."""
        self._move_along(self.look, d)