"""Tree nodes and scene graph nodes with their transforms."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .xform import (
    identity,
    rotation_quaternion,
    rotation_yaw_pitch_roll,
    scaling,
    translation,
)

_TRANSFORMED_TYPES = ("Camera", "Light", "Light_Orietation")


def _format_matrix(matrix: np.ndarray) -> str:
    return "\n".join(
        "(" + ", ".join(f"{float(v):g}" for v in row) + ")" for row in np.asarray(matrix)
    )


class TreeNode:
    """A node in a generic tree."""

    def __init__(self) -> None:
        self.parent: Optional[TreeNode] = None
        self.children: list[TreeNode] = []

    def append_child(self, sub_node: "TreeNode") -> None:
        sub_node.parent = self
        self.children.append(sub_node)

    def _dump(self) -> str:
        return ""

    def _render(self, depth: int) -> str:
        pad = " " * depth
        text = f"{pad}Tree Node\n{pad}----------\n{self._dump()}\n"
        for child in self.children:
            text += child._render(depth + 1) + "\n"
        return text

    def __str__(self) -> str:
        return self._render(1)


class SceneNode:
    """A node of the scene graph, with its local TRS and matrix transforms."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.node_type = ""
        self.mesh: Optional[Any] = None
        self.light_index = -1
        self.parent: Optional[SceneNode] = None
        self.index = 0
        self.children: list[SceneNode] = []
        self.matrix = identity()
        self.translation = np.zeros(3)
        self.scale = np.ones(3)
        self.rotation = np.array([0.0, 0.0, 0.0, 1.0])
        self.transform = identity()

    def append_child(self, sub_node: "SceneNode") -> None:
        sub_node.parent = self
        self.children.append(sub_node)

    def local_transform(self) -> np.ndarray:
        """Combine the node's matrix with its translation, rotation and scale."""
        mat = np.array(self.matrix, dtype=float)
        mat = translation(*self.translation) @ mat
        mat = rotation_quaternion(self.rotation) @ mat
        mat = scaling(*self.scale) @ mat
        return mat

    def global_transform(self) -> np.ndarray:
        """Chain local transforms up to the root, then mirror the X axis."""
        mat = self.local_transform()
        node = self.parent
        while node is not None:
            mat = mat @ node.local_transform()
            node = node.parent
        return mat @ scaling(-1.0, 1.0, 1.0)

    def update_transforms(self) -> None:
        """Refresh the world transform of this node and all its descendants."""
        if self.mesh is not None or self.node_type in _TRANSFORMED_TYPES:
            self.transform = self.global_transform()
        for child in self.children:
            child.update_transforms()

    def rotate_by(self, angle_x: float, angle_y: float, angle_z: float) -> None:
        self.matrix = self.matrix @ rotation_yaw_pitch_roll(angle_x, angle_y, angle_z)

    def move_by(self, distance_x: float, distance_y: float, distance_z: float) -> None:
        self.translation = self.translation + np.array([distance_x, distance_y, distance_z], dtype=float)

    def init_axis(self) -> np.ndarray:
        """Return the node's initial local axes, one per row."""
        return identity()

    def _dump(self) -> str:
        return ""

    def _render(self, depth: int) -> str:
        pad = " " * depth
        text = (
            f"{pad}Scene Node\n"
            f"{pad}----------\n"
            f"{pad}Name: {self.name}\n"
            f"{self._dump()}\n"
        )
        for child in self.children:
            text += child._render(depth + 1) + "\n"
        text += _format_matrix(self.matrix) + "\n"
        return text

    def __str__(self) -> str:
        return self._render(1)