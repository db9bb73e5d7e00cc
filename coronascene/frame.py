"""Per-frame data handed from the scene to the draw passes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from .xform import identity


def _zeros3() -> np.ndarray:
    return np.zeros(3)


@dataclass
class Light:
    """A light as seen by the shaders."""

    position: np.ndarray = field(default_factory=_zeros3)
    intensity: float = 10.0
    color: np.ndarray = field(default_factory=_zeros3)
    fall_off_start: float = 0.0
    direction: np.ndarray = field(default_factory=_zeros3)
    fall_off_end: float = math.pi / 4
    view_projection: np.ndarray = field(default_factory=identity)
    shadow_map_index: int = 0


@dataclass
class DrawFrameContext:
    """Constants shared by every batch drawn in a frame."""

    world_matrix: np.ndarray = field(default_factory=identity)
    world_view_matrix: np.ndarray = field(default_factory=identity)
    world_view_projection_matrix: np.ndarray = field(default_factory=identity)
    camera_position: np.ndarray = field(default_factory=lambda: np.zeros(4))
    lights: list[Light] = field(default_factory=lambda: [Light() for _ in range(3)])


@dataclass
class DrawBatchContext:
    """One node to draw, with its material and transform."""

    node: Optional[Any] = None
    material: Optional[Any] = None
    trans: np.ndarray = field(default_factory=identity)


@dataclass
class Frame:
    """Everything needed to render one frame."""

    frame_context: DrawFrameContext = field(default_factory=DrawFrameContext)
    batch_contexts: list[DrawBatchContext] = field(default_factory=list)
    shadow_map: int = -1
    shadow_map_count: int = 0
    world_matrix: np.ndarray = field(default_factory=identity)
    view_matrix: np.ndarray = field(default_factory=identity)
    projection_matrix: np.ndarray = field(default_factory=identity)