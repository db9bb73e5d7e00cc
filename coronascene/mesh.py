"""Meshes, primitives, cameras and PBR materials of a loaded model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

import numpy as np

from .scene_object import BaseSceneObject, SceneObjectTexture, SceneObjectType
from .xform import identity


def _fmt(value: float) -> str:
    return f"{value:g}"


def _zeros(n: int):
    return lambda: np.zeros(n)


def _vec4(*values: float):
    return lambda: np.array(values, dtype=float)


@dataclass
class VertexBasicAttribs:
    """Position, normal, first texture coordinate and tangent of a vertex."""

    pos: np.ndarray = field(default_factory=_zeros(3))
    normal: np.ndarray = field(default_factory=_zeros(3))
    uv0: np.ndarray = field(default_factory=_zeros(2))
    tangent: np.ndarray = field(default_factory=_zeros(3))


class SceneObjectPrimitive(BaseSceneObject):
    """A run of indexed vertices drawn with one material."""

    def __init__(
        self,
        first_index: int,
        index_count: int,
        vertex_count: int,
        vertex_data: Optional[Sequence[VertexBasicAttribs]] = None,
        index_data: Optional[Sequence[int]] = None,
        guid: Optional[uuid.UUID] = None,
    ) -> None:
        super().__init__(SceneObjectType.PRIMITIVE, guid)
        self.first_index = first_index
        self.index_count = index_count
        self.vertex_count = vertex_count
        self.vertex_data: list[VertexBasicAttribs] = list(vertex_data or [])
        self.index_data: list[int] = list(index_data or [])

    def has_indices(self) -> bool:
        return self.index_count > 0

    def __str__(self) -> str:
        return (
            BaseSceneObject.__str__(self)
            + "\n"
            + f"This primitive contains 0x{self.vertex_count} vertices.\n"
            + f"This mesh contains 0x{self.index_count} indices.\n"
        )


class SceneObjectMesh(BaseSceneObject):
    """A set of primitives sharing one transform."""

    def __init__(self, matrix: Optional[np.ndarray] = None, guid: Optional[uuid.UUID] = None) -> None:
        super().__init__(SceneObjectType.MESH, guid)
        self.primitives: list[SceneObjectPrimitive] = []
        self.transform = np.array(matrix if matrix is not None else identity(), dtype=float)

    def __str__(self) -> str:
        return "".join(f"Mesh: {primitive}\n" for primitive in self.primitives)


class SceneObjectCamera(BaseSceneObject):
    """Common state of cameras; only its subclasses can be created."""

    def __init__(
        self,
        near_clip: float = 1.0,
        far_clip: float = 100.0,
        guid: Optional[uuid.UUID] = None,
    ) -> None:
        if type(self) is SceneObjectCamera:
            raise TypeError("SceneObjectCamera can only be used as a base class")
        super().__init__(SceneObjectType.CAMERA, guid)
        self.name = ""
        self.matrix = identity()
        self.z_near = near_clip
        self.z_far = far_clip

    def __str__(self) -> str:
        return (
            BaseSceneObject.__str__(self)
            + "\n"
            + f"Near Clip Distance: {_fmt(self.z_near)}\n"
            + f"Far Clip Distance: {_fmt(self.z_far)}\n"
        )


class SceneObjectOrthogonalCamera(SceneObjectCamera):
    def __init__(
        self,
        x_mag: float,
        y_mag: float,
        near_clip: float = 1.0,
        far_clip: float = 100.0,
        guid: Optional[uuid.UUID] = None,
    ) -> None:
        super().__init__(near_clip, far_clip, guid)
        self.x_mag = x_mag
        self.y_mag = y_mag

    def __str__(self) -> str:
        return (
            "Camera Type: Orthogonal\n"
            + SceneObjectCamera.__str__(self)
            + "\n"
            + f"X Magnitude: {_fmt(self.x_mag)}\n"
            + f"Y Magnitude: {_fmt(self.y_mag)}\n"
        )


class SceneObjectPerspectiveCamera(SceneObjectCamera):
    def __init__(
        self,
        aspect_ratio: float,
        y_fov: float,
        near_clip: float = 1.0,
        far_clip: float = 100.0,
        guid: Optional[uuid.UUID] = None,
    ) -> None:
        super().__init__(near_clip, far_clip, guid)
        self.aspect_ratio = aspect_ratio
        self.y_fov = y_fov

    def __str__(self) -> str:
        return (
            "Camera Type: Perspective\n"
            + SceneObjectCamera.__str__(self)
            + "\n"
            + f"Aspect: {_fmt(self.aspect_ratio)}\n"
            + f"FOV: {_fmt(self.y_fov)}\n"
        )


class PbrWorkflow(IntEnum):
    METALL_ROUGH = 0
    SPEC_GLOSS = 1


class AlphaMode(IntEnum):
    OPAQUE = 0
    MASK = 1
    BLEND = 2


class TextureId(IntEnum):
    BASE_COLOR = 0
    PHYSICAL_DESC = 1
    NORMAL_MAP = 2
    OCCLUSION = 3
    EMISSIVE = 4


@dataclass
class ShaderAttribs:
    """Material attributes in the layout the shaders expect."""

    base_color_factor: np.ndarray = field(default_factory=_vec4(1, 1, 1, 1))
    emissive_factor: np.ndarray = field(default_factory=_vec4(1, 1, 1, 1))
    specular_factor: np.ndarray = field(default_factory=_vec4(1, 1, 1, 1))

    workflow: PbrWorkflow = PbrWorkflow.METALL_ROUGH
    base_color_uv_selector: float = -1.0
    physical_descriptor_uv_selector: float = -1.0
    normal_uv_selector: float = -1.0

    occlusion_uv_selector: float = -1.0
    emissive_uv_selector: float = -1.0
    base_color_slice: float = 0.0
    physical_descriptor_slice: float = 0.0

    normal_slice: float = 0.0
    occlusion_slice: float = 0.0
    emissive_slice: float = 0.0
    metallic_factor: float = 1.0

    roughness_factor: float = 1.0
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    alpha_cutoff: float = 0.5
    dummy0: float = 0.0

    # UV scale and bias per texture, used when textures live in an atlas.
    base_color_uv_scale_bias: np.ndarray = field(default_factory=_vec4(1, 1, 0, 0))
    physical_descriptor_uv_scale_bias: np.ndarray = field(default_factory=_vec4(1, 1, 0, 0))
    normal_uv_scale_bias: np.ndarray = field(default_factory=_vec4(1, 1, 0, 0))
    occlusion_uv_scale_bias: np.ndarray = field(default_factory=_vec4(1, 1, 0, 0))
    emissive_uv_scale_bias: np.ndarray = field(default_factory=_vec4(1, 1, 0, 0))

    custom_data: np.ndarray = field(default_factory=_vec4(0, 0, 0, 0))


@dataclass
class SceneObjectMaterial:
    """A PBR material: shader attributes plus the textures it samples."""

    attribs: ShaderAttribs = field(default_factory=ShaderAttribs)
    double_sided: bool = False
    texture_ids: list[int] = field(default_factory=lambda: [-1] * len(TextureId))
    textures: dict[int, SceneObjectTexture] = field(default_factory=dict)