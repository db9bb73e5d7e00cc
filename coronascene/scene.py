"""A loaded scene: its nodes and the objects they refer to, looked up by key."""

from __future__ import annotations

from typing import Optional, TypeVar

from .camera_node import SceneCameraNode
from .mesh import SceneObjectCamera, SceneObjectMaterial, SceneObjectMesh
from .scene_node import SceneNode
from .scene_object import SceneObjectLight

V = TypeVar("V")


def _first(table: dict[str, V]) -> Optional[V]:
    return next(iter(table.values()), None)


class Scene:
    """Scene graph roots plus tables of cameras, lights, materials and meshes."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.default_material: Optional[SceneObjectMaterial] = None
        self.root_nodes: list[SceneNode] = []
        self.nodes_by_name: dict[str, SceneNode] = {}

        self.cameras: dict[str, SceneObjectCamera] = {}
        self.lights: dict[str, SceneObjectLight] = {}
        self.materials: dict[str, SceneObjectMaterial] = {}
        self.geometries: dict[str, SceneObjectMesh] = {}

        # Materials and lights in load order, for binding by index.
        self.linear_materials: list[SceneObjectMaterial] = []
        self.linear_lights: list[SceneObjectLight] = []

        self.camera_nodes: dict[str, SceneCameraNode] = {}
        self.light_nodes: dict[str, SceneNode] = {}
        self.geometry_nodes: dict[str, SceneNode] = {}

    def get_camera(self, key: str) -> Optional[SceneObjectCamera]:
        return self.cameras.get(key)

    def get_light(self, key: str) -> Optional[SceneObjectLight]:
        return self.lights.get(key)

    def get_geometry(self, key: str) -> Optional[SceneObjectMesh]:
        return self.geometries.get(key)

    def get_material(self, key: str) -> Optional[SceneObjectMaterial]:
        """Return the named material, or the default material if there is none."""
        return self.materials.get(key, self.default_material)

    def first_material(self) -> Optional[SceneObjectMaterial]:
        return _first(self.materials)

    def first_geometry_node(self) -> Optional[SceneNode]:
        return _first(self.geometry_nodes)

    def first_light_node(self) -> Optional[SceneNode]:
        return _first(self.light_nodes)

    def first_camera_node(self) -> Optional[SceneCameraNode]:
        return _first(self.camera_nodes)