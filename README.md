# coronascene

The in-memory scene side of a small game engine, built on numpy.

## What is in it

- `coronascene.scene_node`: `SceneNode`, a scene graph node with a matrix plus
  translation, rotation (quaternion `x, y, z, w`) and scale. `local_transform()`
  combines them, `global_transform()` chains local transforms up to the root and
  then mirrors the X axis, and `update_transforms()` stores the global transform in
  `transform` for nodes that have a mesh or whose `node_type` is `"Camera"`,
  `"Light"` or `"Light_Orietation"`, then recurses into the children. `rotate_by()`
  and `move_by()` adjust the node, and `str()` prints an indented tree dump.
  `TreeNode` is a plain tree with the same kind of dump.
- `coronascene.camera_node`: `SceneCameraNode`, a scene node with right, up and
  look axes, a position and a target. `view_matrix()` aims the camera at its target
  on the first call, orthonormalises the axes and returns the view matrix;
  `pitch()`, `rotate_y()`, `strafe()` and `walk()` turn and move it.
- `coronascene.scene_object`: `BaseSceneObject` (a UUID and a `SceneObjectType`,
  which prints as its four-character code such as `TXTU`), `SceneObjectTexture`,
  `SceneObjectIndexArray`, `AttenCurve`, and lights: `SceneObjectOmniLight`,
  `SceneObjectSpotLight` and `SceneObjectInfiniteLight`. Also
  `SceneObjectCollisionType`.
- `coronascene.mesh`: `SceneObjectMesh`, `SceneObjectPrimitive`,
  `VertexBasicAttribs`, orthogonal and perspective cameras, and the PBR
  `SceneObjectMaterial` with its `ShaderAttribs`, `PbrWorkflow`, `AlphaMode` and
  `TextureId`.
- `coronascene.scene`: `Scene`, holding root nodes and tables of cameras, lights,
  materials and geometries by key. `get_material()` falls back to
  `default_material`; the `first_*` methods return the first entry or `None`.
- `coronascene.scene_manager`: `SceneManager`, a runtime module that owns the
  current `Scene` and tracks whether it changed and whether the renderer, physics
  and animation have queued it.
- `coronascene.geometry` and `coronascene.polyhedron`: collision shapes `Box`,
  `Plane`, `Sphere` and `Polyhedron`, with `aabb()`, `bounding_sphere()`,
  `angular_motion_disc()` and `temporal_aabb()`. `Polyhedron.add_face()` orders a
  face's vertices so its normal points away from a given inner point, and
  `add_tetrahedron()` adds the four faces of a tetrahedron.
- `coronascene.xform`: 4×4 transform helpers in the row-vector convention
  (a point is transformed as `v @ M`, translation sits in the bottom row).
- `coronascene.color`: `rgb_to_ycbcr()` and `ycbcr_to_rgb()`, with results
  clamped to 0..255.
- `coronascene.frame`: `Light`, `DrawFrameContext`, `DrawBatchContext` and
  `Frame`, the per-frame data handed to a draw pass.
- `coronascene.interfaces`: abstract `RuntimeModule`, `DrawPass` and
  `Animatable`, and `GameLogic`, whose input hooks record held keys, key repeats
  and analog stick deflections.
- `coronascene.config`: `GfxConfiguration`, the colour, depth and window settings.
- `coronascene.buffer`: `Buffer`, a byte buffer with a recorded alignment.

## Installation

```
pip install .
```

## Example

```python
import numpy as np
from coronascene import xform
from coronascene.camera_node import SceneCameraNode
from coronascene.color import rgb_to_ycbcr
from coronascene.geometry import Sphere
from coronascene.scene_node import SceneNode

root = SceneNode("root")
child = SceneNode("child")
child.translation = np.array([1.0, 2.0, 3.0])
root.append_child(child)
print(child.global_transform())

sphere = Sphere(1.0)
lo, hi = sphere.aabb(xform.translation(5.0, 0.0, 0.0))

camera = SceneCameraNode("camera")
camera.walk(2.0)
view = camera.view_matrix()

print(rgb_to_ycbcr((255.0, 0.0, 0.0)))
```

## Limits

- Shape bounds are not carried into the frame of the given transform: `Box.aabb()`
  returns zero bounds, `Polyhedron.aabb()` returns the untransformed vertex bounds,
  and `Sphere.aabb()` spans only the margin around the transform's origin, not the
  radius. `Plane.aabb()` is unbounded.
- There is no scene file loading, image decoding, rendering, physics simulation or
  window handling. A `Scene` is filled in by code, and `SceneManager` only tracks
  state for whatever consumes it.

## Tests

```
pip install .[test]
pytest
```