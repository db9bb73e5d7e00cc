"""Scene objects: the typed, identified pieces a scene is assembled from."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional, Sequence

import numpy as np


def _fourcc(code: str) -> int:
    """Pack a four-character code into an int, first character most significant."""
    return int.from_bytes(code.encode("ascii"), "big")


def _fourcc_text(value: int) -> str:
    return value.to_bytes(4, "big", signed=value < 0).decode("ascii", errors="replace")


def _fmt(value: float) -> str:
    return f"{value:g}"


class SceneObjectType(Enum):
    """Kind of a scene object, identified by a four-character code."""

    MESH = _fourcc("MESH")
    MATERIAL = _fourcc("MATL")
    TEXTURE = _fourcc("TXTU")
    LIGHT_OMNI = _fourcc("LGHO")
    LIGHT_INFI = _fourcc("LGHI")
    LIGHT_SPOT = _fourcc("LGHS")
    CAMERA = _fourcc("CAMR")
    ANIMATION_CLIP = _fourcc("ANIM")
    CLIP = _fourcc("CLIP")
    VERTEX_ARRAY = _fourcc("VARR")
    INDEX_ARRAY = _fourcc("VARR")
    PRIMITIVE = _fourcc("PRIM")
    TRANSFORM = _fourcc("TRFM")
    TRANSLATE = _fourcc("TSLT")
    ROTATE = _fourcc("ROTA")
    SCALE = _fourcc("SCAL")
    TRACK = _fourcc("TRAC")

    def __str__(self) -> str:
        return _fourcc_text(self.value)


class SceneObjectCollisionType(Enum):
    """Collision shape attached to a scene object."""

    NONE = _fourcc("CNON")
    SPHERE = _fourcc("CSPH")
    BOX = _fourcc("CBOX")
    CYLINDER = _fourcc("CCYL")
    CAPSULE = _fourcc("CCAP")
    CONE = _fourcc("CCON")
    MULTI_SPHERE = _fourcc("CMUL")
    CONVEX_HULL = _fourcc("CCVH")
    CONVEX_MESH = _fourcc("CCVM")
    BVH_MESH = _fourcc("CBVM")
    HEIGHTFIELD = _fourcc("CHIG")
    PLANE = _fourcc("CPLN")

    def __str__(self) -> str:
        return _fourcc_text(self.value)


class BaseSceneObject:
    """An object with a unique identifier and a fixed type."""

    def __init__(self, object_type: SceneObjectType, guid: Optional[uuid.UUID] = None) -> None:
        self.guid = guid if guid is not None else uuid.uuid4()
        self.type = object_type

    def __str__(self) -> str:
        return (
            "SceneObject\n"
            "-----------\n"
            f"GUID: {self.guid}\n"
            f"Type: {self.type!s}\n"
        )


class SceneObjectIndexArray:
    """A run of 16-bit vertex indices."""

    def __init__(self, data: Any = None, count: int = 0) -> None:
        if count < 0:
            raise ValueError("index count must not be negative")
        self.data = data
        self._count = count

    def data_size(self) -> int:
        """Size of the indices in bytes."""
        return self._count * 2

    def index_count(self) -> int:
        return self._count


class SceneObjectTexture(BaseSceneObject):
    """A texture; its name is the path of the image it is loaded from."""

    def __init__(self, name: str = "", image: Any = None, guid: Optional[uuid.UUID] = None) -> None:
        super().__init__(SceneObjectType.TEXTURE, guid)
        self.name = name
        self.image = image

    def texture_image(self) -> Any:
        """Return the texture's image, raising LookupError if none is loaded."""
        if self.image is None:
            raise LookupError(f"texture {self.name!r} has no image")
        return self.image

    def __str__(self) -> str:
        text = BaseSceneObject.__str__(self) + "\n" + f"Name: {self.name}\n"
        if self.image is not None:
            text += f"Image: {self.image}\n"
        return text


class AttenCurveType(IntEnum):
    LINEAR = 0
    SMOOTH = 1
    INVERSE = 2
    INVERSE_SQUARE = 3


@dataclass
class AttenCurve:
    """Attenuation curve; the meaning of params depends on the curve type.

    Linear and smooth: (begin_atten, end_atten).
    Inverse: (scale, offset, kl, kc).
    Inverse square: (scale, offset, kq, kl, kc).
    """

    type: AttenCurveType = AttenCurveType.LINEAR
    params: tuple[float, ...] = (0.0, 1.0)


class SceneObjectLight(BaseSceneObject):
    """Common state of all light sources."""

    def __init__(self, object_type: SceneObjectType, guid: Optional[uuid.UUID] = None) -> None:
        super().__init__(object_type, guid)
        self.color = np.ones(4)
        self.intensity = 100.0
        self.range = 0.0
        self.cast_shadows = False
        self.light_type = ""

    def set_cast_shadow(self, shadow: bool) -> None:
        self.cast_shadows = bool(shadow)

    def set_color(self, attrib: str, color: Sequence[float]) -> None:
        """Set the colour named by attrib; only "light" is recognised."""
        if attrib == "light":
            self.color = np.asarray(color, dtype=float)

    def set_param(self, attrib: str, param: float) -> None:
        """Set the parameter named by attrib; only "intensity" is recognised."""
        if attrib == "intensity":
            self.intensity = float(param)

    def __str__(self) -> str:
        color = ", ".join(_fmt(float(c)) for c in self.color)
        return (
            BaseSceneObject.__str__(self)
            + "\n"
            + f"Color: ({color})\n"
            + f"Intensity: {_fmt(self.intensity)}\n"
            + f"Range: {_fmt(self.range)} // 0.0 = infinite\n"
            + f"Cast Shadows: {int(self.cast_shadows)}\n"
        )


class SceneObjectOmniLight(SceneObjectLight):
    def __init__(self, guid: Optional[uuid.UUID] = None) -> None:
        super().__init__(SceneObjectType.LIGHT_OMNI, guid)

    def __str__(self) -> str:
        return "Light Type: Omni\n" + SceneObjectLight.__str__(self) + "\n"


class SceneObjectSpotLight(SceneObjectLight):
    def __init__(self, guid: Optional[uuid.UUID] = None) -> None:
        super().__init__(SceneObjectType.LIGHT_SPOT, guid)
        self.inner_cone_angle = 0.0
        self.outer_cone_angle = 0.7853981634

    def __str__(self) -> str:
        return (
            "Light Type: Spot\n"
            + SceneObjectLight.__str__(self)
            + "\n"
            + f"Inner Cone Angle: {_fmt(self.inner_cone_angle)}\n"
            + f"Outer Cone Angle: {_fmt(self.outer_cone_angle)}\n"
        )


class SceneObjectInfiniteLight(SceneObjectLight):
    def __init__(self, guid: Optional[uuid.UUID] = None) -> None:
        super().__init__(SceneObjectType.LIGHT_INFI, guid)

    def __str__(self) -> str:
        return "Light Type: Infinite\n" + SceneObjectLight.__str__(self) + "\n"