"""Runtime module holding the current scene and its change notifications."""

from __future__ import annotations

from typing import Optional

from .interfaces import RuntimeModule
from .scene import Scene


class SceneManager(RuntimeModule):
    """Owns the active scene and tracks whether consumers have picked it up."""

    def __init__(self) -> None:
        self.scene: Optional[Scene] = None
        self.rendering_queued = False
        self.physical_simulation_queued = False
        self.animation_queued = False
        self.dirty = False

    def initialize(self) -> None:
        self.scene = Scene()

    def finalize(self) -> None:
        """Drop the scene acquired by initialize."""
        self.scene = None

    def tick(self) -> None:
        """Clear the change flag once the renderer has queued the scene."""
        if self.dirty:
            self.dirty = not self.rendering_queued

    def is_scene_changed(self) -> bool:
        return self.dirty

    def notify_scene_is_rendering_queued(self) -> None:
        self.rendering_queued = True

    def notify_scene_is_physical_simulation_queued(self) -> None:
        self.physical_simulation_queued = True

    def notify_scene_is_animation_queued(self) -> None:
        self.animation_queued = True

    def scene_for_rendering(self) -> Scene:
        """Return the scene to render; raise RuntimeError before initialize."""
        if self.scene is None:
            raise RuntimeError("scene manager has no scene; call initialize first")
        return self.scene

    def reset_scene(self) -> None:
        self.dirty = True