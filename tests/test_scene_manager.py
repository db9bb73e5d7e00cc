import pytest

from coronascene.interfaces import RuntimeModule
from coronascene.scene import Scene
from coronascene.scene_manager import SceneManager


def test_is_runtime_module():
    manager = SceneManager()
    assert isinstance(manager, RuntimeModule)
    manager.initialize()
    manager.reset_scene()
    manager.tick()
    assert manager.is_scene_changed() is True


def test_scene_for_rendering_before_initialize_raises():
    with pytest.raises(RuntimeError):
        SceneManager().scene_for_rendering()


def test_initialize_creates_empty_scene():
    manager = SceneManager()
    manager.initialize()
    scene = manager.scene_for_rendering()
    assert isinstance(scene, Scene)
    assert scene.name == ""
    assert scene.first_material() is None


def test_not_changed_initially():
    manager = SceneManager()
    manager.initialize()
    assert manager.is_scene_changed() is False


def test_reset_marks_changed():
    manager = SceneManager()
    manager.initialize()
    manager.reset_scene()
    assert manager.is_scene_changed() is True


def test_tick_keeps_dirty_until_rendering_queued():
    manager = SceneManager()
    manager.initialize()
    manager.reset_scene()
    manager.tick()
    assert manager.is_scene_changed() is True
    manager.notify_scene_is_rendering_queued()
    manager.tick()
    assert manager.is_scene_changed() is False


def test_other_notifications_do_not_clear_dirty():
    manager = SceneManager()
    manager.initialize()
    manager.reset_scene()
    manager.notify_scene_is_physical_simulation_queued()
    manager.notify_scene_is_animation_queued()
    manager.tick()
    assert manager.is_scene_changed() is True
    assert manager.physical_simulation_queued is True
    assert manager.animation_queued is True


def test_tick_when_clean_stays_clean():
    manager = SceneManager()
    manager.initialize()
    manager.tick()
    assert manager.is_scene_changed() is False


def test_finalize_keeps_scene():
    manager = SceneManager()
    manager.initialize()
    scene = manager.scene_for_rendering()
    manager.finalize()
    assert manager.scene_for_rendering() is scene