from coronascene.camera_node import SceneCameraNode
from coronascene.mesh import SceneObjectMaterial, SceneObjectMesh, SceneObjectPerspectiveCamera
from coronascene.scene import Scene
from coronascene.scene_node import SceneNode
from coronascene.scene_object import SceneObjectOmniLight


def test_name():
    assert Scene("level1").name == "level1"
    assert Scene().name == ""


def test_get_camera():
    scene = Scene()
    cam = SceneObjectPerspectiveCamera(1.5, 0.8)
    scene.cameras["cam"] = cam
    assert scene.get_camera("cam") is cam
    assert scene.get_camera("missing") is None


def test_get_light():
    scene = Scene()
    light = SceneObjectOmniLight()
    scene.lights["sun"] = light
    assert scene.get_light("sun") is light
    assert scene.get_light("moon") is None


def test_get_geometry():
    scene = Scene()
    mesh = SceneObjectMesh()
    scene.geometries["helmet"] = mesh
    assert scene.get_geometry("helmet") is mesh
    assert scene.get_geometry("other") is None


def test_get_material_falls_back_to_default():
    scene = Scene()
    assert scene.get_material("missing") is None
    default = SceneObjectMaterial()
    scene.default_material = default
    assert scene.get_material("missing") is default
    named = SceneObjectMaterial(double_sided=True)
    scene.materials["metal"] = named
    assert scene.get_material("metal") is named


def test_first_material():
    scene = Scene()
    assert scene.first_material() is None
    a, b = SceneObjectMaterial(), SceneObjectMaterial()
    scene.materials["a"] = a
    scene.materials["b"] = b
    assert scene.first_material() is a


def test_first_nodes():
    scene = Scene()
    assert scene.first_geometry_node() is None
    assert scene.first_light_node() is None
    assert scene.first_camera_node() is None

    geo = SceneNode("geo")
    light = SceneNode("light")
    cam = SceneCameraNode("cam")
    scene.geometry_nodes["geo"] = geo
    scene.light_nodes["light"] = light
    scene.camera_nodes["cam"] = cam

    assert scene.first_geometry_node() is geo
    assert scene.first_light_node() is light
    assert scene.first_camera_node() is cam


def test_tables_are_independent_per_scene():
    first, second = Scene(), Scene()
    first.materials["m"] = SceneObjectMaterial()
    assert second.first_material() is None
    assert second.get_material("m") is None