import numpy as np

from coronascene.scene_node import SceneNode, TreeNode


def test_tree_append_child_sets_parent():
    root, child = TreeNode(), TreeNode()
    root.append_child(child)
    assert child.parent is root
    assert root.children == [child]


def test_tree_str_indents_children():
    root, child = TreeNode(), TreeNode()
    root.append_child(child)
    lines = str(root).splitlines()
    assert lines[0] == " Tree Node"
    assert lines[1] == " ----------"
    assert "  Tree Node" in lines


def test_scene_node_append_child():
    root, child = SceneNode("root"), SceneNode("child")
    root.append_child(child)
    assert child.parent is root
    assert root.children[0].name == "child"


def test_default_local_transform_is_identity():
    np.testing.assert_allclose(SceneNode().local_transform(), np.eye(4))


def test_local_transform_carries_translation():
    node = SceneNode()
    node.translation = np.array([1.0, 2.0, 3.0])
    np.testing.assert_allclose(node.local_transform()[3, :3], [1.0, 2.0, 3.0])


def test_global_transform_mirrors_x():
    node = SceneNode()
    node.translation = np.array([1.0, 2.0, 3.0])
    np.testing.assert_allclose(node.global_transform()[3, :3], [-1.0, 2.0, 3.0])


def test_global_transform_includes_parent():
    parent, child = SceneNode("p"), SceneNode("c")
    parent.translation = np.array([0.0, 2.0, 0.0])
    child.translation = np.array([1.0, 0.0, 0.0])
    parent.append_child(child)
    expected = child.local_transform() @ parent.local_transform() @ np.diag([-1.0, 1.0, 1.0, 1.0])
    np.testing.assert_allclose(child.global_transform(), expected)


def test_update_transforms_only_for_meshes_cameras_and_lights():
    root = SceneNode("root")
    root.translation = np.array([5.0, 0.0, 0.0])
    camera = SceneNode("cam")
    camera.node_type = "Camera"
    plain = SceneNode("plain")
    root.append_child(camera)
    root.append_child(plain)
    root.update_transforms()
    np.testing.assert_allclose(root.transform, np.eye(4))
    np.testing.assert_allclose(plain.transform, np.eye(4))
    np.testing.assert_allclose(camera.transform, camera.global_transform())


def test_update_transforms_for_mesh_node():
    node = SceneNode("m")
    node.mesh = object()
    node.scale = np.array([2.0, 2.0, 2.0])
    node.update_transforms()
    np.testing.assert_allclose(node.transform, node.global_transform())


def test_rotate_by_zero_keeps_identity():
    node = SceneNode()
    node.rotate_by(0.0, 0.0, 0.0)
    np.testing.assert_allclose(node.matrix, np.eye(4), atol=1e-12)


def test_rotate_by_keeps_matrix_orthonormal():
    node = SceneNode()
    node.rotate_by(0.3, 0.7, -1.1)
    rot = node.matrix[:3, :3]
    np.testing.assert_allclose(rot @ rot.T, np.eye(3), atol=1e-12)


def test_move_by_accumulates_translation():
    node = SceneNode()
    node.move_by(1.0, 2.0, 3.0)
    node.move_by(1.0, 2.0, 3.0)
    np.testing.assert_allclose(node.translation, [2.0, 4.0, 6.0])


def test_init_axis_is_identity():
    np.testing.assert_array_equal(SceneNode().init_axis(), np.eye(4))


def test_scene_node_str():
    root, child = SceneNode("root"), SceneNode("child")
    root.append_child(child)
    lines = str(root).splitlines()
    assert lines[0] == " Scene Node"
    assert lines[2] == " Name: root"
    assert "  Name: child" in lines
    assert "(1, 0, 0, 0)" in lines