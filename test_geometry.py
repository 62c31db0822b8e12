# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objscene.geometry import Model, Texture, TriangleMesh, merge_models


def make_triangle(offset=(0, 0, 0), texture=None):
    verts = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=np.float32) + offset
    mesh = TriangleMesh(verts, index=[[0, 1, 2]], diffuse=(0.2, 0.4, 0.6))
    mesh.diffuse_texture = texture
    return mesh


def make_texture():
    return Texture(1, 1, np.full((1, 1, 4), 255, dtype=np.uint8), path="white.png")


def test_add_cube():
    floor = TriangleMesh(diffuse=(0, 1, 0))
    floor.add_cube((0, -0.1, 0), (40, 0.1, 40))
    assert floor.num_vertices == 8
    assert floor.num_triangles == 12
    np.testing.assert_allclose(floor.vertex.min(axis=0), [-20, -0.15, -20], atol=1e-6)
    np.testing.assert_allclose(floor.vertex.max(axis=0), [20, -0.05, 20], atol=1e-6)


def test_add_unit_cube_appends_with_offset_indices():
    mesh = TriangleMesh()
    mesh.add_unit_cube(np.eye(3), (0, 0, 0))
    mesh.add_unit_cube(np.eye(3) * 2, (5, 0, 0))
    assert mesh.num_vertices == 16
    assert mesh.index[12:].min() == 8
    assert mesh.index.max() == 15
    np.testing.assert_allclose(mesh.vertex[15], [7, 2, 2])
    mesh.validate()


def test_add_cube_keeps_attributes_parallel():
    mesh = TriangleMesh([[0, 0, 0]], normal=[[0, 0, 1]])
    mesh.add_cube((0, 0, 0), (1, 1, 1))
    assert mesh.normal.shape == (9, 3)


def test_ragged_mesh_rejected():
    with pytest.raises(ValueError):
        TriangleMesh([[0, 0, 0], [1, 0, 0]], normal=[[0, 0, 1]])
    with pytest.raises(ValueError):
        TriangleMesh([[0, 0, 0]], index=[[0, 1, 2]])


def test_texture_validation():
    with pytest.raises(ValueError):
        Texture(0, 1, np.zeros(0, dtype=np.uint8))
    with pytest.raises(ValueError):
        Texture(2, 2, np.zeros(4, dtype=np.uint8))
    assert make_texture().resolution == (1, 1)


def test_model_owns_frozen_data():
    model = Model([make_triangle()], [make_texture()])
    assert isinstance(model.meshes, tuple)
    assert model.num_vertices == 3
    assert model.num_triangles == 1
    with pytest.raises(ValueError):
        model.textures[0].pixels[0, 0, 0] = 1
    with pytest.raises(ValueError):
        model.meshes[0].index[0, 0] = 2


def test_translated_model_leaves_original_untouched():
    model = Model([make_triangle()])
    moved = model.translated((-5, 0, -5))
    np.testing.assert_allclose(moved.bounds.lower, [-5, 0, -5])
    np.testing.assert_allclose(moved.bounds.upper, [-4, 1, -5])
    np.testing.assert_allclose(model.bounds.lower, [0, 0, 0])
    assert moved.meshes[0] is not model.meshes[0]


def test_merge_models_rebases_texture_handles():
    a = Model([make_triangle(texture=0)], [make_texture()])
    b = Model([make_triangle((3, 0, 0), texture=0)], [make_texture()])
    floor = TriangleMesh()
    floor.add_cube((0, -1, 0), (10, 0.1, 10))

    merged = merge_models(a, b, extra_meshes=[floor])
    assert len(merged.meshes) == 3
    assert len(merged.textures) == 2
    assert [m.diffuse_texture for m in merged.meshes] == [0, 1, None]
    np.testing.assert_allclose(merged.bounds.lower, [-5, -1.05, -5], atol=1e-6)
    np.testing.assert_allclose(merged.bounds.upper, [5, 1, 5])
    assert a.meshes[0].diffuse_texture == 0
    assert b.meshes[0].diffuse_texture == 0


def test_frozen_mesh_rejects_new_geometry():
    model = Model([make_triangle()])
    with pytest.raises(RuntimeError):
        model.meshes[0].add_cube((0, 0, 0), (1, 1, 1))
    assert model.meshes[0].num_vertices == 3


def test_frozen_mesh_keeps_texture_handle():
    mesh = make_triangle()
    mesh.diffuse_texture = 0
    model = Model([mesh], [make_texture()])
    with pytest.raises(RuntimeError):
        model.meshes[0].diffuse_texture = None
    assert model.texture_for(model.meshes[0]) is model.textures[0]
    assert model.meshes[0].copy().diffuse_texture == 0
