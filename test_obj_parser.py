# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objscene.errors import IndexOutOfRange
from objscene.loader.obj_parser import CornerIndex, parse_mtl, parse_obj


def test_corner_formats(write_scene):
    path = write_scene(
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nvt 1 0\nvn 0 0 1\n"
        "f 1 2/2 3//1\n"
        "f 1/1/1 2/2/1 3/1/1\n"
    )
    result = parse_obj(path)
    assert result.ok
    shape = result.shapes[0]
    assert shape.face(0) == (CornerIndex(0), CornerIndex(1, -1, 1), CornerIndex(2, 0, -1))
    assert shape.face(1) == (CornerIndex(0, 0, 0), CornerIndex(1, 0, 1), CornerIndex(2, 0, 0))
    np.testing.assert_allclose(result.attrib.vertices, [0, 0, 0, 1, 0, 0, 0, 1, 0])
    assert len(result.attrib.texcoords) == 4
    assert len(result.attrib.normals) == 3


def test_negative_indices_are_relative(write_scene):
    path = write_scene("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n")
    assert parse_obj(path).shapes[0].face(0) == (CornerIndex(0), CornerIndex(1), CornerIndex(2))


@pytest.mark.parametrize("face, what", [
    ("f 1//-5 2//-5 3//-5", "normal"),
    ("f 1/-1 2/-1 3/-1", "texcoord"),
    ("f -4 -2 -1", "position"),
])
def test_relative_index_before_array_start(write_scene, face, what):
    path = write_scene(f"v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\n{face}\n")
    with pytest.raises(IndexOutOfRange, match=f"line 5: relative {what} index"):
        parse_obj(path)


def test_polygons_are_fan_triangulated(write_scene):
    path = write_scene("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nv -1 1 0\nf 1 2 3 4 5\n")
    shape = parse_obj(path).shapes[0]
    assert shape.num_faces == 3
    assert [c.vertex_index for c in shape.indices] == [0, 1, 2, 0, 2, 3, 0, 3, 4]


def test_quad_rejected_without_triangulation(write_scene):
    path = write_scene("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n")
    result = parse_obj(path, triangulate=False)
    assert not result.ok
    assert "line 5" in result.diagnostic


def test_groups_start_new_shapes(write_scene):
    path = write_scene(
        "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
        "g first\nf 1 2 3\n"
        "g empty\n"
        "o second\nf 3 2 1\nf 1 2 3\n"
    )
    shapes = parse_obj(path).shapes
    assert [s.name for s in shapes] == ["first", "second"]
    assert [s.num_faces for s in shapes] == [1, 2]


def test_materials_from_mtllib(write_scene):
    mtl = (
        "# comment\n"
        "newmtl plain\n"
        "newmtl bark\n"
        "Kd 0.4 0.2 0.1\n"
        "map_Kd -s 1 1 1 textures\\bark.jpg\n"
    )
    path = write_scene(
        "mtllib scene.mtl\nv 0 0 0\nv 1 0 0\nv 0 1 0\n"
        "f 1 2 3\nusemtl bark\nf 1 2 3\nusemtl plain\nf 1 2 3\n",
        mtl,
    )
    result = parse_obj(path, mtl_dir=path.rsplit("/", 1)[0])
    assert result.ok
    assert [m.name for m in result.materials] == ["plain", "bark"]
    assert result.materials[0].diffuse == (0.6, 0.6, 0.6)
    assert result.materials[1].diffuse == (0.4, 0.2, 0.1)
    assert result.materials[1].diffuse_texname == "textures\\bark.jpg"
    assert result.shapes[0].material_ids == [-1, 1, 0]


def test_missing_mtllib_is_a_warning(write_scene):
    path = write_scene("mtllib gone.mtl\nv 0 0 0\nv 1 0 0\nv 0 1 0\nusemtl x\nf 1 2 3\n")
    result = parse_obj(path)
    assert result.ok
    assert "gone.mtl" in result.diagnostic
    assert result.shapes[0].material_ids == [-1]


def test_bad_numbers_fail(write_scene):
    assert not parse_obj(write_scene("v 0 zero 0\n")).ok
    assert not parse_obj(write_scene("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n")).ok


def test_parse_mtl_ignores_statements_before_newmtl(tmp_path):
    path = tmp_path / "a.mtl"
    path.write_text("Kd 1 1 1\nnewmtl a\nKd 0 1 0\nNs 10\n")
    (mat,) = parse_mtl(str(path))
    assert mat.name == "a"
    assert mat.diffuse == (0.0, 1.0, 0.0)
