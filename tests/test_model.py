import numpy as np
import pytest

from magpie.material import Material
from magpie.model import Mesh, Model


def test_create_mesh_sets_parent():
    model = Model()
    mesh = model.create_mesh()
    assert mesh.parent is model
    assert model.submesh_count() == 1
    assert model.submesh(0) is mesh


def test_meshes_kept_in_order():
    model = Model()
    meshes = [model.create_mesh() for _ in range(3)]
    assert list(model) == meshes
    assert [model.submesh(i) for i in range(model.submesh_count())] == meshes


def test_submesh_out_of_range():
    with pytest.raises(IndexError):
        Model().submesh(0)


def test_directory_default_and_set():
    assert Model().directory == ""
    assert Model("models/").directory == "models/"


def test_build_counts():
    mesh = Mesh()
    vertices = [(-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0), (1.0, 1.0, -1.0)]
    indices = [0, 2, 1, 2, 0, 3]
    mesh.build(vertices, indices)
    assert mesh.vertex_count() == len(vertices)
    assert mesh.index_count() == len(indices)
    assert mesh.indices.dtype == np.uint16
    assert mesh.indices.tolist() == indices


def test_empty_mesh_counts():
    mesh = Mesh()
    assert mesh.vertex_count() == 0
    assert mesh.index_count() == 0


def test_index_too_large_rejected():
    with pytest.raises(ValueError):
        Mesh().build([(0.0, 0.0, 0.0)], [65536])


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        Mesh().build([(0.0, 0.0, 0.0)], [-1])


def test_material_assignment():
    mesh = Model().create_mesh()
    material = Material(textures=[1])
    mesh.material = material
    assert mesh.material is material