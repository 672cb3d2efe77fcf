import pytest

from magpie.common import string_hash
from magpie.material import Material, MaterialData, ShaderPassType


def test_default_technique_is_undefined():
    data = MaterialData()
    assert data.technique == "UNDEFINED"
    assert data.textures == []
    assert data.parameter_size == 0


def test_empty_data_hash_is_technique_hash():
    assert MaterialData().hash_value() == string_hash("UNDEFINED", 0)


def test_equal_data_hashes_equal():
    a = MaterialData(technique="texturedPBR_opaque", textures=[1, 2, 3])
    b = MaterialData(technique="texturedPBR_opaque", textures=[1, 2, 3])
    assert a.hash_value() == b.hash_value()


def test_texture_order_changes_hash():
    a = MaterialData(textures=[1, 2])
    b = MaterialData(textures=[2, 1])
    assert a.hash_value() != b.hash_value()


def test_technique_changes_hash():
    a = MaterialData(technique="texturedPBR_opaque", textures=[4])
    b = MaterialData(technique="UNDEFINED", textures=[4])
    assert a.hash_value() != b.hash_value()


def test_parameter_size_follows_parameters():
    data = MaterialData(parameters=b"\x00\x01\x02")
    assert data.parameter_size == 3


def test_material_has_one_pass_slot_per_type():
    material = Material()
    assert len(material.passes) == len(ShaderPassType)
    assert all(p is None for p in material.passes)


def test_material_hash_depends_on_passes():
    a = Material(textures=[1])
    b = Material(textures=[1])
    b.passes[ShaderPassType.DEFERRED] = "texturedPBR"
    assert a.hash_value() != b.hash_value()
    c = Material(textures=[1])
    c.passes[ShaderPassType.DEFERRED] = "texturedPBR"
    assert b.hash_value() == c.hash_value()


def test_material_hash_depends_on_textures():
    assert Material(textures=[1]).hash_value() != Material(textures=[2]).hash_value()


def test_negative_handle_rejected():
    with pytest.raises(OverflowError):
        MaterialData(textures=[-1]).hash_value()