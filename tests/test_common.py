import pytest

from magpie.common import FNV_OFFSET, combine, fnv_hash, string_hash


def test_fnv_hash_of_empty_is_offset():
    assert fnv_hash(b"") == 0x811C9DC5


def test_fnv_hash_of_zero_byte_from_zero_start():
    assert fnv_hash(b"\x00") == FNV_OFFSET


def test_fnv_hash_fits_in_64_bits():
    value = fnv_hash(b"\xff" * 256, start=(1 << 64) - 1)
    assert 0 <= value < (1 << 64)


def test_fnv_hash_depends_on_start_and_data():
    assert fnv_hash(b"abc", 1) != fnv_hash(b"abc", 2)
    assert fnv_hash(b"abc") != fnv_hash(b"abd")


def test_string_hash_of_empty_is_seed():
    assert string_hash("") == 7521
    assert string_hash("", 10) == 7531


def test_string_hash_is_deterministic_and_bounded():
    text = "texturedPBR_opaque" * 50
    assert string_hash(text) == string_hash(text)
    assert 0 <= string_hash(text) < (1 << 64)


def test_string_hash_distinguishes_strings():
    assert string_hash("skybox") != string_hash("skyboy")


def test_string_hash_non_ascii_stays_in_range():
    value = string_hash("é")
    assert 0 <= value < (1 << 64)
    assert value != string_hash("e")


def test_combine_dispatches_on_type():
    assert combine(42, "name") == string_hash("name", 42)
    assert combine(42, b"\x01\x02") == fnv_hash(b"\x01\x02", 42)
    assert combine(42, bytearray(b"\x01\x02")) == fnv_hash(b"\x01\x02", 42)


def test_combine_chains():
    state = combine(0, b"\x01")
    state = combine(state, "tech")
    assert state == string_hash("tech", fnv_hash(b"\x01"))


def test_combine_rejects_other_types():
    with pytest.raises(TypeError):
        combine(0, 3.5)