import pytest

from corvus.hashing import fnv1a


def test_empty_input_yields_offset_basis_32():
    assert fnv1a(b"") == 2166136261
    assert fnv1a("") == 2166136261


def test_empty_input_yields_offset_basis_64():
    assert fnv1a(b"", 64) == 14695981039346656037


def test_known_single_character_values():
    assert fnv1a("a") == 0xE40C292C
    assert fnv1a("a", 64) == 0xAF63DC4C8601EC8C


def test_default_width_is_32_bits():
    assert fnv1a("Subsystem") == fnv1a("Subsystem", 32)


def test_text_and_bytes_hash_alike():
    assert fnv1a("CrashHandler") == fnv1a(b"CrashHandler")
    assert fnv1a("CrashHandler", 64) == fnv1a(bytearray(b"CrashHandler"), 64)
    assert fnv1a("Temp") == fnv1a(memoryview(b"Temp"))


def test_text_is_hashed_as_utf8():
    assert fnv1a("é") == fnv1a("é".encode("utf-8"))


@pytest.mark.parametrize("text", ["", "a", "FirstName", "x" * 1000])
def test_results_fit_in_width(text):
    assert 0 <= fnv1a(text) < 2**32
    assert 0 <= fnv1a(text, 64) < 2**64


def test_different_inputs_differ():
    assert fnv1a("FirstName") != fnv1a("SecondName")
    assert fnv1a("FirstName", 64) != fnv1a("SecondName", 64)


def test_repeated_calls_give_known_vector():
    for _ in range(2):
        assert fnv1a("foobar") == 0xBF9CF968
        assert fnv1a("foobar", 64) == 0x85944171F73967E8


@pytest.mark.parametrize("bits", [0, 16, 128])
def test_unsupported_width_raises(bits):
    with pytest.raises(ValueError):
        fnv1a("a", bits)


@pytest.mark.parametrize("value", [5, 1.5, None, ["a"]])
def test_unsupported_type_raises(value):
    with pytest.raises(TypeError):
        fnv1a(value)