import pytest

from corvus.guid import Guid

VALID = "12345678-9abc-def0-1234-567890abcdef"


def test_default_guid_is_invalid():
    assert Guid().is_valid() is False


def test_parameterised_guid_is_valid():
    assert Guid(0x12345678, 0x9ABC, 0xDEF0, 0x12345678).is_valid() is True


def test_all_zero_guid_is_invalid():
    assert Guid(0, 0, 0, 0).is_valid() is False


def test_from_string_valid():
    assert Guid.from_string(VALID).is_valid() is True


def test_from_string_invalid():
    assert Guid.from_string("invalid-guid-string").is_valid() is False


def test_invalidate():
    guid = Guid(0x12345678, 0x9ABC, 0xDEF0, 0x12345678)
    guid.invalidate()
    assert guid.is_valid() is False
    assert guid == Guid()


def test_to_string_format():
    guid = Guid(0x12345678, 0x9ABCDEF0, 0x12345678, 0x9ABCDEF0)
    assert guid.to_string() == "12345678-9abc-def0-1234-56789abcdef0"
    assert str(guid) == "12345678-9abc-def0-1234-56789abcdef0"


def test_equality():
    first = Guid(0x12345678, 0x9ABC, 0xDEF0, 0x12345678)
    second = Guid(0x12345678, 0x9ABC, 0xDEF0, 0x12345678)
    assert (first == second) is True


def test_inequality():
    first = Guid(0x12345678, 0x9ABC, 0xDEF0, 0x12345678)
    second = Guid(0x87654321, 0xCBA9, 0x0FED, 0x87654321)
    assert (first == second) is False
    assert (first != second) is True


def test_less_than():
    assert (Guid(1, 0, 0, 0) < Guid(2, 0, 0, 0)) is True
    assert (Guid(2, 0, 0, 0) < Guid(1, 0, 0, 0)) is False


def test_greater_than():
    assert (Guid(2, 0, 0, 0) > Guid(1, 0, 0, 0)) is True
    assert (Guid(1, 0, 0, 0) > Guid(2, 0, 0, 0)) is False


def test_ordering_is_word_by_word():
    assert Guid(1, 5, 0, 0) < Guid(1, 6, 0, 0)
    assert Guid(1, 5, 7, 0) < Guid(1, 5, 7, 1)


def test_new_guid_valid():
    assert Guid.new_guid().is_valid() is True


def test_new_guids_unique():
    assert (Guid.new_guid() != Guid.new_guid()) is True


def test_parse_valid():
    guid = Guid.parse(VALID)
    assert guid.is_valid() is True


def test_parse_invalid_format_raises():
    with pytest.raises(ValueError):
        Guid.parse("invalid-format")


def test_parse_wrong_length_raises():
    with pytest.raises(ValueError):
        Guid.parse("12345678-9abc-def0")


def test_parse_missing_dashes_raises():
    with pytest.raises(ValueError):
        Guid.parse("123456789abcdef01234567890abcdef01234")


def test_parse_misplaced_dash_raises():
    with pytest.raises(ValueError):
        Guid.parse("1234567-89abc-def0-1234-567890abcdef")


def test_parse_to_string_round_trip():
    assert Guid.parse(VALID).to_string() == VALID


def test_parse_upper_case():
    assert Guid.parse(VALID.upper()) == Guid.parse(VALID)


def test_non_hex_characters_count_as_zero():
    assert Guid.parse("zzzzzzzz-0000-0000-0000-000000000000").is_valid() is False


def test_new_guid_round_trip():
    guid = Guid.new_guid()
    assert Guid.parse(guid.to_string()) == guid


def test_words_are_truncated_to_32_bits():
    assert Guid(0x1_0000_0001, 0, 0, 0) == Guid(1, 0, 0, 0)