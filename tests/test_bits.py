import numpy as np
import pytest

from pulsecode import (
    InvalidInputError,
    UnsupportedCodePointError,
    bits_to_text,
    char_breakdown,
    format_bits,
    text_to_bits,
)
from pulsecode.bits import as_bits


def test_letter_a(letter_a_bits):
    bits = text_to_bits("A")
    np.testing.assert_array_equal(bits, letter_a_bits)
    assert bits.dtype == np.uint8


@pytest.mark.parametrize("text", ["A", "Hi", "Hello, World!", "Ada Lovelace", "~ 0x7f"])
def test_length_and_round_trip(text):
    bits = text_to_bits(text)
    assert bits.shape == (8 * len(text),)
    assert bits_to_text(bits) == text


def test_msb_first_order():
    # 'é' is 233 = 0b11101001
    np.testing.assert_array_equal(text_to_bits("é"), [1, 1, 1, 0, 1, 0, 0, 1])


def test_bits_are_read_only():
    bits = text_to_bits("A")
    with pytest.raises(ValueError):
        bits[0] = 1


def test_empty_text_rejected():
    with pytest.raises(InvalidInputError):
        text_to_bits("")


def test_code_point_above_255_rejected():
    with pytest.raises(UnsupportedCodePointError) as excinfo:
        text_to_bits("a€")

    err = excinfo.value
    assert err.code_point == 8364
    assert err.index == 1
    assert err.width == 8
    assert isinstance(err, InvalidInputError)


def test_wider_symbols():
    bits = text_to_bits("a€", width=16)
    assert bits.size == 32
    assert bits_to_text(bits, width=16) == "a€"


def test_invalid_width():
    with pytest.raises(InvalidInputError):
        text_to_bits("A", width=0)


class TestAsBits:
    def test_from_string(self):
        np.testing.assert_array_equal(as_bits("0101"), [0, 1, 0, 1])

    def test_from_booleans(self):
        np.testing.assert_array_equal(as_bits([True, False, True]), [1, 0, 1])

    def test_returns_read_only_uint8(self):
        bits = as_bits([0, 1])
        assert bits.dtype == np.uint8
        assert not bits.flags.writeable

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "012",
            "01 1",
            [],
            [0, 2],
            [0, -1],
            [[0, 1], [1, 0]],
            [[0, 1], [1]],
            [0.0, 1.0],
            ["0", "1"],
        ],
    )
    def test_rejects_ill_formed(self, bad):
        with pytest.raises(InvalidInputError):
            as_bits(bad)


def test_bits_to_text_requires_whole_symbols():
    with pytest.raises(InvalidInputError):
        bits_to_text([0, 1, 0])


def test_format_bits():
    bits = text_to_bits("AB")
    assert format_bits(bits) == "0100000101000010"
    assert format_bits(bits, group=8) == "01000001 01000010"


def test_char_breakdown():
    rows = char_breakdown("A b")

    assert [r.char for r in rows] == ["A", " ", "b"]
    assert rows[0].bits == "01000001"
    assert rows[1].label == "(space)"
    assert rows[1].bits == "00100000"
    assert rows[2].code_point == 98


def test_bits_to_text_rejects_values_above_unicode_range():
    with pytest.raises(InvalidInputError, match="Symbol 0"):
        bits_to_text("1" * 32, width=32)
