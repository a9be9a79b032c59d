import numpy as np
import pytest

from pulsecode import (
    EncoderConfig,
    InvalidInputError,
    Level,
    Scheme,
    UnsupportedCodePointError,
    UnsupportedSchemeError,
    convert,
    generate,
    reselect,
    set_config,
    text_to_bits,
)


def test_convert_defaults():
    result = convert("  Hi \n")

    assert result.text == "Hi"
    assert result.scheme is Scheme.NRZ_L
    assert result.binary == "0100100001101001"
    np.testing.assert_array_equal(result.bits, text_to_bits("Hi"))
    assert result.waveform == generate(result.bits, Scheme.NRZ_L)
    assert result.guide.short_title == "NRZ-L"
    assert [row.bits for row in result.breakdown] == ["01001000", "01101001"]


def test_convert_with_scheme_name():
    result = convert("A", "Manchester")
    assert result.scheme is Scheme.MANCHESTER
    assert result.guide.title == "Manchester Encoding"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_blank_text_rejected(text):
    with pytest.raises(InvalidInputError):
        convert(text)


@pytest.mark.parametrize("text", [None, 65, b"A"])
def test_non_string_text_rejected(text):
    with pytest.raises(InvalidInputError):
        convert(text)


def test_wide_character_rejected():
    with pytest.raises(UnsupportedCodePointError):
        convert("naïve ☃")


def test_unknown_scheme_rejected():
    with pytest.raises(UnsupportedSchemeError):
        convert("A", "2B1Q")


def test_global_config_is_used():
    set_config(EncoderConfig(scheme="cmi", cmi_initial_polarity=1))
    result = convert("A")

    assert result.scheme is Scheme.CMI
    # Second bit of "A" is the first mark: +V with a positive start.
    assert result.waveform.levels_per_bit()[1] == Level.HIGH


def test_explicit_config_overrides_global():
    set_config(EncoderConfig(scheme="cmi"))
    result = convert("A", config=EncoderConfig(scheme="rz"))
    assert result.scheme is Scheme.RZ


def test_wide_symbols_from_config():
    config = EncoderConfig(bits_per_char=16)
    result = convert("☃", config=config)

    assert result.bits.size == 16
    assert result.breakdown[0].code_point == ord("☃")


def test_reselect_reuses_bits():
    first = convert("Ada")
    second = reselect(first, "ami")

    assert second.bits is first.bits
    assert second.text == "Ada"
    assert second.scheme is Scheme.AMI
    assert second.waveform == generate(first.bits, Scheme.AMI)
    assert second.guide.short_title == "Bipolar AMI"


def test_reselect_keeps_width():
    first = convert("☃", config=EncoderConfig(bits_per_char=16))
    second = reselect(first, Scheme.CMI)
    assert second.width == 16
    assert second.breakdown[0].bits == first.breakdown[0].bits
