"""
Text to waveform conversion.

A Conversion bundles everything one "convert" action produces: the bits of the
entered text, the waveform for the selected scheme and the guide describing
it. Switching schemes builds a new Conversion from the bits already computed.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from .bits import CharBits, char_breakdown, format_bits, text_to_bits
from .config import EncoderConfig, get_config
from .exceptions import InvalidInputError
from .guide import EncodingGuide, get_guide
from .logger import logger
from .schemes import Scheme, generate
from .waveform import Waveform


@dataclass(frozen=True, eq=False)
class Conversion:
    """
    Result of converting one text.

    Attributes:
        text: The text that was converted (whitespace-stripped).
        bits: Its bit sequence.
        waveform: The waveform of `bits` in the selected scheme.
        guide: Rules and drawing steps for the selected scheme.
        width: Bits per character used for `bits`.
    """

    text: str
    bits: np.ndarray
    waveform: Waveform
    guide: EncodingGuide
    width: int

    @property
    def scheme(self) -> Scheme:
        return self.waveform.scheme

    @property
    def binary(self) -> str:
        """The bits as a '0'/'1' string."""
        return format_bits(self.bits)

    @property
    def breakdown(self) -> List[CharBits]:
        return char_breakdown(self.text, self.width)


def _resolve(config: Optional[EncoderConfig]) -> EncoderConfig:
    if config is not None:
        return config
    return get_config() or EncoderConfig()


def convert(
    text: str,
    scheme: Optional[Union[Scheme, str]] = None,
    config: Optional[EncoderConfig] = None,
) -> Conversion:
    """
    Converts text to its bit sequence and line-encoded waveform.

    Args:
        text: Input text. Leading and trailing whitespace is ignored.
        scheme: Scheme to draw. Defaults to the configured scheme.
        config: Settings to use. Defaults to the global config, or the
            EncoderConfig defaults when none is set.

    Returns:
        The Conversion.

    Raises:
        InvalidInputError: If the text is not a string or is empty after
            stripping.
        UnsupportedCodePointError: If a character does not fit the symbol width.
        UnsupportedSchemeError: If the scheme is unknown.
    """
    config = _resolve(config)
    scheme = Scheme.parse(scheme if scheme is not None else config.scheme)

    if not isinstance(text, str):
        raise InvalidInputError(f"Text must be a string, got {type(text).__name__}")
    text = text.strip()
    if not text:
        raise InvalidInputError("Please enter some text to convert")

    bits = text_to_bits(text, config.bits_per_char)
    logger.debug(f"Converting {text!r} ({bits.size} bits) with {scheme.display_name}.")
    return _build(text, bits, scheme, config)


def reselect(
    conversion: Conversion,
    scheme: Union[Scheme, str],
    config: Optional[EncoderConfig] = None,
) -> Conversion:
    """
    Redraws an existing conversion in another scheme.

    The bits are reused as they are; only the waveform and guide are rebuilt.
    """
    config = _resolve(config)
    scheme = Scheme.parse(scheme)
    logger.debug(f"Switching {conversion.text!r} to {scheme.display_name}.")
    return _build(conversion.text, conversion.bits, scheme, config, conversion.width)


def _build(
    text: str,
    bits: np.ndarray,
    scheme: Scheme,
    config: EncoderConfig,
    width: Optional[int] = None,
) -> Conversion:
    waveform = generate(bits, scheme, config.initial_polarity(scheme))
    return Conversion(
        text=text,
        bits=bits,
        waveform=waveform,
        guide=get_guide(scheme),
        width=width if width is not None else config.bits_per_char,
    )
