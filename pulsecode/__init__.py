"""
Pulsecode: text to digital line-encoding waveforms.

This package provides tools for:
- Converting text to its 8-bit-per-character binary representation.
- Generating NRZ-L, RZ, Manchester, Bipolar AMI and CMI waveforms as
  polylines of (time, voltage level) vertices.
- Explaining and plotting each encoding scheme.
"""

from .bits import bits_to_text, char_breakdown, format_bits, text_to_bits
from .config import (
    EncoderConfig,
    clear_config,
    get_config,
    require_config,
    set_config,
)
from .converter import Conversion, convert, reselect
from .exceptions import (
    InvalidInputError,
    PulseCodeError,
    UnsupportedCodePointError,
    UnsupportedSchemeError,
)
from .guide import EncodingGuide, get_guide
from .logger import set_log_level
from .plotting import apply_default_theme
from .schemes import Scheme, generate, generate_all
from .waveform import Level, Transition, Vertex, Waveform

# Alias matching the encode(text) -> bits naming.
encode = text_to_bits

__all__ = [
    "Conversion",
    "EncoderConfig",
    "EncodingGuide",
    "InvalidInputError",
    "Level",
    "PulseCodeError",
    "Scheme",
    "Transition",
    "UnsupportedCodePointError",
    "UnsupportedSchemeError",
    "Vertex",
    "Waveform",
    "bits_to_text",
    "char_breakdown",
    "clear_config",
    "convert",
    "encode",
    "format_bits",
    "generate",
    "generate_all",
    "get_config",
    "get_guide",
    "require_config",
    "reselect",
    "set_config",
    "set_log_level",
    "text_to_bits",
]

apply_default_theme()
