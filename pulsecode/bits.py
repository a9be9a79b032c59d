"""
Text to bit sequence conversion.

This module turns text into the bit sequence that the line encoders draw:
- Fixed-width, MSB-first code points per character (text_to_bits).
- Validation of caller-supplied bit sequences (as_bits).
- The inverse grouping back to text (bits_to_text).
- Display helpers: '0'/'1' strings and a per-character breakdown.

Bit sequences are read-only 1-D uint8 NumPy arrays.
"""

import sys
from typing import List, NamedTuple, Optional, Sequence, Union

import numpy as np

from .exceptions import InvalidInputError, UnsupportedCodePointError
from .logger import logger

BITS_PER_CHAR = 8

BitsLike = Union[str, Sequence[int], np.ndarray]


class CharBits(NamedTuple):
    """One row of the character breakdown table."""

    char: str
    label: str
    code_point: int
    bits: str


def _freeze(bits: np.ndarray) -> np.ndarray:
    bits.flags.writeable = False
    return bits


def _check_width(width: int) -> None:
    if width < 1:
        raise InvalidInputError(f"Symbol width must be at least 1 bit, got {width}")


def text_to_bits(text: str, width: int = BITS_PER_CHAR) -> np.ndarray:
    """
    Converts text to its fixed-width binary representation.

    Each character contributes `width` bits, most significant bit first, in
    input order.

    Args:
        text: Non-empty input text.
        width: Bits per character. The default of 8 covers code points 0-255.

    Returns:
        Read-only uint8 array of length `width * len(text)`.

    Raises:
        InvalidInputError: If `text` is empty.
        UnsupportedCodePointError: If a code point needs more than `width` bits.
    """
    _check_width(width)
    if not text:
        raise InvalidInputError("Cannot convert empty text to bits")

    codes = np.array([ord(c) for c in text], dtype=np.int64)
    too_wide = np.flatnonzero(codes >> width)
    if too_wide.size:
        index = int(too_wide[0])
        raise UnsupportedCodePointError(text[index], width, index=index)

    shifts = np.arange(width - 1, -1, -1, dtype=np.int64)
    bits = ((codes[:, None] >> shifts) & 1).astype(np.uint8).ravel()

    logger.debug(f"Converted {len(text)} characters to {bits.size} bits.")
    return _freeze(bits)


def as_bits(bits: BitsLike) -> np.ndarray:
    """
    Validates a bit sequence and returns it as a read-only uint8 array.

    Args:
        bits: A string of '0'/'1' characters, a sequence of 0/1 integers or
            booleans, or an integer/boolean array.

    Returns:
        Read-only uint8 array.

    Raises:
        InvalidInputError: If the sequence is empty, not one-dimensional, or
            holds anything other than 0 and 1.
    """
    if isinstance(bits, str):
        bad = set(bits) - {"0", "1"}
        if bad:
            raise InvalidInputError(
                f"Bit string may only contain '0' and '1', found {sorted(bad)}"
            )
        arr = np.frombuffer(bits.encode("ascii"), dtype=np.uint8) - ord("0")
    else:
        try:
            arr = np.asarray(bits)
        except ValueError as e:
            raise InvalidInputError(f"Bit sequence is ill-formed: {e}") from e
        if arr.size == 0:
            raise InvalidInputError("Bit sequence is empty")
        if arr.dtype.kind not in "biu":
            raise InvalidInputError(
                f"Bits must be integers or booleans, got dtype {arr.dtype}"
            )

    if arr.ndim != 1:
        raise InvalidInputError(
            f"Bit sequence must be one-dimensional, got shape {arr.shape}"
        )
    if arr.size == 0:
        raise InvalidInputError("Bit sequence is empty")

    bad_idx = np.flatnonzero((arr != 0) & (arr != 1))
    if bad_idx.size:
        i = int(bad_idx[0])
        raise InvalidInputError(f"Invalid bit value {arr[i]!r} at index {i}")

    return _freeze(arr.astype(np.uint8))


def bits_to_text(bits: BitsLike, width: int = BITS_PER_CHAR) -> str:
    """
    Reassembles text from consecutive `width`-bit groups.

    Args:
        bits: Bit sequence, as accepted by as_bits.
        width: Bits per character.

    Returns:
        The decoded text.

    Raises:
        InvalidInputError: If the bits are invalid or their count is not a
            multiple of `width`, or a group is not a valid code point.
    """
    _check_width(width)
    bits = as_bits(bits)
    if bits.size % width:
        raise InvalidInputError(
            f"Bit count {bits.size} is not a multiple of the symbol width {width}"
        )

    weights = 1 << np.arange(width - 1, -1, -1, dtype=np.int64)
    codes = bits.reshape(-1, width).astype(np.int64) @ weights
    too_big = np.flatnonzero(codes > sys.maxunicode)
    if too_big.size:
        i = int(too_big[0])
        raise InvalidInputError(
            f"Symbol {i} has value {int(codes[i])}, above the largest code point "
            f"{sys.maxunicode}"
        )
    return "".join(chr(int(c)) for c in codes)


def format_bits(bits: BitsLike, group: Optional[int] = None) -> str:
    """
    Renders bits as '0'/'1' characters.

    Args:
        bits: Bit sequence, as accepted by as_bits.
        group: If given, insert a space every `group` bits.

    Returns:
        The bit string, e.g. "01000001" or "01000001 01000010".
    """
    text = "".join("1" if b else "0" for b in as_bits(bits))
    if not group:
        return text
    return " ".join(text[i : i + group] for i in range(0, len(text), group))


def char_breakdown(text: str, width: int = BITS_PER_CHAR) -> List[CharBits]:
    """Returns the binary code of every character of `text`, in order."""
    bits = text_to_bits(text, width)
    rows = []
    for i, char in enumerate(text):
        label = "(space)" if char == " " else char
        rows.append(
            CharBits(
                char=char,
                label=label,
                code_point=ord(char),
                bits=format_bits(bits[i * width : (i + 1) * width]),
            )
        )
    return rows
