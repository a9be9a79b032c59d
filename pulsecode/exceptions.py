"""
Exceptions raised by pulsecode.

Every error is a ValueError: callers that only care about "bad argument"
can catch that, callers that want to re-prompt the user can catch the
specific class.
"""

from typing import Optional


class PulseCodeError(ValueError):
    """Base class for pulsecode errors."""


class InvalidInputError(PulseCodeError):
    """Empty text, empty or ill-formed bit sequence, or a bad polarity."""


class UnsupportedCodePointError(InvalidInputError):
    """
    A character's code point does not fit in the symbol width.

    Attributes:
        char: The offending character.
        code_point: Its numeric code point.
        width: Number of bits available per character.
        index: Position of the character in the input text.
    """

    def __init__(self, char: str, width: int, index: Optional[int] = None):
        self.char = char
        self.code_point = ord(char)
        self.width = width
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"Character {char!r}{where} has code point {self.code_point}, "
            f"which does not fit in {width} bits (max {(1 << width) - 1})"
        )


class UnsupportedSchemeError(PulseCodeError):
    """Unknown line-encoding scheme identifier."""
