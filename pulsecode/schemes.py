"""
Line-encoding schemes.

This module turns a bit sequence into a Waveform for one of the supported
schemes:
- NRZ-L (Non-Return to Zero Level).
- RZ (Return to Zero).
- Manchester.
- Bipolar AMI (Alternate Mark Inversion).
- CMI (Coded Mark Inversion).

Each scheme is a pulse rule that maps one bit to the flat runs it occupies
inside its bit cell. A shared tracer joins the runs of consecutive bits into a
single polyline, inserting a vertical edge wherever the level changes.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from .bits import BitsLike, as_bits
from .exceptions import InvalidInputError, UnsupportedSchemeError
from .logger import logger
from .waveform import Level, Vertex, Waveform


class Scheme(str, Enum):
    """Supported line-encoding schemes."""

    NRZ_L = "nrz"
    RZ = "rz"
    MANCHESTER = "manchester"
    AMI = "ami"
    CMI = "cmi"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, name: Union["Scheme", str]) -> "Scheme":
        """
        Resolves a scheme from its identifier or display name.

        Matching ignores case, spaces, dashes and underscores, so "NRZ-L",
        "nrz" and "Bipolar AMI" are all accepted.

        Raises:
            UnsupportedSchemeError: If the name matches no scheme.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            scheme = _ALIASES.get(re.sub(r"[\s_\-]", "", name.lower()))
            if scheme is not None:
                return scheme
        supported = ", ".join(s.display_name for s in cls)
        raise UnsupportedSchemeError(
            f"Unsupported encoding scheme: {name!r}. Supported: {supported}"
        )


_DISPLAY_NAMES = {
    Scheme.NRZ_L: "NRZ-L",
    Scheme.RZ: "RZ",
    Scheme.MANCHESTER: "Manchester",
    Scheme.AMI: "Bipolar AMI",
    Scheme.CMI: "CMI",
}

_ALIASES = {
    "nrz": Scheme.NRZ_L,
    "nrzl": Scheme.NRZ_L,
    "rz": Scheme.RZ,
    "manchester": Scheme.MANCHESTER,
    "ami": Scheme.AMI,
    "bipolar": Scheme.AMI,
    "bipolarami": Scheme.AMI,
    "cmi": Scheme.CMI,
}

# Polarity of the first 1-bit. CMI starts on the 0 V rail.
DEFAULT_POLARITY: Dict[Scheme, int] = {
    Scheme.AMI: 1,
    Scheme.CMI: -1,
}

# (start, end, level) inside a bit cell, offsets in [0, 1].
Run = Tuple[float, float, Level]


@dataclass
class SchemeState:
    """
    Mutable state of a single generate() pass.

    Attributes:
        polarity: +1 or -1, the polarity the next 1-bit uses (AMI, CMI).
        last_level: Level at the end of the previous bit, None before the
            first bit.
        vertices: Polyline traced so far.
    """

    polarity: int = 1
    last_level: Optional[Level] = None
    vertices: List[Vertex] = field(default_factory=list)

    def hold(self, start: float, end: float, level: Level) -> None:
        """Draws a flat run at `level` from `start` to `end`."""
        if self.last_level is None:
            self.vertices.append(Vertex(start, level, True))
        elif level != self.last_level:
            self.vertices.append(Vertex(start, level, False))
        self.vertices.append(Vertex(end, level, False))
        self.last_level = level

    def flip(self) -> None:
        self.polarity = -self.polarity


def _nrz_l(bit: int, state: SchemeState) -> Tuple[Run, ...]:
    return ((0.0, 1.0, Level.HIGH if bit else Level.ZERO),)


def _rz(bit: int, state: SchemeState) -> Tuple[Run, ...]:
    return (
        (0.0, 0.5, Level.HIGH if bit else Level.LOW),
        (0.5, 1.0, Level.ZERO),
    )


def _manchester(bit: int, state: SchemeState) -> Tuple[Run, ...]:
    # 1 rises mid-bit, 0 falls mid-bit.
    first, second = (Level.LOW, Level.HIGH) if bit else (Level.HIGH, Level.LOW)
    return ((0.0, 0.5, first), (0.5, 1.0, second))


def _ami(bit: int, state: SchemeState) -> Tuple[Run, ...]:
    if not bit:
        return ((0.0, 1.0, Level.ZERO),)
    level = Level.HIGH if state.polarity > 0 else Level.LOW
    state.flip()
    return ((0.0, 1.0, level),)


def _cmi(bit: int, state: SchemeState) -> Tuple[Run, ...]:
    if not bit:
        return ((0.0, 0.5, Level.ZERO), (0.5, 1.0, Level.HIGH))
    # Two rails only: the "low" 1-bit sits on 0 V.
    level = Level.HIGH if state.polarity > 0 else Level.ZERO
    state.flip()
    return ((0.0, 1.0, level),)


_PULSE_RULES: Dict[Scheme, Callable[[int, SchemeState], Tuple[Run, ...]]] = {
    Scheme.NRZ_L: _nrz_l,
    Scheme.RZ: _rz,
    Scheme.MANCHESTER: _manchester,
    Scheme.AMI: _ami,
    Scheme.CMI: _cmi,
}


def generate(
    bits: BitsLike,
    scheme: Union[Scheme, str],
    initial_polarity: Optional[int] = None,
) -> Waveform:
    """
    Generates the line-encoded waveform of a bit sequence.

    Bits are processed in order. The first vertex lifts the pen; every later
    level change is drawn as a vertical edge at the point where it happens.
    A bit therefore contributes 1 to 4 vertices: NRZ-L for "A" (01000001) has
    12 vertices, while levels_per_bit() gives its 8 per-bit levels.

    Args:
        bits: Bit sequence (see bits.as_bits for accepted forms).
        scheme: Scheme or scheme name.
        initial_polarity: Polarity (+1 or -1) of the first 1-bit for AMI and
            CMI. Defaults to DEFAULT_POLARITY. Ignored by the other schemes.

    Returns:
        The complete Waveform.

    Raises:
        UnsupportedSchemeError: If the scheme is unknown.
        InvalidInputError: If the bits are empty or invalid, or the polarity
            is not +1 or -1.
    """
    scheme = Scheme.parse(scheme)
    bits = as_bits(bits)

    if initial_polarity is None:
        initial_polarity = DEFAULT_POLARITY.get(scheme, 1)
    elif initial_polarity not in (1, -1):
        raise InvalidInputError(
            f"Initial polarity must be +1 or -1, got {initial_polarity!r}"
        )
    initial_polarity = int(initial_polarity)

    logger.debug(
        f"Generating {scheme.display_name} waveform for {bits.size} bits "
        f"(initial polarity: {initial_polarity:+d})."
    )

    rule = _PULSE_RULES[scheme]
    state = SchemeState(polarity=initial_polarity)
    for i, bit in enumerate(bits.tolist()):
        for start, end, level in rule(bit, state):
            state.hold(i + start, i + end, level)

    return Waveform(scheme=scheme, bits=bits, vertices=tuple(state.vertices))


def generate_all(
    bits: BitsLike, schemes: Optional[Iterable[Union[Scheme, str]]] = None
) -> Dict[Scheme, Waveform]:
    """
    Generates one independent waveform per scheme from the same bits.

    Args:
        bits: Bit sequence.
        schemes: Schemes to render. Defaults to all of them.

    Returns:
        Mapping of scheme to waveform, in the requested order.
    """
    bits = as_bits(bits)
    targets = [Scheme.parse(s) for s in (schemes if schemes is not None else Scheme)]
    return {scheme: generate(bits, scheme) for scheme in targets}
