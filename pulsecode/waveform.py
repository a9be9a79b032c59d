"""
Waveform vertex model.

A line-encoded signal is described as a polyline over time, with time measured
in bit-width units (bit i spans [i, i + 1]) and voltage as a symbolic level.
Pixels, colors and zoom belong to whoever draws it (see plotting).
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, List, NamedTuple, Tuple

import numpy as np

if TYPE_CHECKING:
    from .schemes import Scheme


class Level(IntEnum):
    """Symbolic voltage rails: +V, 0 V and -V."""

    HIGH = 1
    ZERO = 0
    LOW = -1

    @property
    def label(self) -> str:
        return {Level.HIGH: "+V", Level.ZERO: "0", Level.LOW: "-V"}[self]


class Vertex(NamedTuple):
    """
    One polyline point.

    Attributes:
        position: Time in bit-width units.
        level: Voltage level at this point.
        starts_new_segment: True to lift the pen and start a new subpath here,
            False to draw a straight edge from the previous vertex.
    """

    position: float
    level: Level
    starts_new_segment: bool = False


class Transition(NamedTuple):
    """A vertical edge of the waveform."""

    position: float
    before: Level
    after: Level

    @property
    def rising(self) -> bool:
        return self.after > self.before


@dataclass(frozen=True, eq=False)
class Waveform:
    """
    The vertex sequence produced for one bit sequence and one scheme.

    Attributes:
        scheme: The line-encoding scheme that produced the vertices.
        bits: The encoded bit sequence (read-only uint8 array).
        vertices: Ordered polyline vertices.
    """

    scheme: "Scheme"
    bits: np.ndarray
    vertices: Tuple[Vertex, ...]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Waveform):
            return NotImplemented
        return (
            self.scheme == other.scheme
            and self.vertices == other.vertices
            and np.array_equal(self.bits, other.bits)
        )

    def __hash__(self) -> int:
        return hash((self.scheme, self.vertices, self.bits.tobytes()))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    @property
    def num_bits(self) -> int:
        return int(self.bits.shape[0])

    @property
    def duration(self) -> float:
        """Length of the waveform in bit-width units."""
        return float(self.num_bits)

    @property
    def positions(self) -> np.ndarray:
        return np.array([v.position for v in self.vertices], dtype=float)

    @property
    def levels(self) -> np.ndarray:
        return np.array([int(v.level) for v in self.vertices], dtype=np.int8)

    def segments(self) -> List[Tuple[np.ndarray, np.ndarray]]:
        """
        Splits the polyline into its subpaths.

        Returns:
            List of (positions, levels) array pairs, one per run of vertices
            starting at a vertex with starts_new_segment set.
        """
        out = []
        xs, ys = [], []
        for v in self.vertices:
            if v.starts_new_segment and xs:
                out.append((np.array(xs, dtype=float), np.array(ys, dtype=np.int8)))
                xs, ys = [], []
            xs.append(v.position)
            ys.append(int(v.level))
        if xs:
            out.append((np.array(xs, dtype=float), np.array(ys, dtype=np.int8)))
        return out

    def _runs(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        # Flat stretches: consecutive drawn vertices at the same level.
        starts, ends, levels = [], [], []
        for a, b in zip(self.vertices, self.vertices[1:]):
            if b.starts_new_segment or a.level != b.level:
                continue
            if b.position > a.position:
                starts.append(a.position)
                ends.append(b.position)
                levels.append(int(a.level))
        return (
            np.array(starts, dtype=float),
            np.array(ends, dtype=float),
            np.array(levels, dtype=np.int8),
        )

    def _levels_at(self, positions: np.ndarray) -> np.ndarray:
        outside = (positions < 0) | (positions > self.duration)
        if np.any(outside):
            raise ValueError(
                f"Position {float(positions[outside][0])} is outside the waveform "
                f"[0, {self.duration}]"
            )
        starts, _, levels = self._runs()
        # Flat runs tile [0, duration]; the end point holds the final level.
        q = np.minimum(positions, np.nextafter(self.duration, 0))
        idx = np.searchsorted(starts, q, side="right") - 1
        return levels[idx]

    def level_at(self, position: float) -> Level:
        """
        Level held on [position, position + eps).

        At a vertical edge this is the level after the edge; at the very end
        of the waveform it is the final level.

        Raises:
            ValueError: If position is outside [0, duration].
        """
        return Level(int(self._levels_at(np.array([position], dtype=float))[0]))

    def levels_per_bit(self, offset: float = 0.25) -> np.ndarray:
        """
        Samples the level of every bit at the same bit-relative offset.

        Args:
            offset: Offset inside each bit, in [0, 1).

        Returns:
            int8 array with one Level value per bit.
        """
        if not 0 <= offset < 1:
            raise ValueError(f"offset must be in [0, 1), got {offset}")
        return self._levels_at(np.arange(self.num_bits, dtype=float) + offset)

    def transitions(self) -> List[Transition]:
        """Returns every vertical edge, in time order."""
        return [
            Transition(b.position, a.level, b.level)
            for a, b in zip(self.vertices, self.vertices[1:])
            if not b.starts_new_segment
            and a.position == b.position
            and a.level != b.level
        ]
