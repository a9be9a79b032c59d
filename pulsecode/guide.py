"""
Drawing guides for each encoding scheme.

Plain-text rules and hand-drawing steps shown next to a waveform, plus the
voltage rails each scheme uses.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .schemes import Scheme
from .waveform import Level


@dataclass(frozen=True)
class EncodingGuide:
    """
    Explanatory text for one scheme.

    Attributes:
        title: Full scheme name.
        short_title: Name used in headings and labels.
        rules: How each bit value is encoded.
        steps: How to draw the waveform by hand on graph paper.
        rails: Voltage levels the scheme uses, top to bottom.
    """

    title: str
    short_title: str
    rules: Tuple[str, ...]
    steps: Tuple[str, ...]
    rails: Tuple[Level, ...]


GUIDES: Dict[Scheme, EncodingGuide] = {
    Scheme.NRZ_L: EncodingGuide(
        title="NRZ-L (Non-Return to Zero Level)",
        short_title="NRZ-L",
        rules=(
            "Bit 1: Signal stays at +V (high) for the entire bit duration",
            "Bit 0: Signal stays at 0V (low) for the entire bit duration",
            "Transitions: Only occur when the bit value changes (0→1 or 1→0)",
            "No return to zero: Signal maintains level for full bit period",
        ),
        steps=(
            "Draw 2 horizontal dotted lines: +V at top, 0 at bottom",
            "Mark vertical gridlines - each bit occupies 1 full cell width",
            "Write the binary bits above the graph (0 1 0 0 1 0 0 0...)",
            "For each 1: draw a horizontal line at +V level",
            "For each 0: draw a horizontal line at 0V level",
            "Connect bits with vertical lines only when value changes",
        ),
        rails=(Level.HIGH, Level.ZERO),
    ),
    Scheme.RZ: EncodingGuide(
        title="RZ (Return to Zero)",
        short_title="RZ",
        rules=(
            "Bit 1: Signal goes +V for first half, then returns to 0V for second half",
            "Bit 0: Signal goes -V for first half, then returns to 0V for second half",
            "Always returns: Every bit period ends at 0V (ground)",
            "Self-clocking: Easy to detect bit boundaries",
        ),
        steps=(
            "Draw 3 horizontal dotted lines: +V at top, 0 in middle, -V at bottom",
            "Divide each bit cell into 2 equal halves with a faint vertical line",
            "Write the binary bits above the graph",
            "For each 1: draw +V for first half, then drop to 0V for second half",
            "For each 0: draw -V for first half, then rise to 0V for second half",
            "Each bit always ends at the 0V line",
        ),
        rails=(Level.HIGH, Level.ZERO, Level.LOW),
    ),
    Scheme.MANCHESTER: EncodingGuide(
        title="Manchester Encoding",
        short_title="Manchester",
        rules=(
            "Bit 1: Transition from LOW to HIGH at the middle of the bit (↑)",
            "Bit 0: Transition from HIGH to LOW at the middle of the bit (↓)",
            "Mid-bit transition: ALWAYS occurs at the center of each bit",
            "Self-clocking: The transition provides clock information",
        ),
        steps=(
            "Draw 2 horizontal dotted lines: +V at top, -V at bottom",
            "Divide each bit cell into 2 equal halves with a center mark",
            "Write the binary bits above the graph",
            "For each 1: start at -V, transition UP to +V at the middle",
            "For each 0: start at +V, transition DOWN to -V at the middle",
            "Remember: the middle transition is the key feature!",
        ),
        rails=(Level.HIGH, Level.LOW),
    ),
    Scheme.AMI: EncodingGuide(
        title="Bipolar AMI (Alternate Mark Inversion)",
        short_title="Bipolar AMI",
        rules=(
            "Bit 0: Signal stays at 0V (zero level) for entire bit duration",
            "Bit 1: Alternates between +V and -V for consecutive 1s",
            "First 1: Could be +V, then next 1 is -V, then +V, and so on...",
            "Alternating: Prevents DC buildup in the signal",
        ),
        steps=(
            "Draw 3 horizontal dotted lines: +V at top, 0 in middle, -V at bottom",
            "Mark vertical gridlines for each bit",
            "Write the binary bits above the graph",
            "For each 0: draw a flat line at 0V",
            "For the first 1: draw at +V level",
            "For the next 1: draw at -V level (alternate each time)",
            "Keep alternating +V/-V for every subsequent 1",
        ),
        rails=(Level.HIGH, Level.ZERO, Level.LOW),
    ),
    Scheme.CMI: EncodingGuide(
        title="CMI (Coded Mark Inversion)",
        short_title="CMI",
        rules=(
            "Bit 0: Transition from 0V to +V at the middle of bit (always)",
            "Bit 1: Alternates between staying at +V and staying at 0V",
            "First 1: Full bit at 0V, next 1 is full bit at +V, etc.",
            "0 always transitions: Every 0 has a mid-bit transition from 0V to +V",
        ),
        steps=(
            "Draw 2 horizontal dotted lines: +V at top, 0 at bottom",
            "Divide each bit cell into 2 halves for 0-bits",
            "Write the binary bits above the graph",
            "For first 1: draw flat line at 0V for entire bit",
            "For next 1: draw flat line at +V for entire bit (alternate)",
            "For each 0: draw 0V for first half, then +V for second half",
            'Track which level the next "1" should use!',
        ),
        rails=(Level.HIGH, Level.ZERO),
    ),
}


def get_guide(scheme: Union[Scheme, str]) -> EncodingGuide:
    """Returns the guide for a scheme or scheme name."""
    return GUIDES[Scheme.parse(scheme)]
