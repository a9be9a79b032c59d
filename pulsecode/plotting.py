"""
Waveform plotting.

Draws a Waveform with matplotlib on a graph-paper style axis: dashed voltage
rails, the bits written above the trace, dotted bit separators and a position
marker every character. Bit-width units map directly to the x axis and levels
to y = +1, 0, -1; zoom scales the figure.
"""

from typing import Any, Optional, Tuple, Union

import matplotlib as mpl
import matplotlib.font_manager as fm
import matplotlib.pyplot as plt
import numpy as np

from .bits import BITS_PER_CHAR
from .config import MAX_ZOOM, MIN_ZOOM
from .guide import get_guide
from .logger import logger
from .schemes import Scheme
from .waveform import Waveform

ZOOM_STEP = 0.25

PAPER_COLOR = "#fefce8"
RAIL_COLOR = "#9ca3af"
TRACE_COLOR = "#1e40af"
SEPARATOR_COLOR = (59 / 255, 130 / 255, 246 / 255, 0.3)
MARKER_COLOR = "#6b7280"
BIT_COLORS = {0: "#dc2626", 1: "#059669"}


def apply_default_theme() -> None:
    try:
        font_prop = fm.FontProperties(family="JetBrains Mono", weight="regular")
        fm.findfont(font_prop, fallback_to_default=False)
        font_name = "JetBrains Mono"
    except ValueError:
        font_name = "monospace"
        logger.debug("JetBrains Mono font not found, falling back to monospace.")

    mpl.rcParams.update(
        {
            "font.family": font_name,
            "font.size": 12,
            "axes.linewidth": 1,
            "axes.grid": True,
            "axes.titleweight": "bold",
            "figure.autolayout": True,
            "figure.facecolor": "white",
            "savefig.facecolor": "white",
            "savefig.dpi": 150,
            "grid.color": "#e5e5e5",
            "grid.linewidth": 0.5,
            "xtick.direction": "in",
            "ytick.direction": "in",
        }
    )


def zoom_in(zoom: float) -> float:
    """One zoom step larger, capped at MAX_ZOOM."""
    return min(MAX_ZOOM, zoom + ZOOM_STEP)


def zoom_out(zoom: float) -> float:
    """One zoom step smaller, floored at MIN_ZOOM."""
    return max(MIN_ZOOM, zoom - ZOOM_STEP)


def export_filename(scheme: Union[Scheme, str]) -> str:
    """Default PNG name for a waveform drawn in `scheme`."""
    return f"signal-waveform-{Scheme.parse(scheme).value}.png"


def plot_waveform(
    waveform: Waveform,
    ax: Optional[Any] = None,
    zoom: float = 1.0,
    title: Optional[str] = "",
    show: bool = False,
    **kwargs: Any,
) -> Optional[Tuple[Any, Any]]:
    """
    Plots a line-encoded waveform.

    Args:
        waveform: The waveform to draw.
        ax: Optional matplotlib axis to plot on.
        zoom: Scale of the figure and line widths, in [MIN_ZOOM, MAX_ZOOM].
        title: Title of the plot. Defaults to the scheme's full name. If None,
            no title is set.
        show: Whether to call plt.show() after plotting.
        **kwargs: Additional arguments passed to ax.plot for the trace.

    Returns:
        Tuple of (figure, axis) if show is False, else None.
    """
    if not MIN_ZOOM <= zoom <= MAX_ZOOM:
        raise ValueError(f"zoom must be in [{MIN_ZOOM}, {MAX_ZOOM}], got {zoom}")

    n = waveform.num_bits
    guide = get_guide(waveform.scheme)

    if ax is None:
        width = max(8.0, 0.4 * n + 1.6) * zoom
        fig, ax = plt.subplots(figsize=(width, 2.8 * zoom))
    else:
        fig = ax.figure

    ax.set_facecolor(PAPER_COLOR)

    for rail in guide.rails:
        ax.axhline(int(rail), color=RAIL_COLOR, linestyle="--", linewidth=1)
    ax.set_yticks([int(r) for r in guide.rails], labels=[r.label for r in guide.rails])

    ax.vlines(
        np.arange(n + 1),
        -1.3,
        1.3,
        colors=[SEPARATOR_COLOR],
        linestyles=":",
        linewidth=1,
    )

    for i, bit in enumerate(waveform.bits.tolist()):
        ax.text(
            i + 0.5,
            1.5,
            str(bit),
            color=BIT_COLORS[bit],
            ha="center",
            va="center",
            fontweight="bold",
            fontsize=12 * zoom,
        )

    # One marker per character.
    markers = np.arange(0, n, BITS_PER_CHAR)
    ax.set_xticks(markers + 0.5, labels=[str(m) for m in markers])

    kwargs.setdefault("color", TRACE_COLOR)
    kwargs.setdefault("linewidth", 3 * zoom)
    kwargs.setdefault("solid_capstyle", "projecting")
    kwargs.setdefault("solid_joinstyle", "miter")
    for xs, ys in waveform.segments():
        ax.plot(xs, ys, **kwargs)

    ax.set_xlim(-0.25, n + 0.25)
    ax.set_ylim(-1.6, 1.8)
    ax.set_xlabel("Bit")
    if title == "":
        title = guide.title
    if title is not None:
        ax.set_title(title)

    if show:
        plt.show()
        return None
    return fig, ax


def save_waveform(
    waveform: Waveform, path: Optional[str] = None, zoom: float = 1.0
) -> str:
    """
    Saves a waveform plot as a PNG image.

    Args:
        waveform: The waveform to draw.
        path: Output path. Defaults to export_filename(waveform.scheme) in the
            working directory.
        zoom: Zoom factor passed to plot_waveform.

    Returns:
        The path written.
    """
    if path is None:
        path = export_filename(waveform.scheme)

    fig, _ = plot_waveform(waveform, zoom=zoom)
    try:
        fig.savefig(path, format="png")
    finally:
        plt.close(fig)

    logger.info(f"Saved {waveform.scheme.display_name} waveform to {path}.")
    return str(path)
