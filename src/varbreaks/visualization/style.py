"""Plotting style for varbreaks figures.

Figures use a muted palette, no top/right spines, horizontal grid lines
only, no tick marks and frameless legends.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from matplotlib.axes import Axes


VARBREAKS_COLORS: dict[str, str] = {
    "blue": "#2F5C8A",
    "red": "#B5443B",
    "teal": "#3C8C88",
    "green": "#5E8C3A",
    "gold": "#C99A2E",
    "grey": "#7F7F7F",
    "mauve": "#8C5E8C",
    "light_grey": "#D9D9D9",
    "near_black": "#262626",
}

VARBREAKS_COLOR_CYCLE: list[str] = [
    VARBREAKS_COLORS["blue"],
    VARBREAKS_COLORS["red"],
    VARBREAKS_COLORS["teal"],
    VARBREAKS_COLORS["green"],
    VARBREAKS_COLORS["gold"],
    VARBREAKS_COLORS["grey"],
    VARBREAKS_COLORS["mauve"],
]


def get_style() -> dict[str, Any]:
    """Return the rcParams dictionary of the varbreaks style."""
    from cycler import cycler

    return {
        "figure.figsize": (10, 5),
        "figure.dpi": 150,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.grid": True,
        "axes.grid.axis": "y",
        "grid.color": VARBREAKS_COLORS["light_grey"],
        "grid.linewidth": 0.6,
        "axes.edgecolor": VARBREAKS_COLORS["near_black"],
        "axes.labelcolor": VARBREAKS_COLORS["near_black"],
        "axes.prop_cycle": cycler(color=VARBREAKS_COLOR_CYCLE),
        "font.family": "sans-serif",
        "font.size": 10,
        "xtick.major.size": 0,
        "ytick.major.size": 0,
        "legend.frameon": False,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
    }


def set_style() -> None:
    """Apply the varbreaks style globally."""
    import matplotlib as mpl

    mpl.rcParams.update(get_style())


@contextmanager
def use_style() -> Iterator[None]:
    """Apply the varbreaks style inside a ``with`` block only."""
    import matplotlib as mpl

    with mpl.rc_context(get_style()):
        yield


def add_reference_lines(
    ax: Axes,
    levels: tuple[float, ...] = (0.05, 0.10),
    color: str | None = None,
) -> None:
    """Draw horizontal dashed lines at the given significance levels."""
    if color is None:
        color = VARBREAKS_COLORS["grey"]
    for level in levels:
        ax.axhline(y=level, color=color, linewidth=0.8, linestyle="--", alpha=0.8)
        ax.annotate(
            f"{level:.2f}",
            xy=(1.0, level),
            xycoords=("axes fraction", "data"),
            xytext=(4, 0),
            textcoords="offset points",
            va="center",
            fontsize=8,
            color=color,
        )
