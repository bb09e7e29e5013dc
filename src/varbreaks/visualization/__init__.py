"""Plotting for VAR Chow test results."""

from varbreaks.visualization.chow import plot_chow_pvalues
from varbreaks.visualization.style import (
    VARBREAKS_COLOR_CYCLE,
    VARBREAKS_COLORS,
    add_reference_lines,
    get_style,
    set_style,
    use_style,
)

__all__ = [
    "VARBREAKS_COLORS",
    "VARBREAKS_COLOR_CYCLE",
    "add_reference_lines",
    "get_style",
    "plot_chow_pvalues",
    "set_style",
    "use_style",
]
