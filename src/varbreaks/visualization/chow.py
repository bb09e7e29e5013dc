"""Visualization of bootstrapped VAR Chow test p-values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from varbreaks.visualization.style import (
    VARBREAKS_COLORS,
    add_reference_lines,
    use_style,
)

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from varbreaks.tests.chow import VARChowTestResults


def plot_chow_pvalues(
    results: VARChowTestResults,
    destination: str | None = None,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "Break date",
    ylabel: str = "Bootstrap p-value",
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the bootstrap p-values of the three Chow tests.

    Parameters
    ----------
    results : VARChowTestResults
        Results of a VAR Chow test.
    destination : str | None
        "display" shows the figure, any other string is a file path prefix
        and the figure is saved as ``<prefix>_chow_pvalues.png``. None only
        returns the figure.
    ax : Axes | None
        Axes to plot on. If None, creates a new figure.
    title : str | None
        Plot title. Defaults to "Chow tests: bootstrap p-values".
    xlabel : str
        X-axis label.
    ylabel : str
        Y-axis label.
    figsize : tuple[float, float]
        Figure size. Default is (10, 5).

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.
    """
    import matplotlib.pyplot as plt

    series = [
        ("Sample-split", results.pv_ss_boot, VARBREAKS_COLORS["blue"]),
        ("Break-point", results.pv_bp_boot, VARBREAKS_COLORS["red"]),
        ("Forecast", results.pv_fc_boot, VARBREAKS_COLORS["teal"]),
    ]

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[assignment]

        x = np.arange(results.iterat)
        single = results.iterat == 1
        for label, pvalues, color in series:
            ax.plot(
                x,
                pvalues,
                color=color,
                linewidth=2.0,
                marker="o" if single else None,
                label=label,
            )

        add_reference_lines(ax, (0.05, 0.10))

        n_ticks = min(results.iterat, 8)
        ticks = np.unique(np.linspace(0, results.iterat - 1, num=n_ticks).astype(int))
        ax.set_xticks(ticks)
        ax.set_xticklabels([str(results.break_labels[i]) for i in ticks])
        ax.set_ylim(0, 1)

        ax.set_title(title or "Chow tests: bootstrap p-values")
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        ax.legend(loc="best", frameon=False)

        if destination == "display":
            plt.show()
        elif destination is not None:
            fig.savefig(f"{destination}_chow_pvalues.png")  # type: ignore[union-attr]

    return fig, ax  # type: ignore[return-value]
