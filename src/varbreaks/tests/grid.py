"""Candidate break dates and recursive estimation windows.

A candidate break at position ``tb`` (the first post-break observation of
the raw sample) splits a VAR(p) sample of ``nobs`` rows into

- a pre-break window ``[0, tb - 1]`` with ``n1 = tb - p`` residuals, and
- a post-break window ``[tb - p, nobs - 1]`` with ``n2 = nobs - tb``
  residuals, the first ``p`` rows serving as presample values.

So ``n1 + n2`` equals the effective sample size ``T = nobs - p``. All
window bounds are inclusive integer positions.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from varbreaks.exceptions import ConfigurationError

TRIM_STEP = 0.01
MAX_TRIM = 0.5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(np.sign(value) * np.floor(np.abs(value) + 0.5))


def n_free_params(k_endog: int, lags: int, n_deterministic: int) -> int:
    """Minimum sub-sample size ``n (1 + p) + m`` used to admit a window."""
    return k_endog * (1 + lags) + n_deterministic


@dataclass(frozen=True)
class BreakpointGrid:
    """Admissible break dates and the two recursive estimation windows.

    The forward pass estimates on ``[0, end]`` for every ``end`` in
    ``[forward_first, forward_last]``; the backward pass estimates on
    ``[start, nobs - 1]`` for every ``start`` in
    ``[backward_first, backward_last]``. Grid point ``i`` pairs the
    ``i``-th forward window with the ``i``-th backward window.

    Attributes
    ----------
    nobs : int
        Raw number of observations.
    lags : int
        VAR lag order p.
    trim : float | None
        Trimming fraction actually used ("every" mode), None for a single
        requested date.
    forward_first, forward_last : int
        First and last end position of the forward (pre-break) windows.
    backward_first, backward_last : int
        First and last start position of the backward (post-break)
        windows.
    """

    nobs: int
    lags: int
    trim: float | None
    forward_first: int
    forward_last: int
    backward_first: int
    backward_last: int

    def __post_init__(self) -> None:
        """Check that both passes visit the same number of grid points."""
        if self.iterat_forward != self.iterat_backward:
            raise ConfigurationError(
                f"Forward grid length ({self.iterat_forward}) differs from "
                f"backward grid length ({self.iterat_backward})"
            )
        if self.iterat_forward < 1:
            raise ConfigurationError("Breakpoint grid is empty")

    @property
    def iterat_forward(self) -> int:
        """Number of forward-pass estimations."""
        return self.forward_last - self.forward_first + 1

    @property
    def iterat_backward(self) -> int:
        """Number of backward-pass estimations."""
        return self.backward_last - self.backward_first + 1

    @property
    def iterat(self) -> int:
        """Number of candidate break dates."""
        return self.iterat_forward

    @property
    def nobs_effective(self) -> int:
        """Effective sample size T."""
        return self.nobs - self.lags

    @property
    def forward_ends(self) -> NDArray[np.intp]:
        """End position of each forward window."""
        return np.arange(self.forward_first, self.forward_last + 1)

    @property
    def backward_starts(self) -> NDArray[np.intp]:
        """Start position of each backward window."""
        return np.arange(self.backward_first, self.backward_last + 1)

    @property
    def break_indices(self) -> NDArray[np.intp]:
        """Raw position of the first post-break observation of each candidate."""
        return self.forward_ends + 1

    @property
    def n1(self) -> NDArray[np.intp]:
        """Pre-break residual count of each candidate."""
        return self.forward_ends + 1 - self.lags

    @property
    def n2(self) -> NDArray[np.intp]:
        """Post-break residual count of each candidate."""
        return self.nobs - self.backward_starts - self.lags

    def forward_windows(self) -> list[tuple[int, int]]:
        """Inclusive ``(first, last)`` bounds of the forward windows."""
        return [(0, int(end)) for end in self.forward_ends]

    def backward_windows(self) -> list[tuple[int, int]]:
        """Inclusive ``(first, last)`` bounds of the backward windows."""
        return [(int(start), self.nobs - 1) for start in self.backward_starts]


def search_trim(
    nobs_effective: int,
    n_params: int,
    trim: float = 0.15,
) -> float:
    """Find the smallest admissible trimming fraction.

    Starting from ``trim``, the fraction is widened in steps of 0.01 until
    the initial sub-sample of ``round(T * trim)`` observations holds at
    least ``n_params`` observations. One further step is added as a safety
    margin.

    Parameters
    ----------
    nobs_effective : int
        Effective sample size T.
    n_params : int
        Minimum sub-sample size.
    trim : float
        Initial trimming fraction.

    Returns
    -------
    float
        Trimming fraction including the safety margin.

    Raises
    ------
    ConfigurationError
        If no fraction up to 0.5 admits a valid sub-sample.
    """
    if not 0 < trim < MAX_TRIM:
        raise ConfigurationError(f"trim must lie in (0, {MAX_TRIM}), got {trim}")

    while round_half_up(nobs_effective * trim) - n_params < 0:
        trim = round(trim + TRIM_STEP, 10)
        if trim >= MAX_TRIM:
            raise ConfigurationError(
                f"Cannot find an admissible trimming fraction: sample of "
                f"{nobs_effective} observations too small for {n_params} "
                f"parameters per sub-sample"
            )

    return round(trim + TRIM_STEP, 10)


def build_grid(
    nobs: int,
    k_endog: int,
    n_deterministic: int,
    lags: int,
    break_index: int | None = None,
    trim: float = 0.15,
) -> BreakpointGrid:
    """Build the breakpoint grid.

    Parameters
    ----------
    nobs : int
        Raw number of observations (including the p presample rows).
    k_endog : int
        Number of endogenous variables n.
    n_deterministic : int
        Number of deterministic and exogenous columns m.
    lags : int
        VAR lag order p.
    break_index : int | None
        Raw position of the first post-break observation for a single
        date. None tests every date in the trimmed interior.
    trim : float
        Initial trimming fraction for the "every" search.

    Returns
    -------
    BreakpointGrid
        The grid of candidate dates and estimation windows.

    Raises
    ------
    ConfigurationError
        If a sub-sample is smaller than the parameter count (single date)
        or no admissible trimming fraction exists ("every").
    """
    T = nobs - lags
    n_params = n_free_params(k_endog, lags, n_deterministic)

    if break_index is None:
        trim_used = search_trim(T, n_params, trim)
        trimobs = round_half_up(T * trim_used)
        first_n1 = trimobs
        last_n1 = T - trimobs
        if last_n1 < first_n1:
            raise ConfigurationError(
                f"Trimming fraction {trim_used} leaves no admissible break dates"
            )
        return BreakpointGrid(
            nobs=nobs,
            lags=lags,
            trim=trim_used,
            forward_first=first_n1 + lags - 1,
            forward_last=last_n1 + lags - 1,
            backward_first=first_n1,
            backward_last=last_n1,
        )

    n1 = break_index - lags
    n2 = nobs - break_index
    if n1 - n_params < 0:
        raise ConfigurationError(
            f"Pre-break sample ({n1} observations) smaller than the number "
            f"of parameters ({n_params})"
        )
    if n2 - n_params < 0:
        raise ConfigurationError(
            f"Post-break sample ({n2} observations) smaller than the number "
            f"of parameters ({n_params})"
        )
    return BreakpointGrid(
        nobs=nobs,
        lags=lags,
        trim=None,
        forward_first=break_index - 1,
        forward_last=break_index - 1,
        backward_first=n1,
        backward_last=n1,
    )

