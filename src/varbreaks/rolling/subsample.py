"""Recursive sub-sample estimation over a breakpoint grid.

Two mirrored expanding-window passes re-estimate the VAR once per grid
point: the forward pass keeps the window start at the beginning of the
sample and moves its end, the backward pass keeps the window end at the
end of the sample and moves its start. Each pass records the residual
count and the residual cross-product ``u'u`` of every window.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from varbreaks.exceptions import ConfigurationError
from varbreaks.models.var import VAR
from varbreaks.tests.grid import n_free_params
from varbreaks.tests.statistics import ChowStatistics, chow_statistics

if TYPE_CHECKING:
    import pandas as pd
    from numpy.typing import ArrayLike, NDArray

    from varbreaks.models.base import CovType, Trend
    from varbreaks.models.var import VARResults
    from varbreaks.tests.grid import BreakpointGrid


@dataclass(kw_only=True)
class SubsampleResults:
    """Residual cross-products of both recursive passes.

    Attributes
    ----------
    full : VARResults
        Full-sample fit.
    grid : BreakpointGrid
        Grid the passes ran over.
    n1, n2 : NDArray[np.integer]
        Pre- and post-break residual counts, shape (iterat,).
    sigma1, sigma2 : NDArray[np.floating]
        Pre- and post-break residual cross-products, shape (iterat, n, n).
    """

    full: VARResults
    grid: BreakpointGrid
    n1: NDArray[np.integer[Any]]
    n2: NDArray[np.integer[Any]]
    sigma1: NDArray[np.floating[Any]]
    sigma2: NDArray[np.floating[Any]]

    @property
    def iterat(self) -> int:
        """Number of grid points."""
        return len(self.n1)

    def sigma_pooled(self, i: int) -> NDArray[np.floating[Any]]:
        """Full-sample residual cross-product over the two sub-samples of point i.

        The full-sample residuals are sliced to their first ``n1`` and last
        ``n2`` rows and the cross-products averaged over ``n1 + n2``.
        """
        n1 = int(self.n1[i])
        n2 = int(self.n2[i])
        resid = self.full.resid
        u1 = resid[:n1]
        u2 = resid[len(resid) - n2 :]
        return (u1.T @ u1 + u2.T @ u2) / (n1 + n2)

    def statistics(self) -> list[ChowStatistics]:
        """Chow statistics for every grid point."""
        full = self.full
        return [
            chow_statistics(
                n1=int(self.n1[i]),
                n2=int(self.n2[i]),
                nobs=full.nobs,
                sigma_pooled=self.sigma_pooled(i),
                sigma1=self.sigma1[i],
                sigma2=self.sigma2[i],
                resid=full.resid,
                lags=full.k_ar,
                k_endog=full.k_endog,
                n_deterministic=full.n_deterministic,
                coeff_rows=full.coeff_rows,
            )
            for i in range(self.iterat)
        ]


class RecursiveSubsampleVAR:
    """Forward and backward recursive VAR estimation over a breakpoint grid.

    Parameters
    ----------
    endog : ArrayLike
        Endogenous variables (n_obs, k_endog).
    exog : ArrayLike | None
        Exogenous regressors (n_obs, k_exog).
    lags : int
        Lag order p.
    trend : "c" | "ct" | "n"
        Deterministic terms.
    grid : BreakpointGrid
        Candidate break dates and window bounds.

    Examples
    --------
    >>> from varbreaks.tests.grid import build_grid
    >>> grid = build_grid(nobs=200, k_endog=2, n_deterministic=1, lags=1)
    >>> recursive = RecursiveSubsampleVAR(y, None, lags=1, trend="c", grid=grid)
    >>> results = recursive.fit()
    >>> stats = results.statistics()
    """

    def __init__(
        self,
        endog: ArrayLike | pd.DataFrame,
        exog: ArrayLike | pd.DataFrame | None,
        lags: int,
        trend: Trend,
        grid: BreakpointGrid,
    ) -> None:
        """Initialize the recursive estimator."""
        self.model = VAR(endog, exog, lags=lags, trend=trend)
        if grid.nobs != self.model.nobs or grid.lags != self.model.k_ar:
            raise ConfigurationError(
                f"Grid built for nobs={grid.nobs}, lags={grid.lags} does not "
                f"match data with nobs={self.model.nobs}, lags={self.model.k_ar}"
            )
        self.grid = grid

    @classmethod
    def from_model(cls, model: VAR, grid: BreakpointGrid) -> RecursiveSubsampleVAR:
        """Create the estimator from an existing VAR model."""
        return cls(model.endog, model.exog, model.k_ar, model.trend, grid)

    @property
    def n_params(self) -> int:
        """Minimum sub-sample size ``n (1 + p) + m``."""
        model = self.model
        return n_free_params(model.k_endog, model.k_ar, model.n_deterministic)

    def _fit_window(self, first: int, last: int, cov_type: CovType) -> VARResults:
        """Fit the VAR on the inclusive window ``[first, last]``."""
        model = self.model
        exog = model.exog[first : last + 1] if model.exog is not None else None
        window = VAR(
            model.endog[first : last + 1], exog, lags=model.k_ar, trend=model.trend
        )
        return window.fit(cov_type=cov_type)

    def forward(
        self, cov_type: CovType = "nonrobust"
    ) -> tuple[NDArray[np.integer[Any]], NDArray[np.floating[Any]]]:
        """Run the forward (pre-break) pass.

        Returns
        -------
        tuple[NDArray[np.integer], NDArray[np.floating]]
            Residual counts (iterat,) and cross-products (iterat, n, n).

        Raises
        ------
        ConfigurationError
            If a window has no more residuals than endogenous variables.
        """
        K = self.model.k_endog
        windows = self.grid.forward_windows()
        n1 = np.zeros(len(windows), dtype=int)
        sigma1 = np.zeros((len(windows), K, K))

        for i, (first, last) in enumerate(windows):
            resid = self._fit_window(first, last, cov_type).resid
            if len(resid) <= K:
                raise ConfigurationError(
                    f"Starting sample smaller than parameters: window "
                    f"[{first}, {last}] has {len(resid)} residuals for {K} "
                    f"equations"
                )
            n1[i] = len(resid)
            sigma1[i] = resid.T @ resid

        return n1, sigma1

    def backward(
        self, cov_type: CovType = "nonrobust"
    ) -> tuple[NDArray[np.integer[Any]], NDArray[np.floating[Any]]]:
        """Run the backward (post-break) pass.

        Returns
        -------
        tuple[NDArray[np.integer], NDArray[np.floating]]
            Residual counts (iterat,) and cross-products (iterat, n, n).

        Raises
        ------
        ConfigurationError
            If a window has fewer residuals than the model parameter count.
        """
        K = self.model.k_endog
        n_params = self.n_params
        windows = self.grid.backward_windows()
        n2 = np.zeros(len(windows), dtype=int)
        sigma2 = np.zeros((len(windows), K, K))

        for i, (first, last) in enumerate(windows):
            resid = self._fit_window(first, last, cov_type).resid
            if len(resid) - n_params < 0:
                raise ConfigurationError(
                    f"Ending sample smaller than parameters: window "
                    f"[{first}, {last}] has {len(resid)} residuals for "
                    f"{n_params} parameters"
                )
            n2[i] = len(resid)
            sigma2[i] = resid.T @ resid

        return n2, sigma2

    def fit(
        self,
        cov_type: CovType = "nonrobust",
        full: VARResults | None = None,
    ) -> SubsampleResults:
        """Run the full-sample fit and both recursive passes.

        Parameters
        ----------
        cov_type : CovType
            Covariance estimator passed to every VAR fit.
        full : VARResults | None
            Full-sample fit to reuse. Estimated when None.

        Returns
        -------
        SubsampleResults
            Sub-sample cross-products ready for the Chow statistics.
        """
        if full is None:
            full = self.model.fit(cov_type=cov_type)

        n1, sigma1 = self.forward(cov_type)
        n2, sigma2 = self.backward(cov_type)

        return SubsampleResults(
            full=full,
            grid=self.grid,
            n1=n1,
            n2=n2,
            sigma1=sigma1,
            sigma2=sigma2,
        )

    def __repr__(self) -> str:
        """Return string representation of the estimator."""
        return (
            f"RecursiveSubsampleVAR(iterat={self.grid.iterat}, "
            f"nobs={self.model.nobs}, lags={self.model.k_ar})"
        )
