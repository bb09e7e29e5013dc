"""Residual-resampling bootstrap for the VAR Chow statistics.

Each replicate resamples a centred residual pool (with the intercept and
the exogenous fit added back), adds any fitted linear trend at its own
time position, simulates a series from the estimated lag coefficients,
and re-runs the full-sample fit and both recursive passes over the grid
built on the original data. A replicate statistic counts
towards the empirical p-value when it strictly exceeds the statistic of
the original sample.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
from joblib import Parallel, delayed

from varbreaks.bootstrap.simulate import resample_rows, simulate_var
from varbreaks.exceptions import BootstrapWarning
from varbreaks.rolling.subsample import RecursiveSubsampleVAR

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

    from varbreaks.models.base import CovType
    from varbreaks.models.var import VAR, VARResults
    from varbreaks.tests.grid import BreakpointGrid
    from varbreaks.tests.statistics import ChowStatistics

BURN_IN_COPIES = 4


def residual_pool(full: VARResults) -> NDArray[np.floating[Any]]:
    """Centred residuals plus the intercept and the exogenous fit.

    A linear trend is not part of the pool; see :func:`trend_path`.

    Parameters
    ----------
    full : VARResults
        Full-sample fit.

    Returns
    -------
    NDArray[np.floating]
        Shape (nobs, k_endog).
    """
    resid = full.resid
    return resid - resid.mean(axis=0) + full.intercept + full.exog_fitted


def trend_path(full: VARResults, n_shocks: int) -> NDArray[np.floating[Any]]:
    """Trend contribution for a shock path ending at the last observation.

    The last shock lines up with the last observation of the original
    sample, so the final ``full.nobs`` rows repeat the fitted trend term
    and earlier burn-in rows extend it backwards.

    Parameters
    ----------
    full : VARResults
        Full-sample fit.
    n_shocks : int
        Length of the shock path.

    Returns
    -------
    NDArray[np.floating]
        Shape (n_shocks, k_endog); zeros when the fit has no trend.
    """
    last = full.k_ar + full.nobs
    t = np.arange(last - n_shocks + 1, last + 1, dtype=float)
    return np.outer(t, full.trend_coef)


def companion_coefs(full: VARResults) -> NDArray[np.floating[Any]]:
    """Split the top block row of the companion matrix into (p, n, n)."""
    top = full.companion[: full.k_endog]
    return np.stack(np.hsplit(top, full.k_ar))


@dataclass(kw_only=True)
class BootstrapResults:
    """Aggregated bootstrap replicates.

    Attributes
    ----------
    rep : int
        Number of replicates.
    seed : int | None
        Seed of the random number generator.
    draws : NDArray[np.floating]
        Replicate statistics, shape (rep, iterat, 3), ordered sample-split,
        break-point, forecast along the last axis.
    exceedances : NDArray[np.integer]
        Number of replicates whose statistic strictly exceeds the
        original one, shape (iterat, 3).
    """

    rep: int
    seed: int | None
    draws: NDArray[np.floating[Any]] = field(repr=False)
    exceedances: NDArray[np.integer[Any]]

    @property
    def pvalues(self) -> NDArray[np.floating[Any]]:
        """Empirical one-sided p-values, shape (iterat, 3)."""
        return self.exceedances / self.rep

    @property
    def means(self) -> NDArray[np.floating[Any]]:
        """Arithmetic mean of the replicate statistics, shape (iterat, 3)."""
        return self.draws.sum(axis=0) / self.rep


def _run_replicate(
    bootstrap: ChowBootstrap, rng: np.random.Generator
) -> NDArray[np.floating[Any]]:
    return bootstrap.replicate(rng)


class ChowBootstrap:
    """Bootstrap the null distribution of the Chow statistics.

    Parameters
    ----------
    model : VAR
        Model holding the original data.
    full : VARResults
        Full-sample fit of ``model``.
    grid : BreakpointGrid
        Grid built on the original data; reused for every replicate.
    point_stats : Sequence[ChowStatistics]
        Statistics of the original sample, one per grid point.
    cov_type : CovType
        Covariance estimator passed to every replicate fit.
    """

    def __init__(
        self,
        model: VAR,
        full: VARResults,
        grid: BreakpointGrid,
        point_stats: Sequence[ChowStatistics],
        cov_type: CovType = "nonrobust",
    ) -> None:
        """Initialize the bootstrap from the original fit."""
        self.model = model
        self.grid = grid
        self.cov_type = cov_type
        self.point = np.array([s.tstats for s in point_stats])

        self.pool = residual_pool(full)
        if len(self.pool) != model.nobs - model.k_ar:
            warnings.warn(
                f"Bootstrap residuals have {len(self.pool)} rows but the model "
                f"data give an effective sample of {model.nobs - model.k_ar}",
                BootstrapWarning,
                stacklevel=2,
            )

        self.coefs = companion_coefs(full)
        self.initial = model.endog[: model.k_ar]
        self.trend = trend_path(full, BURN_IN_COPIES * len(self.pool))

    def simulate(self, rng: np.random.Generator) -> NDArray[np.floating[Any]]:
        """Simulate one replicate series of the original raw length."""
        extended = np.tile(self.pool, (BURN_IN_COPIES, 1))
        shocks = resample_rows(extended, rng) + self.trend
        path = simulate_var(self.coefs, shocks, self.initial)
        return path[len(path) - self.model.nobs :]

    def replicate(self, rng: np.random.Generator) -> NDArray[np.floating[Any]]:
        """Statistics of one replicate, shape (iterat, 3)."""
        y = self.simulate(rng)
        recursive = RecursiveSubsampleVAR(
            y, self.model.exog, self.model.k_ar, self.model.trend, self.grid
        )
        stats = recursive.fit(cov_type=self.cov_type).statistics()
        return np.array([s.tstats for s in stats])

    def run(
        self,
        rep: int,
        seed: int | None = None,
        n_jobs: int = 1,
    ) -> BootstrapResults:
        """Run ``rep`` replicates.

        Parameters
        ----------
        rep : int
            Number of replicates.
        seed : int | None
            Seed of the random number generator.
        n_jobs : int
            Number of joblib workers. With 1, a single generator seeded
            once drives all replicates in order. Otherwise each replicate
            gets its own generator spawned from ``SeedSequence(seed)``,
            so results do not depend on the number of workers but differ
            from the sequential stream.

        Returns
        -------
        BootstrapResults
            Replicate statistics and exceedance counts.
        """
        if rep < 1:
            raise ValueError(f"rep must be positive, got {rep}")

        if n_jobs == 1:
            rng = np.random.default_rng(seed)
            draws = [self.replicate(rng) for _ in range(rep)]
        else:
            children = np.random.SeedSequence(seed).spawn(rep)
            draws = Parallel(n_jobs=n_jobs)(
                delayed(_run_replicate)(self, np.random.default_rng(child))
                for child in children
            )

        stacked = np.stack(draws)
        return BootstrapResults(
            rep=rep,
            seed=seed,
            draws=stacked,
            exceedances=(stacked > self.point).sum(axis=0),
        )
