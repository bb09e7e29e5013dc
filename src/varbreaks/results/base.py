"""Base classes for model results.

This module provides the result containers that fitted models return.
Multivariate regression results store one column of coefficients per
equation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


@dataclass(kw_only=True)
class VarBreaksResultsBase(ABC):
    """Base class for all model results.

    Follows the statsmodels convention where fitted models return results
    objects containing parameter estimates and inference methods.

    Parameters
    ----------
    params : NDArray[np.floating]
        Estimated model parameters.
    nobs : int
        Number of observations used in estimation.
    model_name : str
        Name of the model that produced these results.
    """

    params: NDArray[np.floating[Any]]
    nobs: int
    model_name: str = "VarBreaksModel"

    @property
    @abstractmethod
    def df_model(self) -> int:
        """Degrees of freedom used by the model (parameters per equation)."""
        ...

    @property
    def df_resid(self) -> int:
        """Residual degrees of freedom (nobs - df_model)."""
        return self.nobs - self.df_model

    @abstractmethod
    def summary(self) -> str:
        """Generate a text summary of the results."""
        ...


@dataclass(kw_only=True)
class MultivariateRegressionResultsBase(VarBreaksResultsBase):
    """Base class for equation-by-equation regression results.

    Parameters
    ----------
    params : NDArray[np.floating]
        Coefficients, shape (n_regressors, n_equations). Column ``j`` holds
        the coefficients of equation ``j``.
    resid : NDArray[np.floating]
        Residuals, shape (nobs, n_equations).
    fittedvalues : NDArray[np.floating]
        Fitted values, shape (nobs, n_equations).
    nobs : int
        Number of observations used in estimation.
    cov_type : str
        Covariance estimator used for standard errors.
    param_names : Sequence[str] | None
        Names of the regressors (rows of ``params``).
    endog_names : Sequence[str] | None
        Names of the equations (columns of ``params``).

    Notes
    -----
    Standard errors are computed on first access by ``_compute_bse``,
    which subclasses implement. Point estimates and residuals do not
    depend on the covariance estimator.
    """

    resid: NDArray[np.floating[Any]]
    fittedvalues: NDArray[np.floating[Any]]
    cov_type: str = "nonrobust"
    param_names: Sequence[str] | None = None
    endog_names: Sequence[str] | None = None
    _bse: NDArray[np.floating[Any]] | None = field(default=None, repr=False)

    @property
    def df_model(self) -> int:
        """Number of regressors in each equation."""
        return self.params.shape[0]

    @property
    def neqs(self) -> int:
        """Number of equations."""
        return self.params.shape[1]

    @abstractmethod
    def _compute_bse(self) -> NDArray[np.floating[Any]]:
        """Compute standard errors under ``cov_type``."""
        ...

    @property
    def bse(self) -> NDArray[np.floating[Any]]:
        """Standard errors, same shape as ``params``."""
        if self._bse is None:
            self._bse = self._compute_bse()
        return self._bse

    @property
    def tvalues(self) -> NDArray[np.floating[Any]]:
        """t-statistics for parameter estimates."""
        return self.params / self.bse

    @property
    def pvalues(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values for t-statistics."""
        from scipy import stats

        return 2 * stats.t.sf(np.abs(self.tvalues), self.df_resid)

    @property
    def ssr(self) -> NDArray[np.floating[Any]]:
        """Sum of squared residuals for each equation."""
        return np.sum(self.resid**2, axis=0)

    def conf_int(self, alpha: float = 0.05) -> NDArray[np.floating[Any]]:
        """Compute confidence intervals for parameter estimates.

        Parameters
        ----------
        alpha : float, default 0.05
            Significance level. Default gives 95% confidence intervals.

        Returns
        -------
        NDArray[np.floating]
            Array of shape (n_regressors, n_equations, 2) with lower and
            upper bounds.
        """
        from scipy import stats

        q = stats.t.ppf(1 - alpha / 2, self.df_resid)
        lower = self.params - q * self.bse
        upper = self.params + q * self.bse
        return np.stack([lower, upper], axis=-1)

    def _names(self) -> tuple[list[str], list[str]]:
        params = list(self.param_names or [f"x{i}" for i in range(self.df_model)])
        eqs = list(self.endog_names or [f"y{j}" for j in range(self.neqs)])
        return params, eqs

    def summary(self) -> str:
        """Generate a text summary of regression results.

        Returns
        -------
        str
            One coefficient table per equation.
        """
        param_names, eq_names = self._names()
        ci = self.conf_int()

        lines = []
        lines.append("=" * 78)
        lines.append(f"{self.model_name:^78}")
        lines.append("=" * 78)
        lines.append(
            f"No. Equations:  {self.neqs:>10}   No. Observations:    {self.nobs:>10}"
        )
        lines.append(
            f"Cov. Type:      {self.cov_type:>10}   "
            f"Df Model:            {self.df_model:>10}"
        )

        for j, eq in enumerate(eq_names):
            lines.append("=" * 78)
            lines.append(f"Equation: {eq}")
            lines.append(
                f"{'':>15} {'coef':>10} {'std err':>10} {'t':>10} "
                f"{'P>|t|':>10} {'[0.025':>10} {'0.975]':>10}"
            )
            lines.append("-" * 78)
            for i, name in enumerate(param_names):
                lines.append(
                    f"{name:>15} {self.params[i, j]:>10.4f} {self.bse[i, j]:>10.4f} "
                    f"{self.tvalues[i, j]:>10.3f} {self.pvalues[i, j]:>10.3f} "
                    f"{ci[i, j, 0]:>10.3f} {ci[i, j, 1]:>10.3f}"
                )

        lines.append("=" * 78)
        return "\n".join(lines)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert coefficient estimates to a long pandas DataFrame.

        Returns
        -------
        pd.DataFrame
            One row per (equation, regressor) with estimate, standard
            error, t-value and p-value.
        """
        param_names, eq_names = self._names()
        index = pd.MultiIndex.from_product(
            [eq_names, param_names], names=["equation", "regressor"]
        )
        return pd.DataFrame(
            {
                "coef": self.params.T.ravel(),
                "std_err": self.bse.T.ravel(),
                "t": self.tvalues.T.ravel(),
                "P>|t|": self.pvalues.T.ravel(),
            },
            index=index,
        )
