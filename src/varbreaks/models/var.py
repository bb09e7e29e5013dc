"""Vector autoregression estimated equation by equation with OLS.

The VAR(p) model is

    y_t = nu + A_1 y_{t-1} + ... + A_p y_{t-p} + B x_t + u_t

where ``nu`` collects the deterministic terms (constant and optionally a
linear trend) and ``x_t`` the exogenous regressors. Coefficients and
residuals are the same under every covariance estimator; ``cov_type``
only affects standard errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, get_args

import numpy as np
import statsmodels.api as sm

from varbreaks.exceptions import ConfigurationError
from varbreaks.models.base import CovType, TimeSeriesModelBase, Trend
from varbreaks.results.base import MultivariateRegressionResultsBase

if TYPE_CHECKING:
    from collections.abc import Hashable

    import pandas as pd
    from numpy.typing import ArrayLike, NDArray

    from varbreaks.tests.chow import BreakDate, VARChowTestResults


def _fit_equation(
    y: NDArray[np.floating[Any]],
    X: NDArray[np.floating[Any]],
    cov_type: CovType,
    cov_kwds: dict[str, Any],
) -> Any:
    """Fit a single equation with statsmodels under ``cov_type``."""
    sm_model = sm.OLS(y, X)

    if cov_type == "nonrobust":
        return sm_model.fit()
    if cov_type.startswith("HC"):
        return sm_model.fit(cov_type=cov_type)

    maxlags = cov_kwds.get("maxlags")
    if maxlags is None:
        # Newey-West automatic bandwidth selection
        maxlags = int(np.floor(4 * (len(y) / 100) ** (2 / 9)))
    return sm_model.fit(
        cov_type="HAC",
        cov_kwds={"maxlags": maxlags, "use_correction": True},
    )


@dataclass(kw_only=True)
class VARResults(MultivariateRegressionResultsBase):
    """Results from VAR estimation.

    Rows of ``params`` are ordered as deterministic terms, then the lag
    blocks ``y_{t-1}, ..., y_{t-p}`` (``k_endog`` rows each), then the
    exogenous regressors.

    Attributes
    ----------
    k_ar : int
        Lag order p.
    k_trend : int
        Number of deterministic terms.
    k_exog : int
        Number of exogenous regressors.
    """

    k_ar: int
    k_trend: int
    k_exog: int = 0
    cov_kwds: dict[str, Any] = field(default_factory=dict, repr=False)
    _endog: NDArray[np.floating[Any]] | None = field(default=None, repr=False)
    _design: NDArray[np.floating[Any]] | None = field(default=None, repr=False)

    @property
    def k_endog(self) -> int:
        """Number of endogenous variables."""
        return self.neqs

    @property
    def coeff_rows(self) -> int:
        """Number of regressors in each equation."""
        return self.df_model

    @property
    def n_deterministic(self) -> int:
        """Deterministic plus exogenous column count."""
        return self.k_trend + self.k_exog

    @property
    def _lag_rows(self) -> slice:
        return slice(self.k_trend, self.k_trend + self.k_ar * self.k_endog)

    @property
    def _deterministic_rows(self) -> NDArray[np.intp]:
        trend_rows = np.arange(self.k_trend)
        exog_rows = np.arange(self.df_model - self.k_exog, self.df_model)
        return np.concatenate([trend_rows, exog_rows])

    @property
    def coefs(self) -> NDArray[np.floating[Any]]:
        """Lag coefficient matrices, shape (k_ar, k_endog, k_endog).

        ``coefs[i - 1][j, l]`` is the effect of ``y_{l, t-i}`` in the
        equation for ``y_j``.
        """
        K = self.k_endog
        lag_params = self.params[self._lag_rows]
        return np.stack(
            [lag_params[i * K : (i + 1) * K].T for i in range(self.k_ar)]
        )

    @property
    def companion(self) -> NDArray[np.floating[Any]]:
        """Companion-form matrix, shape (K p, K p)."""
        K = self.k_endog
        p = self.k_ar
        companion = np.zeros((K * p, K * p))
        companion[:K] = np.hstack(list(self.coefs))
        if p > 1:
            companion[K:, : K * (p - 1)] = np.eye(K * (p - 1))
        return companion

    @property
    def deterministic_params(self) -> NDArray[np.floating[Any]]:
        """Coefficients of deterministic terms and exogenous regressors."""
        return self.params[self._deterministic_rows]

    @property
    def intercept(self) -> NDArray[np.floating[Any]]:
        """Constant term of each equation (zeros without a constant)."""
        if self.k_trend == 0:
            return np.zeros(self.k_endog)
        return self.params[0]

    @property
    def trend_coef(self) -> NDArray[np.floating[Any]]:
        """Linear trend coefficient of each equation (zeros without one)."""
        if self.k_trend < 2:
            return np.zeros(self.k_endog)
        return self.params[1]

    @property
    def exog_fitted(self) -> NDArray[np.floating[Any]]:
        """Fitted contribution of the exogenous regressors, shape (nobs, k_endog)."""
        if self._design is None:
            raise ValueError("Design matrix not stored on results")
        rows = slice(self.df_model - self.k_exog, self.df_model)
        return self._design[:, rows] @ self.params[rows]

    @property
    def deterministic_fitted(self) -> NDArray[np.floating[Any]]:
        """Fitted contribution of deterministic terms and exogenous regressors.

        Returns
        -------
        NDArray[np.floating]
            Shape (nobs, k_endog).
        """
        if self._design is None:
            raise ValueError("Design matrix not stored on results")
        rows = self._deterministic_rows
        return self._design[:, rows] @ self.params[rows]

    @property
    def sigma_u(self) -> NDArray[np.floating[Any]]:
        """Degrees-of-freedom adjusted residual covariance matrix."""
        return self.resid.T @ self.resid / self.df_resid

    @property
    def sigma_u_mle(self) -> NDArray[np.floating[Any]]:
        """Maximum likelihood residual covariance matrix."""
        return self.resid.T @ self.resid / self.nobs

    @property
    def roots(self) -> NDArray[np.complexfloating[Any, Any]]:
        """Eigenvalues of the companion matrix."""
        return np.linalg.eigvals(self.companion)

    @property
    def is_stable(self) -> bool:
        """Whether all companion eigenvalues lie inside the unit circle."""
        return bool(np.all(np.abs(self.roots) < 1))

    def _compute_bse(self) -> NDArray[np.floating[Any]]:
        if self._endog is None or self._design is None:
            raise ValueError("Estimation data not stored on results")
        columns = [
            np.asarray(
                _fit_equation(
                    self._endog[:, j], self._design, self.cov_type, self.cov_kwds
                ).bse
            )
            for j in range(self.neqs)
        ]
        return np.column_stack(columns)


class VAR(TimeSeriesModelBase):
    """Vector autoregression with deterministic terms and exogenous regressors.

    Parameters
    ----------
    endog : ArrayLike
        Endogenous variables (n_obs, k_endog).
    exog : ArrayLike | None
        Exogenous regressors (n_obs, k_exog). Current values enter the
        model without lags.
    lags : int
        Lag order p.
    trend : "c" | "ct" | "n"
        Deterministic terms: constant, constant and linear trend, or none.

    Examples
    --------
    >>> import numpy as np
    >>> import varbreaks as vb
    >>> rng = np.random.default_rng(42)
    >>> y = np.zeros((200, 2))
    >>> for t in range(1, 200):
    ...     y[t] = 0.5 * y[t - 1] + rng.standard_normal(2)
    >>> results = vb.VAR(y, lags=1).fit()
    >>> results.companion.shape
    (2, 2)
    """

    def __init__(
        self,
        endog: ArrayLike | pd.Series[Any] | pd.DataFrame,
        exog: ArrayLike | pd.Series[Any] | pd.DataFrame | None = None,
        lags: int = 1,
        trend: Trend = "c",
    ) -> None:
        """Initialize the VAR model."""
        if trend not in ("c", "ct", "n"):
            raise ValueError(f"trend must be 'c', 'ct', or 'n', got {trend}")
        self.trend = trend
        super().__init__(endog, exog, lags)

    @property
    def k_ar(self) -> int:
        """Lag order p."""
        return self.maxlag

    @property
    def k_trend(self) -> int:
        """Number of deterministic terms."""
        return {"n": 0, "c": 1, "ct": 2}[self.trend]

    @property
    def n_deterministic(self) -> int:
        """Deterministic plus exogenous column count."""
        return self.k_trend + self.k_exog

    @property
    def k_regressors(self) -> int:
        """Number of regressors in each equation."""
        return self.k_trend + self.k_endog * self.k_ar + self.k_exog

    def _build_design_matrix(
        self,
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], list[str]]:
        """Build the design matrix for VAR estimation.

        Returns
        -------
        tuple[NDArray[np.floating], NDArray[np.floating], list[str]]
            Y (effective sample), X (design matrix), and regressor names.
        """
        Y = self.endog[self.maxlag :]
        n_eff = len(Y)

        components = []
        param_names: list[str] = []

        if self.trend in ("c", "ct"):
            components.append(np.ones((n_eff, 1)))
            param_names.append("const")

        if self.trend == "ct":
            trend_var = np.arange(self.maxlag + 1, self.nobs + 1).reshape(-1, 1)
            components.append(trend_var)
            param_names.append("trend")

        components.append(self._create_lag_matrix(self.endog))
        param_names.extend(
            f"{name}.L{lag}" for lag in self.lags for name in self.endog_names
        )

        if self.exog is not None:
            components.append(self.exog[self.maxlag :])
            param_names.extend(self.exog_names)

        X = np.column_stack(components)
        return Y, X, param_names

    def fit(
        self,
        cov_type: CovType = "nonrobust",
        cov_kwds: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> VARResults:
        """Fit the VAR by equation-by-equation OLS.

        Parameters
        ----------
        cov_type : CovType
            Type of covariance estimator for standard errors:
            - "nonrobust": Standard OLS covariance
            - "HC0", "HC1", "HC2", "HC3": Heteroskedasticity-robust
            - "HAC": Heteroskedasticity and autocorrelation consistent
        cov_kwds : dict | None
            Additional keywords for covariance estimation. For HAC, can
            include 'maxlags' (default uses Newey-West automatic selection).
        **kwargs
            Additional arguments (reserved for future use).

        Returns
        -------
        VARResults
            Results object containing estimates and inference.

        Raises
        ------
        ConfigurationError
            If the effective sample is smaller than the number of
            regressors per equation.
        """
        if cov_type not in get_args(CovType):
            raise ValueError(f"Unknown cov_type: {cov_type}")

        Y, X, param_names = self._build_design_matrix()
        if len(Y) < X.shape[1]:
            raise ConfigurationError(
                f"Effective sample ({len(Y)}) smaller than the number of "
                f"regressors per equation ({X.shape[1]})"
            )

        params, _resid, _rank, _s = np.linalg.lstsq(X, Y, rcond=None)
        fitted = X @ params

        return VARResults(
            params=params,
            resid=Y - fitted,
            fittedvalues=fitted,
            nobs=len(Y),
            cov_type=cov_type,
            cov_kwds=dict(cov_kwds or {}),
            param_names=param_names,
            endog_names=self.endog_names,
            model_name=f"VAR({self.k_ar})",
            k_ar=self.k_ar,
            k_trend=self.k_trend,
            k_exog=self.k_exog,
            _endog=Y,
            _design=X,
        )

    def chow_test(
        self,
        break_date: BreakDate | Hashable = "every",
        rep: int = 99,
        cov_type: CovType = "nonrobust",
        trim: float = 0.15,
        seed: int | None = None,
        n_jobs: int = 1,
        significance: float = 0.05,
    ) -> VARChowTestResults:
        """Run bootstrapped Chow tests for parameter stability.

        Convenience method that creates a VARChowTest from this model and
        runs it.

        Parameters
        ----------
        break_date : "every" | Hashable
            A single break date (index label or integer position of the
            first post-break observation), or "every" to test each date in
            the trimmed interior of the sample.
        rep : int
            Number of bootstrap replications (at least 99).
        cov_type : CovType
            Covariance estimator passed through to every VAR fit.
        trim : float
            Initial trimming fraction for "every" mode.
        seed : int | None
            Seed of the bootstrap random number generator.
        n_jobs : int
            Number of parallel bootstrap workers.
        significance : float
            Level used to flag breaks in the results.

        Returns
        -------
        VARChowTestResults
            Sample-split, break-point and forecast test results.

        See Also
        --------
        VARChowTest : The underlying test class.
        """
        from varbreaks.tests.chow import VARChowTest

        test = VARChowTest.from_model(self)
        return test.fit(
            break_date=break_date,
            rep=rep,
            cov_type=cov_type,
            trim=trim,
            seed=seed,
            n_jobs=n_jobs,
            significance=significance,
        )
