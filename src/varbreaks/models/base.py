"""Base classes for multivariate time-series models.

This module provides the foundational model classes that the VAR
estimator inherits from, together with the helpers that translate
between index labels and integer sample positions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Literal

import numpy as np
import pandas as pd

from varbreaks.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Hashable

    from numpy.typing import ArrayLike, NDArray

    from varbreaks.results.base import VarBreaksResultsBase


CovType = Literal["nonrobust", "HC0", "HC1", "HC2", "HC3", "HAC"]
Trend = Literal["c", "ct", "n"]


def _ensure_array(
    data: ArrayLike | pd.Series[Any] | pd.DataFrame | None,
    name: str = "data",
    ndim: int | None = None,
) -> NDArray[np.floating[Any]] | None:
    """Convert input data to a numpy array.

    Parameters
    ----------
    data : ArrayLike | pd.Series | pd.DataFrame | None
        Input data to convert.
    name : str
        Name of the variable for error messages.
    ndim : int | None
        Expected number of dimensions. If None, no check is performed.

    Returns
    -------
    NDArray[np.floating] | None
        Converted array, or None if input is None.

    Raises
    ------
    ValueError
        If data has unexpected dimensions.
    """
    if data is None:
        return None

    if isinstance(data, (pd.Series, pd.DataFrame)):
        arr = data.to_numpy(dtype=np.float64)
    else:
        arr = np.asarray(data, dtype=np.float64)

    if ndim is not None and arr.ndim != ndim:
        raise ValueError(f"{name} must be {ndim}-dimensional, got {arr.ndim}")

    return arr


def _as_2d(arr: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Reshape a 1D array to a single column."""
    return arr.reshape(-1, 1) if arr.ndim == 1 else arr


class MultivariateModelBase(ABC):
    """Abstract base class for multivariate time-series models.

    Follows the statsmodels convention of ``Model(endog, exog).fit() ->
    Results``.

    Parameters
    ----------
    endog : ArrayLike
        Endogenous variables (n_obs, k_endog). A 1D input is treated as a
        single endogenous variable.
    exog : ArrayLike | None
        Exogenous regressors (n_obs, k_exog).

    Attributes
    ----------
    endog : NDArray[np.floating]
        Endogenous variables, always 2D.
    exog : NDArray[np.floating] | None
        Exogenous regressors, 2D or None.
    index : pd.Index
        Observation labels. Taken from the pandas index of ``endog`` when
        available, otherwise integer positions.
    """

    def __init__(
        self,
        endog: ArrayLike | pd.Series[Any] | pd.DataFrame,
        exog: ArrayLike | pd.Series[Any] | pd.DataFrame | None = None,
    ) -> None:
        """Initialize the model with data."""
        self._endog_orig = endog
        self._exog_orig = exog

        endog_arr = _ensure_array(endog, "endog")
        if endog_arr is None:
            raise ValueError("endog cannot be None")
        if endog_arr.ndim > 2:
            raise ValueError("endog must be 1D or 2D")
        self.endog: NDArray[np.floating[Any]] = _as_2d(endog_arr)

        exog_arr = _ensure_array(exog, "exog")
        if exog_arr is not None:
            if exog_arr.ndim > 2:
                raise ValueError("exog must be 1D or 2D")
            exog_arr = _as_2d(exog_arr)
        self.exog: NDArray[np.floating[Any]] | None = exog_arr

        # Names
        if isinstance(endog, pd.DataFrame):
            self._endog_names = [str(c) for c in endog.columns]
        elif isinstance(endog, pd.Series):
            self._endog_names = [str(endog.name) if endog.name else "y"]
        else:
            self._endog_names = [f"y{i}" for i in range(self.endog.shape[1])]

        if self.exog is None:
            self._exog_names: list[str] = []
        elif isinstance(exog, pd.DataFrame):
            self._exog_names = [str(c) for c in exog.columns]
        elif isinstance(exog, pd.Series):
            self._exog_names = [str(exog.name) if exog.name else "x0"]
        else:
            self._exog_names = [f"x{i}" for i in range(self.exog.shape[1])]

        if isinstance(endog, (pd.Series, pd.DataFrame)):
            self.index: pd.Index = endog.index
        else:
            self.index = pd.RangeIndex(len(self.endog))

        self._validate_data()

    def _validate_data(self) -> None:
        """Validate input data consistency.

        Raises
        ------
        ConfigurationError
            If endog and exog have different numbers of rows.
        """
        if self.exog is not None and len(self.exog) != len(self.endog):
            raise ConfigurationError(
                f"endog and exog must have same length, "
                f"got {len(self.endog)} and {len(self.exog)}"
            )

    @property
    def nobs(self) -> int:
        """Number of observations."""
        return len(self.endog)

    @property
    def k_endog(self) -> int:
        """Number of endogenous variables."""
        return self.endog.shape[1]

    @property
    def k_exog(self) -> int:
        """Number of exogenous variables (excluding deterministic terms)."""
        if self.exog is None:
            return 0
        return self.exog.shape[1]

    @property
    def endog_names(self) -> list[str]:
        """Names of the endogenous variables."""
        return self._endog_names

    @property
    def exog_names(self) -> list[str]:
        """Names of the exogenous variables."""
        return self._exog_names

    def get_label(self, position: int) -> Hashable:
        """Return the index label of an observation position."""
        return self.index[position]

    def get_position(self, date: Hashable | int) -> int:
        """Translate an index label (or integer position) to a position.

        Labels are looked up in the model index first. Integers that are
        not labels of the index are interpreted as positions.

        Parameters
        ----------
        date : Hashable | int
            Index label or integer position.

        Returns
        -------
        int
            Integer position in ``[0, nobs)``.

        Raises
        ------
        ConfigurationError
            If the label is unknown or the position is out of range.
        """
        if not isinstance(self.index, pd.RangeIndex):
            try:
                loc = self.index.get_loc(date)
            except (KeyError, TypeError):
                loc = None
            if isinstance(loc, (int, np.integer)):
                return int(loc)
            if loc is not None:
                raise ConfigurationError(f"Date label {date!r} is not unique")

        if isinstance(date, (int, np.integer)) and not isinstance(date, bool):
            position = int(date)
            if 0 <= position < self.nobs:
                return position
            raise ConfigurationError(
                f"Break position {position} is out of bounds [0, {self.nobs - 1}]"
            )

        raise ConfigurationError(f"Unknown date label: {date!r}")

    @abstractmethod
    def fit(
        self, cov_type: CovType = "nonrobust", **kwargs: Any
    ) -> VarBreaksResultsBase:
        """Fit the model and return results."""
        ...

    def __repr__(self) -> str:
        """Return string representation of the model."""
        class_name = self.__class__.__name__
        return (
            f"{class_name}(nobs={self.nobs}, k_endog={self.k_endog}, "
            f"k_exog={self.k_exog})"
        )


class TimeSeriesModelBase(MultivariateModelBase):
    """Base class for multivariate models with lags.

    Parameters
    ----------
    endog : ArrayLike
        Endogenous variables.
    exog : ArrayLike | None
        Exogenous regressors.
    lags : int
        Lag order ``p``. All lags ``1..p`` enter the model.

    Attributes
    ----------
    lags : list[int]
        List of lag indices used in the model.
    maxlag : int
        Maximum lag in the model.
    """

    def __init__(
        self,
        endog: ArrayLike | pd.Series[Any] | pd.DataFrame,
        exog: ArrayLike | pd.Series[Any] | pd.DataFrame | None = None,
        lags: int = 1,
    ) -> None:
        """Initialize the time series model."""
        super().__init__(endog, exog)

        if isinstance(lags, bool) or not isinstance(lags, (int, np.integer)):
            raise ValueError(f"lags must be an integer, got {lags!r}")
        if lags < 1:
            raise ConfigurationError(f"lags must be at least 1, got {lags}")
        self.lags: list[int] = list(range(1, int(lags) + 1))

        if self.nobs_effective < 1:
            raise ConfigurationError(
                f"Not enough observations ({self.nobs}) for {lags} lag(s)"
            )

    @property
    def maxlag(self) -> int:
        """Maximum lag in the model."""
        return max(self.lags)

    @property
    def nobs_effective(self) -> int:
        """Effective number of observations (after losing lags)."""
        return self.nobs - self.maxlag

    def _create_lag_matrix(
        self, data: NDArray[np.floating[Any]]
    ) -> NDArray[np.floating[Any]]:
        """Create a matrix of lagged values.

        Parameters
        ----------
        data : NDArray[np.floating]
            2D array (n, k) to create lags from.

        Returns
        -------
        NDArray[np.floating]
            Matrix of shape (n - maxlag, k * n_lags), ordered by lag and
            then by variable: ``[y_{t-1}, y_{t-2}, ..., y_{t-p}]``.
        """
        n = len(data)
        blocks = [data[self.maxlag - lag : n - lag] for lag in self.lags]
        return np.hstack(blocks)
