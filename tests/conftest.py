"""Pytest configuration and fixtures for varbreaks tests."""

from __future__ import annotations

from typing import Any

import matplotlib
import numpy as np
import pandas as pd
import pytest
from numpy.typing import NDArray

matplotlib.use("Agg")


def simulate_var1(
    rng: np.random.Generator,
    coefs: list[NDArray[np.floating[Any]]],
    breaks: list[int],
    n: int,
    intercept: float = 0.0,
) -> NDArray[np.floating[Any]]:
    """Simulate a VAR(1) whose coefficient matrix switches at ``breaks``."""
    k = coefs[0].shape[0]
    y = np.zeros((n, k))
    regime = 0
    for t in range(1, n):
        if regime < len(breaks) and t >= breaks[regime]:
            regime += 1
        y[t] = intercept + coefs[regime] @ y[t - 1] + rng.standard_normal(k)
    return y


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def var1_data(rng: np.random.Generator) -> NDArray[np.floating[Any]]:
    """Stable bivariate VAR(1) without breaks, 200 observations.

    A = [[0.5, 0.1], [0.2, 0.3]], intercept 0.5.
    """
    A = np.array([[0.5, 0.1], [0.2, 0.3]])
    return simulate_var1(rng, [A], [], 200, intercept=0.5)


@pytest.fixture
def var1_data_with_break(
    rng: np.random.Generator,
) -> tuple[NDArray[np.floating[Any]], int]:
    """Bivariate VAR(1) with a coefficient break at t=100.

    First regime: A = 0.1 I
    Second regime: A = 0.8 I

    Returns
    -------
    tuple[NDArray[np.floating], int]
        Data array (200, 2) and break location.
    """
    break_point = 100
    coefs = [0.1 * np.eye(2), 0.8 * np.eye(2)]
    return simulate_var1(rng, coefs, [break_point], 200), break_point


@pytest.fixture
def small_var1_data(rng: np.random.Generator) -> NDArray[np.floating[Any]]:
    """Short bivariate VAR(1) without breaks, 60 observations."""
    A = np.array([[0.4, 0.0], [0.1, 0.4]])
    return simulate_var1(rng, [A], [], 60)


@pytest.fixture
def quarterly_var1_data(
    var1_data: NDArray[np.floating[Any]],
) -> pd.DataFrame:
    """Bivariate VAR(1) data with a quarterly PeriodIndex starting 1970Q1."""
    index = pd.period_range("1970Q1", periods=len(var1_data), freq="Q")
    return pd.DataFrame(var1_data, index=index, columns=["gdp", "infl"])


@pytest.fixture
def exog_data(rng: np.random.Generator) -> NDArray[np.floating[Any]]:
    """One exogenous regressor, 200 observations."""
    return rng.standard_normal((200, 1))


@pytest.fixture
def trending_var1_data(rng: np.random.Generator) -> NDArray[np.floating[Any]]:
    """Bivariate VAR(1) with a linear trend of slope 0.05, 200 observations."""
    A = 0.5 * np.eye(2)
    y = np.zeros((200, 2))
    for t in range(1, 200):
        y[t] = 0.5 + 0.05 * (t + 1) + A @ y[t - 1] + rng.standard_normal(2)
    return y
