"""Residual resampling and VAR simulation for bootstrap replicates."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def resample_rows(
    data: NDArray[np.floating[Any]],
    rng: np.random.Generator,
) -> NDArray[np.floating[Any]]:
    """Draw rows with replacement.

    Parameters
    ----------
    data : NDArray[np.floating]
        Matrix whose rows are resampled.
    rng : np.random.Generator
        Random number generator; advanced by one draw of ``len(data)``
        integers.

    Returns
    -------
    NDArray[np.floating]
        Matrix with the same shape as ``data``.
    """
    n = len(data)
    return data[rng.integers(0, n, size=n)]


def simulate_var(
    coefs: NDArray[np.floating[Any]],
    shocks: NDArray[np.floating[Any]],
    initial: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Simulate ``y_t = A_1 y_{t-1} + ... + A_p y_{t-p} + e_t``.

    Parameters
    ----------
    coefs : NDArray[np.floating]
        Lag coefficient matrices, shape (p, n, n). This is the top block
        row of the companion matrix split by lag.
    shocks : NDArray[np.floating]
        Shock path ``e_t``, shape (n_steps, n). Deterministic and
        exogenous contributions are expected to be included.
    initial : NDArray[np.floating]
        Presample values, shape (p, n), oldest first.

    Returns
    -------
    NDArray[np.floating]
        Simulated path of shape (p + n_steps, n): the presample values
        followed by one row per shock.
    """
    p, K, _ = coefs.shape
    initial = np.asarray(initial, dtype=np.float64).reshape(p, K)
    n_steps = len(shocks)

    y = np.zeros((p + n_steps, K))
    y[:p] = initial
    for t in range(p, p + n_steps):
        y[t] = shocks[t - p]
        for i in range(p):
            y[t] += coefs[i] @ y[t - 1 - i]
    return y
