"""varbreaks: Chow tests for structural breaks in vector autoregressions.

Sample-split, break-point and forecast Chow statistics for VAR models,
evaluated at a single candidate date or over a trimmed grid of dates,
with p-values from a residual bootstrap.

Example
-------
>>> import numpy as np
>>> import varbreaks as vb
>>>
>>> rng = np.random.default_rng(42)
>>> y = np.zeros((200, 2))
>>> for t in range(1, 200):
...     a = 0.2 if t < 100 else 0.7
...     y[t] = a * y[t - 1] + rng.standard_normal(2)
>>>
>>> # Test a single candidate break date
>>> results = vb.VARChowTest(y, lags=1).fit(break_date=100, rep=99, seed=0)
>>> print(results.summary())
>>>
>>> # Scan every admissible date from a fitted model specification
>>> model = vb.VAR(y, lags=1)
>>> scan = model.chow_test(break_date="every", rep=99, seed=0)
>>> scan.to_dataframe().head()
"""

from varbreaks._version import __version__
from varbreaks.api import (
    VAR,
    BootstrapResults,
    BootstrapWarning,
    BreakpointGrid,
    ChowBootstrap,
    ChowStatistics,
    ConfigurationError,
    CovType,
    MultivariateModelBase,
    MultivariateRegressionResultsBase,
    NumericalError,
    RecursiveSubsampleVAR,
    SubsampleResults,
    TimeSeriesModelBase,
    Trend,
    VARChowTest,
    VARChowTestResults,
    VARResults,
    VarBreaksResultsBase,
    build_grid,
    chow_statistics,
    plot_chow_pvalues,
)

__all__ = [
    "VAR",
    "BootstrapResults",
    "BootstrapWarning",
    "BreakpointGrid",
    "ChowBootstrap",
    "ChowStatistics",
    "ConfigurationError",
    "CovType",
    "MultivariateModelBase",
    "MultivariateRegressionResultsBase",
    "NumericalError",
    "RecursiveSubsampleVAR",
    "SubsampleResults",
    "TimeSeriesModelBase",
    "Trend",
    "VARChowTest",
    "VARChowTestResults",
    "VARResults",
    "VarBreaksResultsBase",
    "__version__",
    "build_grid",
    "chow_statistics",
    "plot_chow_pvalues",
]
