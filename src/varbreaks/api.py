"""Public API for varbreaks package.

This module provides a clean namespace for the most commonly used
classes and functions in the varbreaks package.
"""

# Models
from varbreaks.models import (
    VAR,
    CovType,
    MultivariateModelBase,
    TimeSeriesModelBase,
    Trend,
    VARResults,
)

# Results base classes (for type checking)
from varbreaks.results import (
    MultivariateRegressionResultsBase,
    VarBreaksResultsBase,
)

# Tests (loaded before rolling, which builds on the breakpoint grid)
from varbreaks.tests import (
    BreakpointGrid,
    ChowStatistics,
    VARChowTest,
    VARChowTestResults,
    build_grid,
    chow_statistics,
)

# Bootstrap
from varbreaks.bootstrap import BootstrapResults, ChowBootstrap

# Recursive estimation
from varbreaks.rolling import RecursiveSubsampleVAR, SubsampleResults

# Errors and warnings
from varbreaks.exceptions import BootstrapWarning, ConfigurationError, NumericalError

# Visualization
from varbreaks.visualization import plot_chow_pvalues

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
    "build_grid",
    "chow_statistics",
    "plot_chow_pvalues",
]
