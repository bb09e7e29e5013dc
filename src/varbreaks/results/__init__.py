"""Results base classes."""

from varbreaks.results.base import (
    MultivariateRegressionResultsBase,
    VarBreaksResultsBase,
)

__all__ = [
    "MultivariateRegressionResultsBase",
    "VarBreaksResultsBase",
]
