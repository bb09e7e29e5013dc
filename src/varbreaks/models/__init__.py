"""Vector autoregression models."""

from varbreaks.models.base import (
    CovType,
    MultivariateModelBase,
    TimeSeriesModelBase,
    Trend,
)
from varbreaks.models.var import VAR, VARResults

__all__ = [
    "VAR",
    "CovType",
    "MultivariateModelBase",
    "TimeSeriesModelBase",
    "Trend",
    "VARResults",
]
