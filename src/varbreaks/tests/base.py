"""Base classes for structural break tests.

This module provides foundational classes for the parameter stability
tests in the varbreaks package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from varbreaks.models.base import TimeSeriesModelBase


@dataclass
class BreakTestResultsBase(ABC):
    """Base class for structural break test results.

    Parameters
    ----------
    test_name : str
        Name of the test.
    nobs : int
        Number of observations.
    n_breaks : int
        Number of breaks where stability was rejected.
    break_indices : Sequence[int]
        Positions of the rejected break dates.
    """

    test_name: str
    nobs: int
    n_breaks: int
    break_indices: Sequence[int]

    @property
    def break_dates(self) -> Sequence[int]:
        """Alias for break_indices."""
        return self.break_indices

    @abstractmethod
    def summary(self) -> str:
        """Generate a text summary of test results.

        Returns
        -------
        str
            Formatted summary string.
        """
        ...


class BreakTestBase(ABC):
    """Abstract base class for structural break tests on a fitted model class.

    Parameters
    ----------
    model : TimeSeriesModelBase
        Model specification holding the data under test.
    """

    def __init__(self, model: TimeSeriesModelBase) -> None:
        """Initialize the test."""
        self.model = model

    @property
    def nobs(self) -> int:
        """Number of observations."""
        return self.model.nobs

    @abstractmethod
    def fit(self, **kwargs: Any) -> BreakTestResultsBase:
        """Perform the structural break test."""
        ...
