"""Structural break tests."""

from varbreaks.tests.base import BreakTestBase, BreakTestResultsBase
from varbreaks.tests.chow import VARChowTest, VARChowTestResults
from varbreaks.tests.grid import BreakpointGrid, build_grid, search_trim
from varbreaks.tests.statistics import ChowStatistics, chow_statistics

__all__ = [
    "BreakTestBase",
    "BreakTestResultsBase",
    "BreakpointGrid",
    "ChowStatistics",
    "VARChowTest",
    "VARChowTestResults",
    "build_grid",
    "chow_statistics",
    "search_trim",
]
