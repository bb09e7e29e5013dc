"""Recursive subsample estimation over a breakpoint grid."""

from varbreaks.rolling.subsample import RecursiveSubsampleVAR, SubsampleResults

__all__ = [
    "RecursiveSubsampleVAR",
    "SubsampleResults",
]
