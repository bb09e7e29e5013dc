"""Residual bootstrap for the VAR Chow statistics."""

from varbreaks.bootstrap.engine import (
    BootstrapResults,
    ChowBootstrap,
    companion_coefs,
    residual_pool,
    trend_path,
)
from varbreaks.bootstrap.simulate import resample_rows, simulate_var

__all__ = [
    "BootstrapResults",
    "ChowBootstrap",
    "companion_coefs",
    "resample_rows",
    "residual_pool",
    "simulate_var",
    "trend_path",
]
