"""Exception and warning classes raised by varbreaks."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid test configuration.

    Raised when the data, lag order, trimming or break date cannot support
    the requested stability test. The computation is aborted and no partial
    result is returned.
    """


class NumericalError(ArithmeticError):
    """A residual cross-product matrix is not positive definite.

    The log-determinants and determinant ratios behind the Chow statistics
    are undefined in that case.
    """


class BootstrapWarning(UserWarning):
    """Non-fatal inconsistency detected while bootstrapping."""
