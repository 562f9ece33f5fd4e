from __future__ import annotations

from numpy.linalg import LinAlgError

# Raised by the inversion routine for singular or non-square input. Re-exported
# under a domain name; callers may catch either.
InversionFailure = LinAlgError


class InvalidMatrixInput(ValueError):
    """Matrix input rejected by a strict cache (not a square numeric 2D array)."""
