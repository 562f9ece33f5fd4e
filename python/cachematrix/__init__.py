"""Memoizing cache for the inverse of a single mutable matrix."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version("cachematrix")
except _PackageNotFoundError:
    __version__ = "unknown"

from ._internal.cache_matrix import CacheMatrix, make_cache_matrix
from ._internal.config import REUSE_TOLERANCE_ENV_VAR, default_reuse_tolerance
from ._internal.errors import InvalidMatrixInput, InversionFailure
from ._internal.linalg import solve
from ._internal.linalg_cache import cache_solve, make_cache_solve
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixArgumentsWarning,
)

__all__ = [
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "make_cache_solve",
    "solve",
    "InversionFailure",
    "InvalidMatrixInput",
    "CacheMatrixWarning",
    "CacheMatrixArgumentsWarning",
    "REUSE_TOLERANCE_ENV_VAR",
    "default_reuse_tolerance",
]
