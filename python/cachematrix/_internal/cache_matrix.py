from __future__ import annotations

import logging
import threading
from typing import Any

import numpy as np

from . import config as _config
from .coercion import coerce_square_matrix
from .linalg_cache import solve_cached

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def _within_tolerance(old: Any, new: Any, tolerance: float) -> bool:
    # L2 (spectral) norm of the difference; shapes must match exactly.
    try:
        a = np.asarray(old)
        b = np.asarray(new)
        if a.ndim != 2 or b.ndim != 2 or a.shape != b.shape:
            return False
        return bool(np.linalg.norm(a - b, 2) < tolerance)
    except (TypeError, ValueError, np.linalg.LinAlgError):
        return False


class CacheMatrix:
    """One matrix plus, optionally, its most recently computed inverse.

    The inverse slot is filled by :func:`cachematrix.cache_solve` and cleared
    whenever the matrix is replaced through :meth:`set_matrix`, even when the
    replacement is numerically identical to the current matrix.

    The matrix is held by reference. Mutating it in place afterwards does not
    clear the cached inverse; replace it through :meth:`set_matrix` instead.

    Options:
    - ``strict``: validate every matrix (square, numeric, 2D, non-empty) and
      raise ``InvalidMatrixInput`` otherwise.
    - ``reuse_tolerance``: opt-in. Keep the cached inverse when the new matrix
      is within this L2-norm distance of the old one. Defaults to the
      ``CACHEMATRIX_REUSE_TOLERANCE`` environment variable, else ``None``.
    """

    def __init__(
        self,
        x: Any,
        *,
        strict: bool = False,
        reuse_tolerance: float | None = _UNSET,
    ) -> None:
        if reuse_tolerance is _UNSET:
            reuse_tolerance = _config.default_reuse_tolerance()
        elif reuse_tolerance is not None and not reuse_tolerance >= 0:
            # NaN fails the comparison too.
            raise ValueError(f"reuse_tolerance must be a non-negative float, got {reuse_tolerance!r}")

        self._strict = bool(strict)
        self._reuse_tolerance = reuse_tolerance
        self._lock = threading.RLock()
        self._matrix = self._accept(x)
        self._inverse: Any | None = None
        self._version = 0

    def _accept(self, x: Any) -> Any:
        if self._strict:
            return coerce_square_matrix(x, np_module=np)
        return x

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def reuse_tolerance(self) -> float | None:
        return self._reuse_tolerance

    @property
    def version(self) -> int:
        """Number of times the matrix has been replaced since construction."""
        return self._version

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def set_matrix(self, new_matrix: Any) -> None:
        new_matrix = self._accept(new_matrix)
        with self._lock:
            keep = (
                self._reuse_tolerance is not None
                and self._inverse is not None
                and _within_tolerance(self._matrix, new_matrix, self._reuse_tolerance)
            )
            if keep:
                logger.debug("matrix within tolerance %g; keeping cached inverse", self._reuse_tolerance)
            else:
                self._inverse = None
            self._matrix = new_matrix
            self._version += 1

    def get_matrix(self) -> Any:
        return self._matrix

    def set_cached_inverse(self, value: Any) -> None:
        # No check that value is the inverse of the current matrix.
        with self._lock:
            self._inverse = value

    def get_cached_inverse(self) -> Any | None:
        return self._inverse

    @property
    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def inverse(self, *args: Any, **kwargs: Any) -> Any:
        """Compute or retrieve cached inverse."""
        return solve_cached(self, args, kwargs, stacklevel=3)

    def __repr__(self) -> str:
        shape = getattr(self._matrix, "shape", None)
        return (
            f"CacheMatrix(shape={shape}, cached={self.has_cached_inverse}, "
            f"version={self._version})"
        )


def make_cache_matrix(x: Any, **options: Any) -> CacheMatrix:
    """Wrap ``x`` in a new :class:`CacheMatrix`."""
    return CacheMatrix(x, **options)
