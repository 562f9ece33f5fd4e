from __future__ import annotations

import contextlib
import logging
import warnings
from typing import Any, Callable

from . import linalg as _linalg
from .warnings import CacheMatrixArgumentsWarning

logger = logging.getLogger(__name__)

HIT_MESSAGE = "returning cached inverse"
MISS_MESSAGE = "calculating & caching inverse"


def solve_cached(
    cache: Any,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
    *,
    solver: Callable[..., Any] | None = None,
    stacklevel: int = 2,
) -> Any:
    """Return the inverse of the cached matrix, computing it only on a miss.

    Extra arguments go to the solver verbatim on a miss and are ignored on
    a hit. Solver errors propagate and leave the cache untouched.

    ``stacklevel`` counts from this function, as for ``warnings.warn``.
    """
    kwargs = kwargs or {}
    lock = getattr(cache, "lock", None)
    with lock if lock is not None else contextlib.nullcontext():
        inv = cache.get_cached_inverse()
        if inv is not None:
            logger.info(HIT_MESSAGE)
            if args or kwargs:
                warnings.warn(
                    "solver arguments are ignored when the inverse is already cached; "
                    "call set_matrix() first to recompute",
                    CacheMatrixArgumentsWarning,
                    stacklevel=stacklevel,
                )
            return inv

        logger.info(MISS_MESSAGE)
        data = cache.get_matrix()
        fn = solver if solver is not None else _linalg.solve
        inv = fn(data, *args, **kwargs)
        cache.set_cached_inverse(inv)
        return inv


def make_cache_solve(solver: Callable[..., Any] | None = None) -> Callable[..., Any]:
    def _cache_solve(cache: Any, *args: Any, **kwargs: Any) -> Any:
        """Compute or retrieve the inverse held by ``cache``."""
        return solve_cached(cache, args, kwargs, solver=solver, stacklevel=3)

    return _cache_solve


cache_solve = make_cache_solve()
