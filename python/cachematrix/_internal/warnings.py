"""Warning categories raised by cachematrix.

Filter on ``CacheMatrixWarning`` to silence everything this package warns
about while leaving other ``UserWarning`` sources alone. No imports here so
any module can pull these in.
"""


class CacheMatrixWarning(UserWarning):
    """Root category for cachematrix warnings."""


class CacheMatrixArgumentsWarning(CacheMatrixWarning):
    """Solver arguments passed on a cache hit (they are not applied)."""
