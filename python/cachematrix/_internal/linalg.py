from __future__ import annotations

from typing import Any

import numpy as np


def solve(a: Any, *args: Any, **kwargs: Any) -> Any:
    """Invert ``a``, or solve ``a @ x = b`` when a right-hand side is given.

    Raises ``numpy.linalg.LinAlgError`` for singular or non-square input.
    """
    if not args and not kwargs:
        return np.linalg.inv(a)
    return np.linalg.solve(a, *args, **kwargs)
