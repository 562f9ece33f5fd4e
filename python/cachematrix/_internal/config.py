from __future__ import annotations

import os

REUSE_TOLERANCE_ENV_VAR = "CACHEMATRIX_REUSE_TOLERANCE"


def default_reuse_tolerance(env_var: str = REUSE_TOLERANCE_ENV_VAR) -> float | None:
    """Tolerance new caches use when none is passed explicitly.

    Unset or empty means ``None``: every matrix replacement clears the cache.
    """
    raw = os.environ.get(env_var)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{env_var} must be a non-negative float, got {raw!r}") from None
    if value != value or value < 0:
        raise ValueError(f"{env_var} must be a non-negative float, got {raw!r}")
    return value
