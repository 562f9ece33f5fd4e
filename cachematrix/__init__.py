"""Checkout shim: import cachematrix straight from python/cachematrix without installing."""
from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

_source_dir = Path(__file__).resolve().parent.parent / "python" / "cachematrix"
_source_init = _source_dir / "__init__.py"

if not _source_init.exists():  # pragma: no cover - broken checkout
    raise ImportError(f"cachematrix sources not found at {_source_dir}")

_spec = importlib.util.spec_from_file_location(
    __name__, _source_init, submodule_search_locations=[str(_source_dir)]
)
assert _spec is not None and _spec.loader is not None
_real = importlib.util.module_from_spec(_spec)
# Replace this shim before executing so relative imports resolve to the real package.
sys.modules[__name__] = _real
_spec.loader.exec_module(_real)
