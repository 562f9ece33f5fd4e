from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

from .errors import InvalidMatrixInput

_NUMERIC_KINDS = frozenset("biufc")


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def check_sequence_rows(candidate: Any, *, np_module: Any) -> None:
    rows = list(candidate)
    if not rows:
        raise InvalidMatrixInput("Matrix data must not be empty.")
    size = len(rows)
    for row in rows:
        if not (is_sequence_like(row) or (isinstance(row, np_module.ndarray) and row.ndim == 1)):
            raise InvalidMatrixInput("Each matrix row must be a sequence of entries.")
        if len(row) != size:
            raise InvalidMatrixInput(
                "Matrix data must describe a square matrix (same number of rows and columns)."
            )


def coerce_square_matrix(candidate: Any, *, np_module: Any) -> Any:
    """Return ``candidate`` as a square numeric 2D array or raise InvalidMatrixInput.

    NumPy arrays are returned as-is (no copy). Nested sequences are checked
    row by row first so ragged input gets a precise message.
    """
    if isinstance(candidate, np_module.ndarray):
        array = candidate
    elif is_sequence_like(candidate):
        check_sequence_rows(candidate, np_module=np_module)
        array = np_module.asarray(candidate)
    else:
        raise InvalidMatrixInput(
            "Matrix data must be provided as a square nested sequence or a NumPy array."
        )

    if array.ndim != 2:
        raise InvalidMatrixInput("Matrix input must be a 2D square structure.")
    if array.shape[0] != array.shape[1]:
        raise InvalidMatrixInput("Matrix input must be square (rows == columns).")
    if array.shape[0] == 0:
        raise InvalidMatrixInput("Matrix data must not be empty.")
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise InvalidMatrixInput(f"Matrix entries must be numeric, got dtype {array.dtype}.")
    return array
