"""
Coercion of caller input into float64 matrices, vectors and label tuples.
"""

import numpy as np
import pandas as pd
from typing import Sequence, Tuple, Union

from .errors import DimensionMismatch

MatrixLike = Union[np.ndarray, pd.DataFrame, Sequence[Sequence[float]]]
VectorLike = Union[np.ndarray, pd.Series, Sequence[float]]


def as_matrix(data: MatrixLike, name: str = "matrix") -> np.ndarray:
    """
    Convert input to a 2-D float64 array (n_rows, n_columns).

    Rows of unequal length are rejected rather than padded or truncated.
    A matrix with no rows comes back with shape (0, 0) unless the input
    already carried a column count.

    Raises:
        DimensionMismatch: ragged rows, or input that is not two-dimensional
    """
    if isinstance(data, pd.DataFrame):
        return data.to_numpy(dtype=np.float64)

    if isinstance(data, np.ndarray):
        arr = np.asarray(data, dtype=np.float64)
        if arr.ndim == 1 and arr.size == 0:
            return arr.reshape(0, 0)
        if arr.ndim != 2:
            raise DimensionMismatch(f"{name} must be 2-dimensional, got {arr.ndim}-D array")
        return arr

    rows = list(data)
    if not rows:
        return np.empty((0, 0), dtype=np.float64)

    for i, row in enumerate(rows):
        if np.ndim(row) != 1:
            raise DimensionMismatch(f"{name} row {i} is not a 1-D sequence")
    n_columns = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != n_columns:
            raise DimensionMismatch(f"{name} row {i} has {len(row)} columns, "
                                    f"expected {n_columns}")

    return np.array(rows, dtype=np.float64).reshape(len(rows), n_columns)


def as_vector(data: VectorLike, name: str = "vector") -> np.ndarray:
    """Convert input to a 1-D float64 array."""
    if isinstance(data, pd.Series):
        return data.to_numpy(dtype=np.float64)

    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim != 1:
        raise DimensionMismatch(f"{name} must be 1-dimensional, got {arr.ndim}-D input")
    return arr


def as_labels(labels: Union[Sequence[str], np.ndarray, pd.Series]) -> Tuple[str, ...]:
    """Convert labels to a tuple of strings."""
    if isinstance(labels, (pd.Series, np.ndarray)):
        labels = labels.tolist()

    labels = tuple(labels)
    for i, label in enumerate(labels):
        if not isinstance(label, str):
            raise TypeError(f"labels must be strings, got {type(label).__name__} at position {i}")
    return labels
