"""
Column statistics and z-score standardization.

Standard deviations are population values (divide by the row count, not
row count - 1), matching sklearn's StandardScaler.
"""

import logging
import numpy as np
import pandas as pd
from typing import Optional, Tuple

from .errors import DimensionMismatch, EmptyDataset, StandardizerNotFitted, ZeroVariance
from .validation import MatrixLike, VectorLike, as_matrix, as_vector

logger = logging.getLogger(__name__)

ZERO_VARIANCE_POLICIES = ('raise', 'propagate')


def _require_rows(data: np.ndarray, operation: str) -> None:
    if data.shape[0] == 0:
        raise EmptyDataset(f"{operation} requires at least one row")
    if data.shape[1] == 0:
        raise EmptyDataset(f"{operation} requires at least one column")


def _check_policy(on_zero_variance: str) -> str:
    if on_zero_variance not in ZERO_VARIANCE_POLICIES:
        raise ValueError(f"Unknown zero-variance policy: {on_zero_variance}. "
                         f"Use 'raise' or 'propagate'.")
    return on_zero_variance


def _check_parameters(
    means: VectorLike,
    stds: VectorLike,
    n_columns: int,
    on_zero_variance: str,
    warn: bool = False
) -> Tuple[np.ndarray, np.ndarray]:
    """Validate means/stds against the column count and the zero-variance policy."""
    means = as_vector(means, name="means")
    stds = as_vector(stds, name="stds")
    if len(means) != n_columns:
        raise DimensionMismatch(f"means has {len(means)} entries, expected {n_columns}")
    if len(stds) != n_columns:
        raise DimensionMismatch(f"stds has {len(stds)} entries, expected {n_columns}")

    zero_columns = np.flatnonzero(stds == 0).tolist()
    if zero_columns:
        if on_zero_variance == 'raise':
            raise ZeroVariance(zero_columns)
        if warn:
            logger.warning("Zero standard deviation in column(s) %s, results will contain inf/NaN",
                           zero_columns)
    return means, stds


def _is_mutable_row(row) -> bool:
    if isinstance(row, np.ndarray):
        return row.ndim == 1 and np.issubdtype(row.dtype, np.floating)
    return isinstance(row, list)


def _standardize(data: np.ndarray, means: np.ndarray, stds: np.ndarray) -> np.ndarray:
    with np.errstate(divide='ignore', invalid='ignore'):
        return (data - means) / stds


def mean(matrix: MatrixLike) -> np.ndarray:
    """
    Arithmetic mean of each column.

    Args:
        matrix: Data (n_rows, n_columns), at least one row

    Returns:
        Array of n_columns means

    Raises:
        EmptyDataset: if the matrix has no rows
    """
    data = as_matrix(matrix)
    _require_rows(data, "mean")
    return data.sum(axis=0) / data.shape[0]


def std(matrix: MatrixLike, means: VectorLike) -> np.ndarray:
    """
    Population standard deviation of each column.

    Args:
        matrix: Data (n_rows, n_columns), at least one row
        means: Column means of the same matrix, as returned by mean()

    Returns:
        Array of n_columns standard deviations

    Raises:
        EmptyDataset: if the matrix has no rows
        DimensionMismatch: if len(means) differs from the column count
    """
    data = as_matrix(matrix)
    _require_rows(data, "std")
    means = as_vector(means, name="means")
    if len(means) != data.shape[1]:
        raise DimensionMismatch(f"means has {len(means)} entries, expected {data.shape[1]}")
    return np.sqrt(((data - means) ** 2).sum(axis=0) / data.shape[0])


def normalize(
    matrix: MatrixLike,
    means: VectorLike,
    stds: VectorLike,
    on_zero_variance: str = 'raise'
) -> None:
    """
    Standardize a matrix in place, column by column: (x - mean) / std.

    The matrix itself is rewritten and nothing is returned. Supported
    targets are a list of rows (lists or floating-point arrays), a
    floating-point numpy array and a DataFrame with floating-point columns. Nothing is modified when a
    check fails.

    Args:
        matrix: Data to rewrite (n_rows, n_columns)
        means: Column means (n_columns,)
        stds: Column standard deviations (n_columns,)
        on_zero_variance: 'raise' (default) rejects any zero std with
                          ZeroVariance; 'propagate' divides anyway and
                          leaves inf/NaN in the affected columns

    Raises:
        EmptyDataset: if the matrix has no rows
        DimensionMismatch: if means or stds do not match the column count
        ZeroVariance: if a std is zero and on_zero_variance is 'raise'
        TypeError: if the matrix cannot hold floats in place
    """
    policy = _check_policy(on_zero_variance)

    if isinstance(matrix, pd.DataFrame):
        if not all(np.issubdtype(dtype, np.floating) for dtype in matrix.dtypes):
            raise TypeError("normalize needs a DataFrame with floating-point columns")
    elif isinstance(matrix, np.ndarray):
        if not np.issubdtype(matrix.dtype, np.floating):
            raise TypeError(f"normalize needs a floating-point array, got dtype {matrix.dtype}")
    elif not all(_is_mutable_row(row) for row in matrix):
        raise TypeError("normalize needs mutable rows (lists or float arrays) to rewrite in place")

    data = as_matrix(matrix)
    _require_rows(data, "normalize")
    means, stds = _check_parameters(means, stds, data.shape[1], policy, warn=True)
    result = _standardize(data, means, stds)

    if isinstance(matrix, pd.DataFrame):
        matrix.iloc[:, :] = result
    elif isinstance(matrix, np.ndarray):
        matrix[...] = result
    else:
        for row, values in zip(matrix, result):
            row[:] = values.tolist() if isinstance(row, list) else values
    logger.debug("Normalized %d rows x %d columns in place", data.shape[0], data.shape[1])


def standardize_vector(
    vector: VectorLike,
    means: VectorLike,
    stds: VectorLike,
    on_zero_variance: str = 'raise'
) -> np.ndarray:
    """Return a standardized copy of a single query vector."""
    policy = _check_policy(on_zero_variance)
    vector = as_vector(vector)
    means, stds = _check_parameters(means, stds, len(vector), policy)
    return _standardize(vector, means, stds)


class Standardizer:
    """
    Remembers the column means and stds of a reference matrix.

    Queries passed to Dataset.predict must be standardized with the same
    parameters as the rows the dataset was built from; this class keeps
    them together.

    Example:
        >>> scaler = Standardizer()
        >>> train = scaler.fit_transform(X_train)
        >>> dataset = Dataset(train, labels)
        >>> dataset.predict(scaler.transform_vector(query))
    """

    def __init__(self, on_zero_variance: str = 'raise'):
        self.on_zero_variance = _check_policy(on_zero_variance)
        self.means_: Optional[np.ndarray] = None
        self.stds_: Optional[np.ndarray] = None

    @property
    def is_fitted(self) -> bool:
        return self.means_ is not None

    def fit(self, matrix: MatrixLike) -> "Standardizer":
        """Compute column means and population stds of the reference matrix."""
        data = as_matrix(matrix)
        means = mean(data)
        stds = std(data, means)
        # Zero-variance policy is checked at fit time too
        _check_parameters(means, stds, data.shape[1], self.on_zero_variance, warn=True)
        self.means_, self.stds_ = means, stds
        logger.debug("Fitted standardizer on %d rows x %d columns", data.shape[0], data.shape[1])
        return self

    def _require_fitted(self) -> None:
        if not self.is_fitted:
            raise StandardizerNotFitted("Standardizer is not fitted, call fit() first")

    def transform(self, matrix: MatrixLike) -> np.ndarray:
        """Return a standardized copy of a matrix."""
        self._require_fitted()
        data = as_matrix(matrix)
        _require_rows(data, "transform")
        means, stds = _check_parameters(self.means_, self.stds_, data.shape[1],
                                        self.on_zero_variance)
        return _standardize(data, means, stds)

    def fit_transform(self, matrix: MatrixLike) -> np.ndarray:
        return self.fit(matrix).transform(matrix)

    def transform_vector(self, vector: VectorLike) -> np.ndarray:
        """Return a standardized copy of a single query vector."""
        self._require_fitted()
        return standardize_vector(vector, self.means_, self.stds_,
                                  on_zero_variance=self.on_zero_variance)

    def __repr__(self) -> str:
        n_features = None if self.means_ is None else len(self.means_)
        return (f"Standardizer(fitted={self.is_fitted}, n_features={n_features}, "
                f"on_zero_variance='{self.on_zero_variance}')")
