"""
Euclidean distance between vectors and from a vector to every matrix row.
"""

import numpy as np
from scipy.spatial import distance as scipy_distance

from .errors import DimensionMismatch
from .validation import MatrixLike, VectorLike, as_matrix, as_vector


def _euclidean(a: np.ndarray, b: np.ndarray) -> float:
    return float(scipy_distance.euclidean(a, b))


def distance(a: VectorLike, b: VectorLike) -> float:
    """
    Calculate Euclidean distance between two points.

    Args:
        a: First point
        b: Second point, same length as a

    Returns:
        Euclidean distance as float

    Raises:
        DimensionMismatch: if the points have different lengths
    """
    a = as_vector(a, name="a")
    b = as_vector(b, name="b")
    if len(a) != len(b):
        raise DimensionMismatch(f"Cannot compute distance between vectors of length "
                                f"{len(a)} and {len(b)}")
    return _euclidean(a, b)


def compute_all_distances(point: VectorLike, data: MatrixLike) -> np.ndarray:
    """
    Compute Euclidean distances from a point to all rows of a dataset.

    Each entry is bit-identical to distance(point, row), so ties seen by
    distance() are ties here too.

    Args:
        point: Query point as 1D sequence
        data: Dataset as 2D matrix (n_samples, n_features)

    Returns:
        Array of distances (n_samples,), in row order
    """
    point = as_vector(point, name="point")
    data = as_matrix(data, name="data")
    if len(data) == 0:
        return np.empty(0, dtype=np.float64)
    if len(point) != data.shape[1]:
        raise DimensionMismatch(f"point has {len(point)} features, "
                                f"expected {data.shape[1]}")
    return np.array([_euclidean(point, row) for row in data], dtype=np.float64)
