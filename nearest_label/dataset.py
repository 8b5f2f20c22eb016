"""
Labeled dataset with exhaustive 1-nearest-neighbor search.
"""

import logging
import numpy as np
import pandas as pd
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .errors import DimensionMismatch, EmptyDataset
from .metrics import compute_all_distances
from .validation import MatrixLike, VectorLike, as_labels, as_matrix, as_vector

logger = logging.getLogger(__name__)


class Neighbor:
    """The dataset row closest to a query."""

    def __init__(
        self,
        index: int,
        distance: float,
        label: str,
        features: np.ndarray
    ):
        self.index = index
        self.distance = distance
        self.label = label
        self.features = features

    def __repr__(self) -> str:
        return f"Neighbor(index={self.index}, distance={self.distance:.4f}, label='{self.label}')"


class Dataset:
    """
    Feature matrix with one string label per row.

    Rows are expected to be normalized already (see Standardizer), and
    queries must be normalized the same way. The dataset keeps its own
    read-only copy of the data and never changes after construction.

    Search is a linear scan over every row. Ties on distance go to the
    row that comes first.

    Example:
        >>> dataset = Dataset([[0.0, 0.0], [10.0, 10.0]], ["A", "B"])
        >>> dataset.predict([1.0, 1.0])
        'A'
    """

    def __init__(
        self,
        matrix: MatrixLike,
        labels: Union[Sequence[str], np.ndarray, pd.Series],
        feature_names: Optional[List[str]] = None
    ):
        """
        Args:
            matrix: Normalized features (n_samples, n_features)
            labels: Label of each row (n_samples,)
            feature_names: Names of features (optional, taken from the
                           columns when matrix is a DataFrame)

        Raises:
            DimensionMismatch: if labels and rows differ in number, or the
                               matrix is ragged
        """
        if isinstance(matrix, pd.DataFrame) and feature_names is None:
            feature_names = [str(c) for c in matrix.columns]

        data = as_matrix(matrix).copy()
        labels = as_labels(labels)
        if len(data) != len(labels):
            raise DimensionMismatch(f"matrix and labels must have same length "
                                    f"(got {len(data)} and {len(labels)})")

        self.n_samples, self.n_features = data.shape
        if feature_names is not None and len(feature_names) != self.n_features:
            raise DimensionMismatch(f"feature_names has {len(feature_names)} entries, "
                                    f"expected {self.n_features}")

        data.flags.writeable = False
        self._matrix = data
        self._labels = labels
        self._feature_names = tuple(feature_names or [f"feature_{i}" for i in range(self.n_features)])
        logger.info("Dataset built on %d rows x %d features", self.n_samples, self.n_features)

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the stored rows."""
        return self._matrix

    @property
    def feature_names(self) -> Tuple[str, ...]:
        return self._feature_names

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    def nearest(self, input: VectorLike) -> Neighbor:
        """
        Find the row closest to input by Euclidean distance.

        Args:
            input: Normalized query (n_features,)

        Returns:
            Neighbor for the closest row; the earliest row wins exact ties

        Raises:
            EmptyDataset: if the dataset has no rows
            DimensionMismatch: if input does not have n_features entries
        """
        if self.n_samples == 0:
            raise EmptyDataset("Cannot predict with an empty dataset")
        query = as_vector(input, name="input")
        if len(query) != self.n_features:
            raise DimensionMismatch(f"input has {len(query)} features, "
                                    f"expected {self.n_features}")

        distances = compute_all_distances(query, self._matrix)
        # Row 0 is the candidate until something is strictly closer
        best_index = 0
        best_distance = float('inf')
        for i, dist in enumerate(distances):
            if dist < best_distance:
                best_distance = dist
                best_index = i

        return Neighbor(
            index=best_index,
            distance=float(distances[best_index]),
            label=self._labels[best_index],
            features=self._matrix[best_index].copy()
        )

    def predict(self, input: VectorLike) -> str:
        """Return the label of the row closest to input."""
        return self.nearest(input).label

    def predict_batch(self, inputs: MatrixLike) -> List[str]:
        """
        Predict a label for each row of a query matrix.

        Args:
            inputs: Normalized queries (n_queries, n_features)

        Returns:
            List of labels, one per query, in order
        """
        queries = as_matrix(inputs, name="inputs")
        return [self.predict(query) for query in queries]

    def get_info(self) -> Dict[str, Any]:
        """Get information about the stored data."""
        label_counts = Counter(self._labels)
        return {
            "n_samples": self.n_samples,
            "n_features": self.n_features,
            "n_labels": len(label_counts),
            "labels": sorted(label_counts),
            "label_counts": dict(label_counts),
            "feature_names": list(self._feature_names)
        }

    def __len__(self) -> int:
        return self.n_samples

    def __repr__(self) -> str:
        return (f"Dataset(n_samples={self.n_samples}, "
                f"n_features={self.n_features}, "
                f"n_labels={len(set(self._labels))})")
