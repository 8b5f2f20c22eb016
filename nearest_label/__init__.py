"""
Nearest-Label: 1-Nearest-Neighbor Classification for Small Tabular Data

Provides exhaustive Euclidean nearest-neighbor search over labeled rows,
plus the column statistics needed to standardize features beforehand.
"""

from .dataset import Dataset, Neighbor
from .errors import (
    DimensionMismatch,
    EmptyDataset,
    NearestLabelError,
    StandardizerNotFitted,
    ZeroVariance,
)
from .metrics import distance
from .statistics import Standardizer, mean, normalize, standardize_vector, std

__version__ = "0.1.0"
__all__ = [
    "Dataset",
    "Neighbor",
    "Standardizer",
    "distance",
    "mean",
    "std",
    "normalize",
    "standardize_vector",
    "NearestLabelError",
    "DimensionMismatch",
    "EmptyDataset",
    "ZeroVariance",
    "StandardizerNotFitted",
]
