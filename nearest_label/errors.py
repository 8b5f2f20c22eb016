"""
Error types raised when caller input breaks a precondition.
"""

from typing import Sequence


class NearestLabelError(ValueError):
    """Base class for all nearest-label input errors."""


class DimensionMismatch(NearestLabelError):
    """Two lengths that must agree do not."""


class EmptyDataset(NearestLabelError):
    """An operation that needs at least one row was given none."""


class ZeroVariance(NearestLabelError):
    """A column with zero standard deviation cannot be standardized."""

    def __init__(self, columns: Sequence[int]):
        self.columns = list(columns)
        super().__init__(f"Cannot normalize: zero standard deviation in column(s) {self.columns}")


class StandardizerNotFitted(RuntimeError):
    """A Standardizer was used before fit()."""
