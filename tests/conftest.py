"""Shared fixtures for nearest-label tests."""

import numpy as np
import pytest
from sklearn.datasets import load_iris
from sklearn.model_selection import train_test_split


@pytest.fixture
def iris_data():
    """Iris split for testing, with species names as labels."""
    iris = load_iris()
    labels = [str(iris.target_names[t]) for t in iris.target]
    X_train, X_test, y_train, y_test = train_test_split(
        iris.data, labels, test_size=0.3, random_state=42, stratify=labels
    )
    return X_train, X_test, y_train, y_test


@pytest.fixture
def random_data():
    """Continuous 3-feature data with two labels (no exact distance ties)."""
    rng = np.random.RandomState(42)
    X_train = rng.randn(50, 3) * [1.0, 10.0, 100.0] + [0.0, 5.0, -50.0]
    y_train = ["pos" if x > 0 else "neg" for x in X_train[:, 0]]
    X_test = rng.randn(20, 3) * [1.0, 10.0, 100.0] + [0.0, 5.0, -50.0]
    return X_train, X_test, y_train


@pytest.fixture
def small_matrix():
    """The 3x2 matrix used by the worked statistics examples."""
    return [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
