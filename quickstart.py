"""
Quickstart example for nearest-label.

Demonstrates standardization and 1-NN prediction with the Iris dataset.
"""

import numpy as np
from sklearn.datasets import load_iris
from sklearn.model_selection import train_test_split
from nearest_label import Dataset, mean, normalize, standardize_vector, std

def main():
    print("=" * 60)
    print("Nearest-Label Quickstart Example")
    print("=" * 60)
    print()
    
    # Load Iris dataset
    print("Loading Iris dataset...")
    iris = load_iris()
    X, y = iris.data, iris.target
    labels = [str(iris.target_names[t]) for t in y]
    
    # Split data
    X_train, X_test, y_train, y_test = train_test_split(
        X, labels, test_size=0.3, random_state=42
    )
    
    print(f"Training samples: {len(X_train)}")
    print(f"Test samples: {len(X_test)}")
    print()
    
    # Standardize training features; keep means/stds for the queries
    means = mean(X_train)
    stds = std(X_train, means)
    normalize(X_train, means, stds)
    print(f"Column means: {np.round(means, 3)}")
    print(f"Column stds:  {np.round(stds, 3)}")
    print()
    
    dataset = Dataset(X_train, y_train, feature_names=iris.feature_names)
    print(dataset)
    print()
    
    # Predict a single sample
    query = standardize_vector(X_test[0], means, stds)
    neighbor = dataset.nearest(query)
    print(f"First test sample: true={y_test[0]}, predicted={neighbor.label}")
    print(f"Closest training row: {neighbor}")
    print()
    
    # Predict all test samples
    queries = [standardize_vector(row, means, stds) for row in X_test]
    predictions = dataset.predict_batch(queries)
    accuracy = np.mean([p == t for p, t in zip(predictions, y_test)])
    print(f"Test accuracy: {accuracy:.2%}")
    
    print()
    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == '__main__':
    main()
