"""Design matrix and target vector construction."""

from typing import Sequence

from .data.records import FEATURE_NAMES, HouseFeatures, HouseSample
from .matrix import Matrix


def feature_vector(features: HouseFeatures, intercept: bool = True) -> Matrix:
    """
    Return a 1 x (7 + intercept) row matrix for one house.

    Args:
        features: House features
        intercept: If True, prepend a constant 1. Default: True.
    """
    values = features.as_tuple()
    if intercept:
        values = (1.0,) + values
    return Matrix.from_rows([values])


def design_matrix(samples: Sequence[HouseSample]) -> Matrix:
    """
    Build the design matrix for a training set.

    Args:
        samples: Training samples

    Returns:
        X: Matrix of shape (n_samples, 8). Column 0 is the constant 1,
            columns 1-7 are the features in `FEATURE_NAMES` order.
    """
    X = Matrix(len(samples), len(FEATURE_NAMES) + 1)
    for i, sample in enumerate(samples):
        X[i, 0] = 1.0
        for j, value in enumerate(sample.features.as_tuple(), start=1):
            X[i, j] = value
    return X


def target_vector(samples: Sequence[HouseSample]) -> Matrix:
    """
    Build the target vector for a training set.

    Returns:
        y: Matrix of shape (n_samples, 1) with row i matching row i of
            `design_matrix(samples)`
    """
    y = Matrix(len(samples), 1)
    for i, sample in enumerate(samples):
        y[i, 0] = sample.actual_price
    return y
