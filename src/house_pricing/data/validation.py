"""
Data validation functions for house training data.

These checks are advisory: they describe problems that would stop the
normal-equations solve (too few samples, constant feature columns) or leave
R² undefined (identical prices) before training is attempted. Non-finite
values are rejected earlier, by the record types. Training itself does not
call these checks.
"""

import numpy as np
from typing import List, Sequence, Tuple

from .records import FEATURE_NAMES, HouseSample

# Intercept plus one coefficient per feature
N_PARAMETERS = len(FEATURE_NAMES) + 1


def find_constant_features(samples: Sequence[HouseSample]) -> List[str]:
    """
    Find features that take the same value in every sample.

    A constant feature column is collinear with the intercept column.

    Args:
        samples: Training samples

    Returns:
        List of feature names, in `FEATURE_NAMES` order
    """
    if len(samples) == 0:
        return []
    values = np.array([s.features.as_tuple() for s in samples])
    return [
        name for j, name in enumerate(FEATURE_NAMES)
        if np.all(values[:, j] == values[0, j])
    ]


def validate_training_data(
    samples: Sequence[HouseSample],
    verbose: bool = False
) -> Tuple[bool, List[str]]:
    """
    Validate that a training set can be fitted by ordinary least squares.

    Checks:
    1. The training set is not empty
    2. There are more samples than model parameters (8)
    3. No feature is constant across all samples
    4. Target values are not all identical (R² would be undefined)

    Args:
        samples: Training samples
        verbose: If True, print validation results

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []

    if len(samples) == 0:
        errors.append("Training set is empty")
    else:
        if len(samples) <= N_PARAMETERS:
            errors.append(
                f"Found {len(samples)} samples, need more than {N_PARAMETERS} "
                "to fit an intercept and 7 coefficients"
            )

        constant = find_constant_features(samples)
        if constant:
            errors.append(f"Constant feature column(s): {', '.join(constant)}")

        prices = np.array([s.actual_price for s in samples])
        if np.all(prices == prices[0]):
            errors.append("All actual_price values are identical; R² is undefined")

    is_valid = len(errors) == 0

    if verbose:
        if is_valid:
            print("All validation checks passed")
        else:
            print(f"Validation failed with {len(errors)} error(s):")
            for error in errors:
                print(f"  {error}")

    return is_valid, errors
