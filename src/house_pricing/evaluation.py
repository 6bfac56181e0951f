"""Goodness-of-fit metrics."""

import numpy as np


def r2_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Coefficient of determination, R² = 1 - SS_res / SS_tot.

    The result is not clamped and is negative when the predictions are worse
    than the mean of `y_true`.

    If every value in `y_true` is identical, SS_tot is zero and R² is
    undefined; `nan` is returned in that case.

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        r2: Coefficient of determination, or `nan` for constant `y_true`
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)

    if y_true.size == 0 or np.all(y_true == y_true[0]):
        return float("nan")

    sum_e = np.sum((y_true - y_pred)**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    return float(1.0 - sum_e / sum_s)
